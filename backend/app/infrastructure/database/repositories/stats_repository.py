"""SQLAlchemy aggregation queries for the dashboard overview."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.application.interfaces import StatsRepository
from app.domain.entities import CountBucket, DashboardStats, EntityKind, RecentLink
from app.infrastructure.database.models import (
    ClientModel,
    CodebaseModel,
    LinkModel,
    ProjectModel,
)
from app.infrastructure.database.ownership import ownership_filter


class SQLAlchemyStatsRepository(StatsRepository):
    """Every aggregate reuses the same ownership predicates as the list endpoints."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _count(self, kind: EntityKind, model, user_id: str) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(model).where(ownership_filter(kind, user_id))
        )
        return result.scalar_one()

    async def _group(self, kind: EntityKind, column, user_id: str) -> list[CountBucket]:
        count = func.count()
        result = await self._session.execute(
            select(column, count)
            .where(ownership_filter(kind, user_id))
            .group_by(column)
            .order_by(count.desc(), column.asc())
        )
        return [CountBucket(name=name, count=total) for name, total in result.all()]

    async def _recent_links(self, user_id: str, limit: int) -> list[RecentLink]:
        result = await self._session.execute(
            select(LinkModel)
            .options(joinedload(LinkModel.project), joinedload(LinkModel.codebase))
            .where(ownership_filter(EntityKind.LINK, user_id))
            .order_by(LinkModel.updated_at.desc(), LinkModel.id.desc())
            .limit(limit)
        )
        return [
            RecentLink(
                id=link.id,
                title=link.title,
                url=link.url,
                category=link.category,
                project_name=link.project.name,
                codebase_name=link.codebase.name if link.codebase else None,
                updated_at=link.updated_at,
            )
            for link in result.scalars().all()
        ]

    async def get_dashboard_stats(self, user_id: str, *, recent_limit: int = 5) -> DashboardStats:
        return DashboardStats(
            total_clients=await self._count(EntityKind.CLIENT, ClientModel, user_id),
            total_projects=await self._count(EntityKind.PROJECT, ProjectModel, user_id),
            total_codebases=await self._count(EntityKind.CODEBASE, CodebaseModel, user_id),
            total_links=await self._count(EntityKind.LINK, LinkModel, user_id),
            projects_by_status=await self._group(
                EntityKind.PROJECT, ProjectModel.status, user_id
            ),
            codebases_by_type=await self._group(
                EntityKind.CODEBASE, CodebaseModel.type, user_id
            ),
            links_by_category=await self._group(
                EntityKind.LINK, LinkModel.category, user_id
            ),
            recent_links=await self._recent_links(user_id, recent_limit),
        )
