"""Concrete repository implementation for Link backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.application.interfaces import LinkRepository
from app.domain.entities import EntityKind, Link
from app.infrastructure.database.mappers import link_to_entity
from app.infrastructure.database.models import LinkModel
from app.infrastructure.database.ownership import ownership_filter


class SQLAlchemyLinkRepository(LinkRepository):
    """Links carry their owner directly; ``user_id`` is never rewritten."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, user_id: str, link_id: str) -> Link | None:
        stmt = (
            select(LinkModel)
            .options(joinedload(LinkModel.project), joinedload(LinkModel.codebase))
            .where(
                LinkModel.id == link_id,
                ownership_filter(EntityKind.LINK, user_id),
            )
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return link_to_entity(model) if model else None

    async def create(self, link: Link) -> Link:
        self._session.add(
            LinkModel(
                id=link.id,
                user_id=link.user_id,
                project_id=link.project_id,
                codebase_id=link.codebase_id,
                title=link.title,
                url=link.url,
                category=link.category.value,
                notes=link.notes,
                created_at=link.created_at,
                updated_at=link.updated_at,
            )
        )
        await self._session.flush()
        return link

    async def update(self, user_id: str, link: Link) -> bool:
        stmt = (
            update(LinkModel)
            .where(
                LinkModel.id == link.id,
                ownership_filter(EntityKind.LINK, user_id),
            )
            .values(
                project_id=link.project_id,
                codebase_id=link.codebase_id,
                title=link.title,
                url=link.url,
                category=link.category.value,
                notes=link.notes,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def delete(self, user_id: str, link_id: str) -> bool:
        stmt = (
            delete(LinkModel)
            .where(
                LinkModel.id == link_id,
                ownership_filter(EntityKind.LINK, user_id),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0
