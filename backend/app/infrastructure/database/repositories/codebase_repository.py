"""Concrete repository implementation for Codebase backed by SQLAlchemy."""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.application.interfaces import CodebaseRepository
from app.domain.entities import Codebase, EntityKind
from app.infrastructure.database.mappers import codebase_to_entity
from app.infrastructure.database.models import CodebaseModel, LinkModel, ProjectModel
from app.infrastructure.database.ownership import ownership_filter

logger = logging.getLogger(__name__)


class SQLAlchemyCodebaseRepository(CodebaseRepository):
    """Codebases are owned through Project → Client."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, user_id: str, codebase_id: str) -> Codebase | None:
        stmt = (
            select(CodebaseModel)
            .options(joinedload(CodebaseModel.project).joinedload(ProjectModel.client))
            .where(
                CodebaseModel.id == codebase_id,
                ownership_filter(EntityKind.CODEBASE, user_id),
            )
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return codebase_to_entity(model) if model else None

    async def create(self, codebase: Codebase) -> Codebase:
        self._session.add(
            CodebaseModel(
                id=codebase.id,
                project_id=codebase.project_id,
                name=codebase.name,
                type=codebase.type.value,
                description=codebase.description,
                created_at=codebase.created_at,
                updated_at=codebase.updated_at,
            )
        )
        await self._session.flush()
        return codebase

    async def update(
        self, user_id: str, codebase: Codebase, *, cascade_links: bool = False
    ) -> bool:
        stmt = (
            update(CodebaseModel)
            .where(
                CodebaseModel.id == codebase.id,
                ownership_filter(EntityKind.CODEBASE, user_id),
            )
            .values(
                project_id=codebase.project_id,
                name=codebase.name,
                type=codebase.type.value,
                description=codebase.description,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            return False

        if cascade_links:
            moved = await self._session.execute(
                update(LinkModel)
                .where(
                    LinkModel.codebase_id == codebase.id,
                    LinkModel.user_id == user_id,
                )
                .values(project_id=codebase.project_id)
                .execution_options(synchronize_session=False)
            )
            logger.debug(
                "Moved %d links with codebase %s to project %s",
                moved.rowcount, codebase.id, codebase.project_id,
            )
        return True

    async def delete(self, user_id: str, codebase_id: str) -> bool:
        stmt = (
            delete(CodebaseModel)
            .where(
                CodebaseModel.id == codebase_id,
                ownership_filter(EntityKind.CODEBASE, user_id),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0
