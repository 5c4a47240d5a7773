"""Concrete repository implementation for Project backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.application.interfaces import ProjectRepository
from app.domain.entities import EntityKind, Project
from app.infrastructure.database.mappers import project_to_entity
from app.infrastructure.database.models import ProjectModel
from app.infrastructure.database.ownership import ownership_filter


class SQLAlchemyProjectRepository(ProjectRepository):
    """Projects are owned through their client, so every statement carries that hop."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, user_id: str, project_id: str) -> Project | None:
        stmt = (
            select(ProjectModel)
            .options(joinedload(ProjectModel.client))
            .where(
                ProjectModel.id == project_id,
                ownership_filter(EntityKind.PROJECT, user_id),
            )
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return project_to_entity(model) if model else None

    async def create(self, project: Project) -> Project:
        self._session.add(
            ProjectModel(
                id=project.id,
                client_id=project.client_id,
                name=project.name,
                description=project.description,
                status=project.status.value,
                created_at=project.created_at,
                updated_at=project.updated_at,
            )
        )
        await self._session.flush()
        return project

    async def update(self, user_id: str, project: Project) -> bool:
        stmt = (
            update(ProjectModel)
            .where(
                ProjectModel.id == project.id,
                ownership_filter(EntityKind.PROJECT, user_id),
            )
            .values(
                client_id=project.client_id,
                name=project.name,
                description=project.description,
                status=project.status.value,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def delete(self, user_id: str, project_id: str) -> bool:
        stmt = (
            delete(ProjectModel)
            .where(
                ProjectModel.id == project_id,
                ownership_filter(EntityKind.PROJECT, user_id),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0
