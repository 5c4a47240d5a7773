"""SQLAlchemy lookups backing the mutation guard."""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import OwnershipRepository
from app.domain.entities import EntityKind
from app.infrastructure.database.models import ClientModel, CodebaseModel, ProjectModel
from app.infrastructure.database.ownership import ownership_filter


class SQLAlchemyOwnershipRepository(OwnershipRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _exists(self, *clauses) -> bool:
        result = await self._session.execute(select(exists().where(*clauses)))
        return bool(result.scalar())

    async def client_exists(self, user_id: str, client_id: str) -> bool:
        return await self._exists(
            ClientModel.id == client_id,
            ownership_filter(EntityKind.CLIENT, user_id),
        )

    async def project_exists(self, user_id: str, project_id: str) -> bool:
        return await self._exists(
            ProjectModel.id == project_id,
            ownership_filter(EntityKind.PROJECT, user_id),
        )

    async def codebase_exists_in_project(
        self, user_id: str, codebase_id: str, project_id: str
    ) -> bool:
        return await self._exists(
            CodebaseModel.id == codebase_id,
            CodebaseModel.project_id == project_id,
            ownership_filter(EntityKind.CODEBASE, user_id),
        )
