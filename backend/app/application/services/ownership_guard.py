"""Mutation guard — verifies referenced parents before a child is written."""

from app.application.interfaces import OwnershipRepository
from app.domain.exceptions import EntityNotFoundError


class OwnershipGuard:
    """Existence-and-ownership checks for parent ids in write payloads.

    A parent that does not exist and a parent owned by someone else produce
    the same not-found error.
    """

    def __init__(self, repository: OwnershipRepository):
        self._repository = repository

    async def require_client(self, user_id: str, client_id: str) -> None:
        if not await self._repository.client_exists(user_id, client_id):
            raise EntityNotFoundError("Client", client_id)

    async def require_project(self, user_id: str, project_id: str) -> None:
        if not await self._repository.project_exists(user_id, project_id):
            raise EntityNotFoundError("Project", project_id)

    async def require_codebase_for_project(
        self, user_id: str, codebase_id: str, project_id: str
    ) -> None:
        if not await self._repository.codebase_exists_in_project(
            user_id, codebase_id, project_id
        ):
            raise EntityNotFoundError(
                "Codebase",
                codebase_id,
                message="Codebase not found for the selected project.",
            )
