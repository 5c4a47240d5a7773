"""Abstract repository interface (port) for parent ownership lookups."""

from abc import ABC, abstractmethod


class OwnershipRepository(ABC):
    """Existence-and-ownership checks used before writes that reference a parent."""

    @abstractmethod
    async def client_exists(self, user_id: str, client_id: str) -> bool:
        ...

    @abstractmethod
    async def project_exists(self, user_id: str, project_id: str) -> bool:
        ...

    @abstractmethod
    async def codebase_exists_in_project(
        self, user_id: str, codebase_id: str, project_id: str
    ) -> bool:
        """True only if the codebase belongs to ``project_id`` and to ``user_id``."""
        ...
