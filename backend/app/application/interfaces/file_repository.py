"""Abstract repository interface (port) for file attachment metadata."""

from abc import ABC, abstractmethod

from app.domain.entities import EntityKind, FileAttachment


class FileRepository(ABC):
    """Port for file metadata persistence, scoped by ``user_id``."""

    @abstractmethod
    async def get(self, user_id: str, file_id: str) -> FileAttachment | None:
        ...

    @abstractmethod
    async def create(self, attachment: FileAttachment) -> FileAttachment:
        ...

    @abstractmethod
    async def delete(self, user_id: str, file_id: str) -> bool:
        ...

    @abstractmethod
    async def storage_paths_under(
        self, user_id: str, kind: EntityKind, entity_id: str
    ) -> list[str]:
        """Storage paths of every file that goes away when the entity is deleted.

        For a client this covers files tagged with the client, any of its
        projects or any of their codebases; for a project, the project and its
        codebases; for a codebase, the codebase alone.
        """
        ...
