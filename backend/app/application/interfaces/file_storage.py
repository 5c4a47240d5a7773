"""Abstract interface (port) for blob storage of uploaded files."""

from abc import ABC, abstractmethod


class FileStorage(ABC):
    """Opaque blob store addressed by relative storage paths."""

    @abstractmethod
    def allocate_path(self, owner_id: str, filename: str) -> str:
        """Return a fresh, collision-free storage path for a new blob."""
        ...

    @abstractmethod
    async def save(self, storage_path: str, content: bytes) -> None:
        ...

    @abstractmethod
    async def read(self, storage_path: str) -> bytes:
        """Raises FileNotFoundError if the blob is missing."""
        ...

    @abstractmethod
    async def delete(self, storage_path: str) -> None:
        """Remove a blob. A blob that is already gone is not an error."""
        ...
