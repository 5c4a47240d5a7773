"""Abstract repository interface (port) for Link persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Link


class LinkRepository(ABC):
    """Port for link persistence, scoped by the link's own ``user_id``."""

    @abstractmethod
    async def get(self, user_id: str, link_id: str) -> Link | None:
        ...

    @abstractmethod
    async def create(self, link: Link) -> Link:
        ...

    @abstractmethod
    async def update(self, user_id: str, link: Link) -> bool:
        """Write the editable fields; ``user_id`` itself is never rewritten."""
        ...

    @abstractmethod
    async def delete(self, user_id: str, link_id: str) -> bool:
        ...
