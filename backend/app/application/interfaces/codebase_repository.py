"""Abstract repository interface (port) for Codebase persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Codebase


class CodebaseRepository(ABC):
    """Port for codebase persistence, scoped through Project → Client."""

    @abstractmethod
    async def get(self, user_id: str, codebase_id: str) -> Codebase | None:
        ...

    @abstractmethod
    async def create(self, codebase: Codebase) -> Codebase:
        ...

    @abstractmethod
    async def update(
        self, user_id: str, codebase: Codebase, *, cascade_links: bool = False
    ) -> bool:
        """Write the editable fields.

        With ``cascade_links`` every link of this user pointing at the
        codebase is moved to ``codebase.project_id`` in the same transaction.
        Returns False when no owned row matched.
        """
        ...

    @abstractmethod
    async def delete(self, user_id: str, codebase_id: str) -> bool:
        ...
