"""Abstract repository interface (port) for ownership-scoped list queries."""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities import EntityKind, ListFilters


class ListingRepository(ABC):
    """Port for the count + bounded fetch behind every list endpoint.

    Implementations must always apply the ownership predicate for ``kind``
    and ``user_id``; ``filters`` and ``search`` only narrow that set.
    """

    @abstractmethod
    async def count(
        self,
        kind: EntityKind,
        user_id: str,
        *,
        filters: ListFilters,
        search: str = "",
    ) -> int:
        """Count the rows matching ownership, filters and search."""
        ...

    @abstractmethod
    async def fetch(
        self,
        kind: EntityKind,
        user_id: str,
        *,
        filters: ListFilters,
        search: str = "",
        skip: int = 0,
        take: int | None = None,
        dropdown: bool = False,
    ) -> list[Any]:
        """Fetch one window of rows.

        Returns ``DropdownOption`` items ordered by label when ``dropdown`` is
        set, otherwise full domain entities ordered by most recent update.
        """
        ...
