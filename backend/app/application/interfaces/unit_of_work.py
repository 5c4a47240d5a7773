"""Abstract interface (port) for committing the work of one request."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Services commit through this port before reporting success.

    A failed commit must raise, so the caller never sees a success envelope
    for writes that were rolled back.
    """

    @abstractmethod
    async def commit(self) -> None:
        ...
