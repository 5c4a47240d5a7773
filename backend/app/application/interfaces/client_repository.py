"""Abstract repository interface (port) for Client persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Client


class ClientRepository(ABC):
    """Port for client persistence — implemented in the infrastructure layer.

    Every read and write is scoped by the owning user.
    """

    @abstractmethod
    async def get(self, user_id: str, client_id: str) -> Client | None:
        ...

    @abstractmethod
    async def create(self, client: Client) -> Client:
        ...

    @abstractmethod
    async def update(self, user_id: str, client: Client) -> bool:
        """Write the editable fields. Returns False when no owned row matched."""
        ...

    @abstractmethod
    async def delete(self, user_id: str, client_id: str) -> bool:
        ...
