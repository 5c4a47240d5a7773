"""Application service (use case) for Client operations."""

import logging
from collections.abc import Mapping

from app.application.interfaces import ClientRepository, UnitOfWork
from app.application.schemas.client import ClientPayload
from app.application.services.attachment_cleanup import AttachmentCleanup
from app.application.services.listing_service import ListingService
from app.domain.entities import Client, EntityKind, Page
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ClientService:
    """Orchestrates client CRUD logic. Depends on the repository port (DI)."""

    def __init__(
        self,
        repository: ClientRepository,
        listing: ListingService,
        cleanup: AttachmentCleanup,
        unit_of_work: UnitOfWork,
    ):
        self._repository = repository
        self._listing = listing
        self._cleanup = cleanup
        self._unit_of_work = unit_of_work

    async def list_clients(self, user_id: str, params: Mapping[str, str]) -> Page:
        return await self._listing.list_entities(user_id, EntityKind.CLIENT, params)

    async def get_client(self, user_id: str, client_id: str) -> Client:
        client = await self._repository.get(user_id, client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    async def create_client(self, user_id: str, data: ClientPayload) -> Client:
        client = Client(user_id=user_id, **data.model_dump())
        client.apply_engagement_rules()
        created = await self._repository.create(client)
        await self._unit_of_work.commit()
        logger.info("Created client %s for user %s", created.id, user_id)
        return created

    async def update_client(
        self, user_id: str, client_id: str, data: ClientPayload
    ) -> Client:
        client = Client(id=client_id, user_id=user_id, **data.model_dump())
        client.apply_engagement_rules()
        if not await self._repository.update(user_id, client):
            raise EntityNotFoundError("Client", client_id)
        await self._unit_of_work.commit()
        return await self.get_client(user_id, client_id)

    async def delete_client(self, user_id: str, client_id: str) -> None:
        blobs = await self._cleanup.collect(user_id, EntityKind.CLIENT, client_id)
        if not await self._repository.delete(user_id, client_id):
            raise EntityNotFoundError("Client", client_id)
        await self._unit_of_work.commit()
        await self._cleanup.discard(blobs)
        logger.info("Deleted client %s (%d blobs)", client_id, len(blobs))
