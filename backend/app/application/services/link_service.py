"""Application service (use case) for Link operations."""

import logging
from collections.abc import Mapping

from app.application.interfaces import LinkRepository, UnitOfWork
from app.application.schemas.link import LinkPayload
from app.application.services.listing_service import ListingService
from app.application.services.ownership_guard import OwnershipGuard
from app.domain.entities import EntityKind, Link, Page
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class LinkService:
    """Link CRUD. The owner is always the caller, never the payload."""

    def __init__(
        self,
        repository: LinkRepository,
        listing: ListingService,
        guard: OwnershipGuard,
        unit_of_work: UnitOfWork,
    ):
        self._repository = repository
        self._listing = listing
        self._guard = guard
        self._unit_of_work = unit_of_work

    async def list_links(self, user_id: str, params: Mapping[str, str]) -> Page:
        return await self._listing.list_entities(user_id, EntityKind.LINK, params)

    async def get_link(self, user_id: str, link_id: str) -> Link:
        link = await self._repository.get(user_id, link_id)
        if link is None:
            raise EntityNotFoundError("Link", link_id)
        return link

    async def _check_parents(self, user_id: str, data: LinkPayload) -> None:
        # Project first; the codebase must then sit under that same project.
        await self._guard.require_project(user_id, data.project_id)
        if data.codebase_id:
            await self._guard.require_codebase_for_project(
                user_id, data.codebase_id, data.project_id
            )

    async def create_link(self, user_id: str, data: LinkPayload) -> Link:
        await self._check_parents(user_id, data)
        created = await self._repository.create(Link(user_id=user_id, **data.model_dump()))
        await self._unit_of_work.commit()
        logger.info("Created link %s in project %s", created.id, data.project_id)
        return await self.get_link(user_id, created.id)

    async def update_link(self, user_id: str, link_id: str, data: LinkPayload) -> Link:
        await self._check_parents(user_id, data)
        link = Link(id=link_id, user_id=user_id, **data.model_dump())
        if not await self._repository.update(user_id, link):
            raise EntityNotFoundError("Link", link_id)
        await self._unit_of_work.commit()
        return await self.get_link(user_id, link_id)

    async def delete_link(self, user_id: str, link_id: str) -> None:
        if not await self._repository.delete(user_id, link_id):
            raise EntityNotFoundError("Link", link_id)
        await self._unit_of_work.commit()
