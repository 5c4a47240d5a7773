"""Application service (use case) for Codebase operations."""

import logging
from collections.abc import Mapping

from app.application.interfaces import CodebaseRepository, UnitOfWork
from app.application.schemas.codebase import CodebasePayload
from app.application.services.attachment_cleanup import AttachmentCleanup
from app.application.services.listing_service import ListingService
from app.application.services.ownership_guard import OwnershipGuard
from app.domain.entities import Codebase, EntityKind, Page
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class CodebaseService:
    """Codebase CRUD, including reassignment to another project.

    Moving a codebase drags its links along so no link ends up pointing at
    a codebase from a different project.
    """

    def __init__(
        self,
        repository: CodebaseRepository,
        listing: ListingService,
        guard: OwnershipGuard,
        cleanup: AttachmentCleanup,
        unit_of_work: UnitOfWork,
    ):
        self._repository = repository
        self._listing = listing
        self._guard = guard
        self._cleanup = cleanup
        self._unit_of_work = unit_of_work

    async def list_codebases(self, user_id: str, params: Mapping[str, str]) -> Page:
        return await self._listing.list_entities(user_id, EntityKind.CODEBASE, params)

    async def get_codebase(self, user_id: str, codebase_id: str) -> Codebase:
        codebase = await self._repository.get(user_id, codebase_id)
        if codebase is None:
            raise EntityNotFoundError("Codebase", codebase_id)
        return codebase

    async def create_codebase(self, user_id: str, data: CodebasePayload) -> Codebase:
        await self._guard.require_project(user_id, data.project_id)
        created = await self._repository.create(Codebase(**data.model_dump()))
        await self._unit_of_work.commit()
        logger.info("Created codebase %s under project %s", created.id, data.project_id)
        return await self.get_codebase(user_id, created.id)

    async def update_codebase(
        self, user_id: str, codebase_id: str, data: CodebasePayload
    ) -> Codebase:
        existing = await self.get_codebase(user_id, codebase_id)
        await self._guard.require_project(user_id, data.project_id)

        moved = existing.project_id != data.project_id
        codebase = Codebase(id=codebase_id, **data.model_dump())
        if not await self._repository.update(user_id, codebase, cascade_links=moved):
            raise EntityNotFoundError("Codebase", codebase_id)
        await self._unit_of_work.commit()
        if moved:
            logger.info(
                "Moved codebase %s from project %s to %s",
                codebase_id, existing.project_id, data.project_id,
            )
        return await self.get_codebase(user_id, codebase_id)

    async def delete_codebase(self, user_id: str, codebase_id: str) -> None:
        blobs = await self._cleanup.collect(user_id, EntityKind.CODEBASE, codebase_id)
        if not await self._repository.delete(user_id, codebase_id):
            raise EntityNotFoundError("Codebase", codebase_id)
        await self._unit_of_work.commit()
        await self._cleanup.discard(blobs)
        logger.info("Deleted codebase %s (%d blobs)", codebase_id, len(blobs))
