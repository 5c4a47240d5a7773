"""Application service (use case) for Project operations."""

import logging
from collections.abc import Mapping

from app.application.interfaces import ProjectRepository, UnitOfWork
from app.application.schemas.project import ProjectPayload
from app.application.services.attachment_cleanup import AttachmentCleanup
from app.application.services.listing_service import ListingService
from app.application.services.ownership_guard import OwnershipGuard
from app.domain.entities import EntityKind, Page, Project
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ProjectService:
    """Project CRUD; the parent client is guarded on every write."""

    def __init__(
        self,
        repository: ProjectRepository,
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

    async def list_projects(self, user_id: str, params: Mapping[str, str]) -> Page:
        return await self._listing.list_entities(user_id, EntityKind.PROJECT, params)

    async def get_project(self, user_id: str, project_id: str) -> Project:
        project = await self._repository.get(user_id, project_id)
        if project is None:
            raise EntityNotFoundError("Project", project_id)
        return project

    async def create_project(self, user_id: str, data: ProjectPayload) -> Project:
        await self._guard.require_client(user_id, data.client_id)
        created = await self._repository.create(Project(**data.model_dump()))
        await self._unit_of_work.commit()
        logger.info("Created project %s under client %s", created.id, data.client_id)
        return await self.get_project(user_id, created.id)

    async def update_project(
        self, user_id: str, project_id: str, data: ProjectPayload
    ) -> Project:
        await self._guard.require_client(user_id, data.client_id)
        project = Project(id=project_id, **data.model_dump())
        if not await self._repository.update(user_id, project):
            raise EntityNotFoundError("Project", project_id)
        await self._unit_of_work.commit()
        return await self.get_project(user_id, project_id)

    async def delete_project(self, user_id: str, project_id: str) -> None:
        blobs = await self._cleanup.collect(user_id, EntityKind.PROJECT, project_id)
        if not await self._repository.delete(user_id, project_id):
            raise EntityNotFoundError("Project", project_id)
        await self._unit_of_work.commit()
        await self._cleanup.discard(blobs)
        logger.info("Deleted project %s (%d blobs)", project_id, len(blobs))
