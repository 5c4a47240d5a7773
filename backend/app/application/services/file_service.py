"""Application service (use case) for file attachments: upload, list, download, delete."""

import logging
import mimetypes
from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError

from app.application.interfaces import FileRepository, FileStorage, UnitOfWork
from app.application.schemas.common import format_validation_errors
from app.application.schemas.filters import ListFiltersSchema
from app.application.services.attachment_cleanup import AttachmentCleanup
from app.application.services.listing_service import ListingService
from app.application.services.ownership_guard import OwnershipGuard
from app.domain.entities import EntityKind, FileAttachment, Page
from app.domain.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)


class FileService:
    """Stores uploaded blobs and their metadata, scoped to the uploading user."""

    def __init__(
        self,
        repository: FileRepository,
        storage: FileStorage,
        listing: ListingService,
        guard: OwnershipGuard,
        cleanup: AttachmentCleanup,
        max_size_bytes: int,
        unit_of_work: UnitOfWork,
    ):
        self._repository = repository
        self._storage = storage
        self._listing = listing
        self._guard = guard
        self._cleanup = cleanup
        self._max_size_bytes = max_size_bytes
        self._unit_of_work = unit_of_work

    async def list_files(self, user_id: str, params: Mapping[str, str]) -> Page:
        return await self._listing.list_entities(user_id, EntityKind.FILE, params)

    async def get_file(self, user_id: str, file_id: str) -> FileAttachment:
        attachment = await self._repository.get(user_id, file_id)
        if attachment is None:
            raise EntityNotFoundError("File", file_id)
        return attachment

    async def upload_file(
        self,
        user_id: str,
        *,
        filename: str,
        content: bytes,
        content_type: str | None = None,
        client_id: str | None = None,
        project_id: str | None = None,
        codebase_id: str | None = None,
        allowed_mime_types: list[str] | None = None,
    ) -> FileAttachment:
        """Validate scope tags, store the blob, then record its metadata."""
        if not content:
            raise ValidationError("No file provided.", {"file": ["No file provided."]})
        if len(content) > self._max_size_bytes:
            limit_mb = round(self._max_size_bytes / (1024 * 1024))
            message = f"File exceeds maximum size of {limit_mb}MB."
            raise ValidationError(message, {"file": [message]})

        mime_type = (
            content_type
            or mimetypes.guess_type(filename)[0]
            or "application/octet-stream"
        )
        if allowed_mime_types and mime_type not in allowed_mime_types:
            message = "File type is not allowed."
            raise ValidationError(message, {"file": [message]})

        try:
            scope = ListFiltersSchema.model_validate(
                {"clientId": client_id, "projectId": project_id, "codebaseId": codebase_id}
            )
        except PydanticValidationError as exc:
            raise ValidationError(
                "Invalid file scope.", format_validation_errors(exc.errors())
            ) from exc

        if scope.codebase_id and not scope.project_id:
            message = "A codebase requires a project to be selected."
            raise ValidationError(message, {"codebaseId": [message]})
        if scope.client_id:
            await self._guard.require_client(user_id, scope.client_id)
        if scope.project_id:
            await self._guard.require_project(user_id, scope.project_id)
            if scope.codebase_id:
                await self._guard.require_codebase_for_project(
                    user_id, scope.codebase_id, scope.project_id
                )

        storage_path = self._storage.allocate_path(user_id, filename)
        await self._storage.save(storage_path, content)

        attachment = FileAttachment(
            user_id=user_id,
            filename=filename,
            storage_path=storage_path,
            mime_type=mime_type,
            size_bytes=len(content),
            client_id=scope.client_id,
            project_id=scope.project_id,
            codebase_id=scope.codebase_id,
        )
        try:
            created = await self._repository.create(attachment)
            await self._unit_of_work.commit()
        except Exception:
            # The metadata row never landed; drop the blob written for it.
            await self._cleanup.discard([storage_path])
            raise
        logger.info("Stored file %s (%d bytes) at %s", created.id, created.size_bytes, storage_path)
        return created

    async def download_file(self, user_id: str, file_id: str) -> tuple[FileAttachment, bytes]:
        attachment = await self.get_file(user_id, file_id)
        try:
            content = await self._storage.read(attachment.storage_path)
        except FileNotFoundError:
            raise EntityNotFoundError(
                "File", file_id, message="File not found on disk."
            ) from None
        return attachment, content

    async def delete_file(self, user_id: str, file_id: str) -> None:
        attachment = await self.get_file(user_id, file_id)
        if not await self._repository.delete(user_id, file_id):
            raise EntityNotFoundError("File", file_id)
        await self._unit_of_work.commit()
        await self._cleanup.discard([attachment.storage_path])
        logger.info("Deleted file %s", file_id)
