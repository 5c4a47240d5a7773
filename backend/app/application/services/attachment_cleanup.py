"""Best-effort removal of file blobs that belong to deleted entities."""

import logging

from app.application.interfaces import FileRepository, FileStorage
from app.domain.entities import EntityKind

logger = logging.getLogger(__name__)


class AttachmentCleanup:
    """Collects blob paths before a delete and discards them afterwards.

    Blob removal is not transactional with the database delete: a blob that
    cannot be removed is logged and left behind.
    """

    def __init__(self, file_repository: FileRepository, storage: FileStorage):
        self._file_repository = file_repository
        self._storage = storage

    async def collect(self, user_id: str, kind: EntityKind, entity_id: str) -> list[str]:
        return await self._file_repository.storage_paths_under(user_id, kind, entity_id)

    async def discard(self, storage_paths: list[str]) -> None:
        for path in storage_paths:
            try:
                await self._storage.delete(path)
            except OSError:
                logger.warning("Could not remove blob %s", path, exc_info=True)
