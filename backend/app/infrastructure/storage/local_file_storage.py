"""Local filesystem storage for uploaded file blobs.

Storage layout:
    <upload_dir>/<owner_id>/<uuid4><ext>

Storage paths handed out and accepted by this adapter are relative to
``upload_dir``; callers treat them as opaque strings.
"""

import logging
from pathlib import Path, PurePosixPath
from uuid import uuid4

from app.application.interfaces import FileStorage

logger = logging.getLogger(__name__)


class LocalFileStorage(FileStorage):
    """Infrastructure adapter for local file storage."""

    def __init__(self, upload_dir: str):
        self._upload_dir = Path(upload_dir).resolve()
        self._upload_dir.mkdir(parents=True, exist_ok=True)

    def _resolve(self, storage_path: str) -> Path:
        """Absolute path for ``storage_path``; refuses paths that escape upload_dir."""
        full_path = (self._upload_dir / storage_path).resolve()
        if not full_path.is_relative_to(self._upload_dir):
            raise ValueError(f"Storage path escapes upload directory: {storage_path}")
        return full_path

    def allocate_path(self, owner_id: str, filename: str) -> str:
        """Return ``<owner_id>/<uuid4><ext>``; the original name never reaches disk."""
        suffix = Path(filename).suffix.lower()
        return str(PurePosixPath(owner_id) / f"{uuid4()}{suffix}")

    async def save(self, storage_path: str, content: bytes) -> None:
        dest_path = self._resolve(storage_path)
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        dest_path.write_bytes(content)
        logger.info("Stored blob: %s (%d bytes)", storage_path, len(content))

    async def read(self, storage_path: str) -> bytes:
        return self._resolve(storage_path).read_bytes()

    async def delete(self, storage_path: str) -> None:
        """Remove a blob from disk; a missing blob is ignored.

        Empty owner directories are left in place.
        """
        self._resolve(storage_path).unlink(missing_ok=True)
        logger.info("Deleted blob from disk: %s", storage_path)
