"""Domain entity — an uploaded file tagged with optional client/project/codebase scopes."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class FileAttachment:
    """Metadata of a stored blob.

    The scope tags are loose: they are checked for ownership on upload but
    are not re-validated against the hierarchy when the file is read.
    """

    user_id: str
    filename: str
    storage_path: str
    mime_type: str
    size_bytes: int
    client_id: str | None = None
    project_id: str | None = None
    codebase_id: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
