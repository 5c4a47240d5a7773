"""Domain entity — a piece of work for a client."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class ProjectStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    ARCHIVED = "ARCHIVED"


@dataclass
class Project:
    """Owned transitively through its client.

    ``client_name`` is a display field filled in when the project is read,
    never written.
    """

    client_id: str
    name: str
    status: ProjectStatus = ProjectStatus.ACTIVE
    description: str | None = None
    client_name: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
