"""Domain entity — a repository or deployable belonging to a project."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class CodebaseType(str, Enum):
    WEB = "WEB"
    API = "API"
    MOBILE_ANDROID = "MOBILE_ANDROID"
    MOBILE_IOS = "MOBILE_IOS"
    DESKTOP = "DESKTOP"
    INFRA = "INFRA"
    OTHER = "OTHER"


@dataclass
class Codebase:
    """Owned transitively through Project → Client.

    ``client_id``, ``client_name`` and ``project_name`` are read-only display
    fields resolved from the parent chain.
    """

    project_id: str
    name: str
    type: CodebaseType = CodebaseType.OTHER
    description: str | None = None
    client_id: str | None = None
    client_name: str | None = None
    project_name: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
