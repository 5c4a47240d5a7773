"""Domain entity — a bookmarked URL attached to a project and optionally a codebase."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class LinkCategory(str, Enum):
    REPOSITORY = "REPOSITORY"
    SERVER = "SERVER"
    COMMUNICATION = "COMMUNICATION"
    DOCUMENTATION = "DOCUMENTATION"
    DESIGN = "DESIGN"
    TRACKING = "TRACKING"
    OTHER = "OTHER"


@dataclass
class Link:
    """A link stores its owner's id directly.

    ``user_id`` is copied from the authenticated session when the link is
    created and is never changed afterwards; list filtering relies on it.
    """

    user_id: str
    project_id: str
    title: str
    url: str
    category: LinkCategory = LinkCategory.OTHER
    codebase_id: str | None = None
    notes: str | None = None
    project_name: str | None = None
    codebase_name: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
