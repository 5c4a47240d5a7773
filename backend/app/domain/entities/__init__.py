from .user import User
from .client import Client, EngagementType
from .project import Project, ProjectStatus
from .codebase import Codebase, CodebaseType
from .link import Link, LinkCategory
from .file_attachment import FileAttachment
from .listing import (
    DropdownOption,
    EntityKind,
    ListFilters,
    ListQuery,
    Page,
    PageBounds,
    PaginationMeta,
)
from .stats import CountBucket, DashboardStats, RecentLink

__all__ = [
    "User",
    "Client",
    "EngagementType",
    "Project",
    "ProjectStatus",
    "Codebase",
    "CodebaseType",
    "Link",
    "LinkCategory",
    "FileAttachment",
    "DropdownOption",
    "EntityKind",
    "ListFilters",
    "ListQuery",
    "Page",
    "PageBounds",
    "PaginationMeta",
    "CountBucket",
    "DashboardStats",
    "RecentLink",
]
