from .attachment_cleanup import AttachmentCleanup
from .auth_service import AuthService
from .client_service import ClientService
from .codebase_service import CodebaseService
from .file_service import FileService
from .link_service import LinkService
from .listing_service import ListingService
from .ownership_guard import OwnershipGuard
from .project_service import ProjectService
from .stats_service import StatsService

__all__ = [
    "AttachmentCleanup",
    "AuthService",
    "ClientService",
    "CodebaseService",
    "FileService",
    "LinkService",
    "ListingService",
    "OwnershipGuard",
    "ProjectService",
    "StatsService",
]
