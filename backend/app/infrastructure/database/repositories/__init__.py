from .client_repository import SQLAlchemyClientRepository
from .codebase_repository import SQLAlchemyCodebaseRepository
from .file_repository import SQLAlchemyFileRepository
from .link_repository import SQLAlchemyLinkRepository
from .listing_repository import SQLAlchemyListingRepository
from .ownership_repository import SQLAlchemyOwnershipRepository
from .project_repository import SQLAlchemyProjectRepository
from .stats_repository import SQLAlchemyStatsRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyClientRepository",
    "SQLAlchemyCodebaseRepository",
    "SQLAlchemyFileRepository",
    "SQLAlchemyLinkRepository",
    "SQLAlchemyListingRepository",
    "SQLAlchemyOwnershipRepository",
    "SQLAlchemyProjectRepository",
    "SQLAlchemyStatsRepository",
    "SQLAlchemyUserRepository",
]
