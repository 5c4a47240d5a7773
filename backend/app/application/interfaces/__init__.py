from .client_repository import ClientRepository
from .codebase_repository import CodebaseRepository
from .file_repository import FileRepository
from .file_storage import FileStorage
from .link_repository import LinkRepository
from .listing_repository import ListingRepository
from .ownership_repository import OwnershipRepository
from .project_repository import ProjectRepository
from .security import PasswordHasher, SessionTokenCodec
from .stats_repository import StatsRepository
from .unit_of_work import UnitOfWork
from .user_repository import UserRepository

__all__ = [
    "ClientRepository",
    "CodebaseRepository",
    "FileRepository",
    "FileStorage",
    "LinkRepository",
    "ListingRepository",
    "OwnershipRepository",
    "ProjectRepository",
    "PasswordHasher",
    "SessionTokenCodec",
    "StatsRepository",
    "UnitOfWork",
    "UserRepository",
]
