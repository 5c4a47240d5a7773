from .base import Base
from .session import engine, async_session_factory, get_db_session
from .models import (
    ClientModel,
    CodebaseModel,
    FileModel,
    LinkModel,
    ProjectModel,
    UserModel,
)

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "UserModel",
    "ClientModel",
    "ProjectModel",
    "CodebaseModel",
    "LinkModel",
    "FileModel",
]
