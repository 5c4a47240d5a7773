from .user import UserModel
from .client import ClientModel
from .project import ProjectModel
from .codebase import CodebaseModel
from .link import LinkModel
from .file import FileModel

__all__ = [
    "UserModel",
    "ClientModel",
    "ProjectModel",
    "CodebaseModel",
    "LinkModel",
    "FileModel",
]
