from .common import (
    ApiErrorResponse,
    ApiModel,
    ApiResponse,
    DropdownOptionSchema,
    PageSchema,
    PaginationMetaSchema,
    format_validation_errors,
)
from .filters import ListFiltersSchema
from .client import ClientPayload, ClientResponse
from .project import ProjectPayload, ProjectResponse
from .codebase import CodebasePayload, CodebaseResponse
from .link import LinkPayload, LinkResponse
from .files import FileResponse
from .auth import (
    LoginRequest,
    PasswordChangeRequest,
    ProfileUpdateRequest,
    SignupRequest,
    UserResponse,
)
from .stats import CountBucketSchema, DashboardStatsResponse, RecentLinkSchema

__all__ = [
    "ApiErrorResponse",
    "ApiModel",
    "ApiResponse",
    "DropdownOptionSchema",
    "PageSchema",
    "PaginationMetaSchema",
    "format_validation_errors",
    "ListFiltersSchema",
    "ClientPayload",
    "ClientResponse",
    "ProjectPayload",
    "ProjectResponse",
    "CodebasePayload",
    "CodebaseResponse",
    "LinkPayload",
    "LinkResponse",
    "FileResponse",
    "LoginRequest",
    "PasswordChangeRequest",
    "ProfileUpdateRequest",
    "SignupRequest",
    "UserResponse",
    "CountBucketSchema",
    "DashboardStatsResponse",
    "RecentLinkSchema",
]
