"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.application.services import (
    AttachmentCleanup,
    AuthService,
    ClientService,
    CodebaseService,
    FileService,
    LinkService,
    ListingService,
    OwnershipGuard,
    ProjectService,
    StatsService,
)
from app.domain.exceptions import UnauthorizedError
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.unit_of_work import SQLAlchemyUnitOfWork
from app.infrastructure.database.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyCodebaseRepository,
    SQLAlchemyFileRepository,
    SQLAlchemyLinkRepository,
    SQLAlchemyListingRepository,
    SQLAlchemyOwnershipRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyStatsRepository,
    SQLAlchemyUserRepository,
)
from app.infrastructure.security import BcryptPasswordHasher, JwtSessionCodec
from app.infrastructure.storage.local_file_storage import LocalFileStorage


def get_session_codec() -> JwtSessionCodec:
    settings = get_settings()
    return JwtSessionCodec(settings.jwt_secret, settings.jwt_expires_hours)


def get_file_storage() -> LocalFileStorage:
    return LocalFileStorage(upload_dir=get_settings().upload_dir)


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return None


async def get_current_user_id(
    request: Request,
    codec: JwtSessionCodec = Depends(get_session_codec),
) -> str:
    """Resolve the caller from the session cookie, falling back to a Bearer token.

    Raises UnauthorizedError before any handler logic runs.
    """
    settings = get_settings()
    token = request.cookies.get(settings.session_cookie_name) or _bearer_token(request)
    user_id = codec.decode(token) if token else None
    if user_id is None:
        raise UnauthorizedError()
    return user_id


def _listing(session: AsyncSession) -> ListingService:
    return ListingService(SQLAlchemyListingRepository(session))


def _guard(session: AsyncSession) -> OwnershipGuard:
    return OwnershipGuard(SQLAlchemyOwnershipRepository(session))


def _cleanup(session: AsyncSession, storage: LocalFileStorage) -> AttachmentCleanup:
    return AttachmentCleanup(SQLAlchemyFileRepository(session), storage)


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    codec: JwtSessionCodec = Depends(get_session_codec),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService with bcrypt hashing and JWT sessions."""
    yield AuthService(
        SQLAlchemyUserRepository(session),
        BcryptPasswordHasher(),
        codec,
        SQLAlchemyUnitOfWork(session),
    )


async def get_client_service(
    session: AsyncSession = Depends(get_db_session),
    storage: LocalFileStorage = Depends(get_file_storage),
) -> AsyncGenerator[ClientService, None]:
    yield ClientService(
        SQLAlchemyClientRepository(session),
        _listing(session),
        _cleanup(session, storage),
        SQLAlchemyUnitOfWork(session),
    )


async def get_project_service(
    session: AsyncSession = Depends(get_db_session),
    storage: LocalFileStorage = Depends(get_file_storage),
) -> AsyncGenerator[ProjectService, None]:
    yield ProjectService(
        SQLAlchemyProjectRepository(session),
        _listing(session),
        _guard(session),
        _cleanup(session, storage),
        SQLAlchemyUnitOfWork(session),
    )


async def get_codebase_service(
    session: AsyncSession = Depends(get_db_session),
    storage: LocalFileStorage = Depends(get_file_storage),
) -> AsyncGenerator[CodebaseService, None]:
    """Provides a CodebaseService; reassignment runs inside the request session."""
    yield CodebaseService(
        SQLAlchemyCodebaseRepository(session),
        _listing(session),
        _guard(session),
        _cleanup(session, storage),
        SQLAlchemyUnitOfWork(session),
    )


async def get_link_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[LinkService, None]:
    yield LinkService(
        SQLAlchemyLinkRepository(session),
        _listing(session),
        _guard(session),
        SQLAlchemyUnitOfWork(session),
    )


async def get_file_service(
    session: AsyncSession = Depends(get_db_session),
    storage: LocalFileStorage = Depends(get_file_storage),
) -> AsyncGenerator[FileService, None]:
    """Provides a FileService bound to local disk storage."""
    yield FileService(
        repository=SQLAlchemyFileRepository(session),
        storage=storage,
        listing=_listing(session),
        guard=_guard(session),
        cleanup=_cleanup(session, storage),
        max_size_bytes=get_settings().max_upload_size_bytes,
        unit_of_work=SQLAlchemyUnitOfWork(session),
    )


async def get_stats_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[StatsService, None]:
    yield StatsService(SQLAlchemyStatsRepository(session))
