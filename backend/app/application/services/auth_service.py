"""Application service for account signup, login and profile lookup."""

import logging

from app.application.interfaces import (
    PasswordHasher,
    SessionTokenCodec,
    UnitOfWork,
    UserRepository,
)
from app.application.schemas.auth import (
    LoginRequest,
    PasswordChangeRequest,
    ProfileUpdateRequest,
    SignupRequest,
)
from app.domain.entities import User
from app.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Thin wrapper over the user store and the hashing/token collaborators."""

    def __init__(
        self,
        repository: UserRepository,
        hasher: PasswordHasher,
        tokens: SessionTokenCodec,
        unit_of_work: UnitOfWork,
    ):
        self._repository = repository
        self._hasher = hasher
        self._tokens = tokens
        self._unit_of_work = unit_of_work

    async def signup(self, data: SignupRequest) -> User:
        if await self._repository.get_by_email(data.email) is not None:
            raise DuplicateEntityError(
                "User", "email", data.email, message="Email is already in use."
            )
        user = User(
            email=data.email,
            name=data.name,
            password_hash=self._hasher.hash(data.password),
        )
        created = await self._repository.create(user)
        await self._unit_of_work.commit()
        logger.info("Registered user %s", created.id)
        return created

    async def login(self, data: LoginRequest) -> tuple[User, str]:
        """Return the user and a fresh session token."""
        user = await self._repository.get_by_email(data.email)
        if user is None or not self._hasher.verify(data.password, user.password_hash):
            raise UnauthorizedError("Invalid email or password.")
        return user, self._tokens.issue(user.id)

    async def get_profile(self, user_id: str) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise UnauthorizedError()
        return user

    async def update_profile(self, user_id: str, data: ProfileUpdateRequest) -> User:
        if not await self._repository.update_name(user_id, data.name):
            raise EntityNotFoundError("User", user_id)
        await self._unit_of_work.commit()
        return await self.get_profile(user_id)

    async def change_password(self, user_id: str, data: PasswordChangeRequest) -> None:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        if not self._hasher.verify(data.current_password, user.password_hash):
            message = "Current password is incorrect."
            raise ValidationError(message, {"currentPassword": [message]})
        await self._repository.update_password_hash(
            user_id, self._hasher.hash(data.new_password)
        )
        await self._unit_of_work.commit()
        logger.info("Changed password for user %s", user_id)
