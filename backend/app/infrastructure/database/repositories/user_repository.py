"""Concrete repository implementation for User backed by SQLAlchemy."""

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import UserRepository
from app.domain.entities import User
from app.domain.exceptions import DuplicateEntityError
from app.infrastructure.database.mappers import user_to_entity
from app.infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(UserRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, user_id: str) -> User | None:
        model = await self._session.get(UserModel, user_id, populate_existing=True)
        return user_to_entity(model) if model else None

    async def get_by_email(self, email: str) -> User | None:
        result = await self._session.execute(
            select(UserModel).where(UserModel.email == email.strip().lower())
        )
        model = result.scalar_one_or_none()
        return user_to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = UserModel(
            id=user.id,
            email=user.email.strip().lower(),
            name=user.name,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Lost a race with a concurrent signup for the same email.
            raise DuplicateEntityError(
                "User", "email", model.email, message="Email is already in use."
            ) from exc
        return user_to_entity(model)

    async def update_name(self, user_id: str, name: str) -> bool:
        result = await self._session.execute(
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(name=name)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def update_password_hash(self, user_id: str, password_hash: str) -> bool:
        result = await self._session.execute(
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(password_hash=password_hash)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0
