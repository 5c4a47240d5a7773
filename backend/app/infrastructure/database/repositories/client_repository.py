"""Concrete repository implementation for Client backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ClientRepository
from app.domain.entities import Client, EntityKind
from app.infrastructure.database.mappers import client_to_entity
from app.infrastructure.database.models import ClientModel
from app.infrastructure.database.ownership import ownership_filter


class SQLAlchemyClientRepository(ClientRepository):
    """Implements the ClientRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_model(self, entity: Client) -> ClientModel:
        """Map domain entity → ORM model (for creation)."""
        return ClientModel(
            id=entity.id,
            user_id=entity.user_id,
            name=entity.name,
            engagement_type=entity.engagement_type.value,
            working_days_per_week=entity.working_days_per_week,
            working_hours_per_day=entity.working_hours_per_day,
            email=entity.email,
            phone=entity.phone,
            whatsapp=entity.whatsapp,
            address=entity.address,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get(self, user_id: str, client_id: str) -> Client | None:
        stmt = (
            select(ClientModel)
            .where(
                ClientModel.id == client_id,
                ownership_filter(EntityKind.CLIENT, user_id),
            )
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return client_to_entity(model) if model else None

    async def create(self, client: Client) -> Client:
        model = self._to_model(client)
        self._session.add(model)
        await self._session.flush()
        return client_to_entity(model)

    async def update(self, user_id: str, client: Client) -> bool:
        stmt = (
            update(ClientModel)
            .where(
                ClientModel.id == client.id,
                ownership_filter(EntityKind.CLIENT, user_id),
            )
            .values(
                name=client.name,
                engagement_type=client.engagement_type.value,
                working_days_per_week=client.working_days_per_week,
                working_hours_per_day=client.working_hours_per_day,
                email=client.email,
                phone=client.phone,
                whatsapp=client.whatsapp,
                address=client.address,
                notes=client.notes,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def delete(self, user_id: str, client_id: str) -> bool:
        stmt = (
            delete(ClientModel)
            .where(
                ClientModel.id == client_id,
                ownership_filter(EntityKind.CLIENT, user_id),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0
