"""SQLAlchemy implementation of the UnitOfWork port."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Commits the request-scoped session; rollback stays with ``get_db_session``."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def commit(self) -> None:
        await self._session.commit()
