"""Application service for the dashboard overview."""

from app.application.interfaces import StatsRepository
from app.domain.entities import DashboardStats

RECENT_LINKS_LIMIT = 5


class StatsService:

    def __init__(self, repository: StatsRepository):
        self._repository = repository

    async def get_stats(self, user_id: str) -> DashboardStats:
        return await self._repository.get_dashboard_stats(
            user_id, recent_limit=RECENT_LINKS_LIMIT
        )
