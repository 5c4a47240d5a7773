"""Abstract repository interface (port) for dashboard statistics."""

from abc import ABC, abstractmethod

from app.domain.entities import DashboardStats


class StatsRepository(ABC):

    @abstractmethod
    async def get_dashboard_stats(self, user_id: str, *, recent_limit: int = 5) -> DashboardStats:
        """Totals and breakdowns across everything ``user_id`` owns."""
        ...
