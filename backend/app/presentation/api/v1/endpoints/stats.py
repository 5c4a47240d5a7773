"""Dashboard overview endpoint."""

from fastapi import APIRouter, Depends

from app.application.schemas import ApiResponse, DashboardStatsResponse
from app.application.services import StatsService
from app.infrastructure.dependencies import get_current_user_id, get_stats_service
from app.presentation.api.errors import unavailable_on_failure

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("", response_model=ApiResponse[DashboardStatsResponse])
async def get_stats(
    user_id: str = Depends(get_current_user_id),
    service: StatsService = Depends(get_stats_service),
) -> ApiResponse[DashboardStatsResponse]:
    """Totals, breakdowns and the most recently updated links."""
    with unavailable_on_failure("Unable to fetch stats right now."):
        stats = await service.get_stats(user_id)
    return ApiResponse[DashboardStatsResponse](
        data=DashboardStatsResponse.model_validate(stats)
    )
