"""Stats Routes — scalar database functions."""

from fastapi import APIRouter, Depends

from car_shop.api.dependencies import get_repository
from car_shop.core.repository_protocols import CarShopRepository
from car_shop.schemas.stats import StatsResponse

router = APIRouter(prefix="/stats", tags=["Car Shop"])


@router.get(
    "/cheaper-than-avg",
    response_model=StatsResponse,
    responses={200: {"description": "Count retrieved"}},
)
async def get_stats_cheaper_than_avg(
    repo: CarShopRepository = Depends(get_repository),
):
    """Count cars that are cheaper than average."""
    count = await repo.count_cars_cheaper_than_average()
    return StatsResponse(count=count)
