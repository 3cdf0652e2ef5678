"""Car Routes — car listings, car details with sales history, cheap cars.

Invariants:
    - GET /cars/{id}/details is two sequential reads (car, then its orders),
      not one transaction; a sale landing in between is tolerated
    - Unknown car id → ResourceNotFoundError ("Car with id {id} not found")
    - Price threshold is parsed as Decimal; unparsable values are a 400
"""

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends

from car_shop.api.dependencies import get_repository
from car_shop.core.errors import ResourceNotFoundError
from car_shop.core.repository_protocols import CarShopRepository
from car_shop.schemas.car import (
    CarDetailResponse, CarFull, CheapCarRow, OrderSummary,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/cars", tags=["Car Shop"])


@router.get(
    "",
    response_model=list[CarFull],
    responses={200: {"description": "Cars info found"}},
)
async def get_cars(repo: CarShopRepository = Depends(get_repository)):
    """List all cars."""
    rows = await repo.list_cars()
    return [CarFull(**row) for row in rows]


@router.get(
    "/cheaper-than/{price}",
    response_model=list[CheapCarRow],
    responses={200: {"description": "List of cheap cars"}},
)
async def get_cars_cheaper_than(
    price: Decimal, repo: CarShopRepository = Depends(get_repository),
):
    """List cars cheaper than price."""
    rows = await repo.list_cars_cheaper_than(price)
    return [CheapCarRow(**row) for row in rows]


@router.get(
    "/{car_id}/details",
    response_model=CarDetailResponse,
    responses={
        200: {"description": "Car details found"},
        404: {"description": "Car not found"},
    },
)
async def get_car_details(
    car_id: int, repo: CarShopRepository = Depends(get_repository),
):
    """Get detailed info about a car and its sales history."""
    car = await repo.get_car(car_id)
    if car is None:
        raise ResourceNotFoundError("Car", car_id)
    orders = await repo.list_car_orders(car_id)
    return CarDetailResponse(
        car_info=CarFull(**car),
        sales_history=[OrderSummary(**o) for o in orders],
    )
