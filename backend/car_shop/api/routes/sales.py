"""Sale Routes — sales listing and the add-sale stored procedure.

Invariants:
    - POST /sales never inspects the car name or stock; add_car_sale does
    - An omitted quantity is sent to the store as 1
"""

import logging

from fastapi import APIRouter, Depends

from car_shop.api.dependencies import get_repository
from car_shop.core.repository_protocols import CarShopRepository
from car_shop.schemas.sale import (
    AddSaleRequest, OrderFull, SALE_PROCESSED_MESSAGE,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/sales", tags=["Car Shop"])


@router.get(
    "",
    response_model=list[OrderFull],
    responses={200: {"description": "Sales info found"}},
)
async def get_sales(repo: CarShopRepository = Depends(get_repository)):
    """Get detailed info about sales."""
    rows = await repo.list_sales()
    return [OrderFull(**row) for row in rows]


@router.post(
    "",
    response_model=str,
    responses={
        200: {"description": "Sale registered successfully"},
        400: {"description": "Business Logic Error (e.g. Car not found)"},
    },
)
async def add_sale(
    payload: AddSaleRequest, repo: CarShopRepository = Depends(get_repository),
):
    """Find a car by name and add a car sale with it."""
    await repo.add_sale(
        payload.car_name, payload.check_num, payload.effective_quantity,
    )
    return SALE_PROCESSED_MESSAGE
