"""Request Dependencies — per-request repository built from the pooled session.

Invariants:
    - One AsyncSession per request, returned to the pool when the request ends
    - Routes see only the CarShopRepository protocol
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from car_shop.core.repository_protocols import CarShopRepository
from car_shop.infrastructure.car_shop_repository import SqlCarShopRepository
from car_shop.infrastructure.database import get_db


async def get_repository(
    db: AsyncSession = Depends(get_db),
) -> CarShopRepository:
    """FastAPI dependency for the car shop repository."""
    return SqlCarShopRepository(db)
