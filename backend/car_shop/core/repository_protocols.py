"""Boundary Protocols — contract between the HTTP handlers and the store.

Invariants:
    - Handlers depend on CarShopRepository, never on a concrete session
    - Row-returning methods yield plain dicts keyed by response field names
    - get_car returns None for an unknown id; the caller decides on 404

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests pass an in-memory fake
"""

from decimal import Decimal
from typing import Protocol


class CarShopRepository(Protocol):
    """Contract for car shop data access, implemented by infrastructure."""
    async def list_cars(self) -> list[dict]: ...
    async def list_sales(self) -> list[dict]: ...
    async def get_car(self, car_id: int) -> dict | None: ...
    async def list_car_orders(self, car_id: int) -> list[dict]: ...
    async def add_sale(
        self, car_name: str, check_num: int | None, quantity: int,
    ) -> None: ...
    async def count_cars_cheaper_than_average(self) -> int: ...
    async def list_cars_cheaper_than(self, price: Decimal) -> list[dict]: ...
