"""Car Schemas — response shapes for car listings and car details.

Invariants:
    - brand_country and description are the only optional car fields
    - price is Decimal end to end and serializes as a JSON string
    - sales_history keeps the order the store returned (sold_at descending)
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel


class CarFull(BaseModel):
    """Car joined with its brand and service centre."""
    id: int
    brand_country: str | None = None
    brand_name: str
    name: str
    center_name: str
    price: Decimal
    quantity: int
    description: str | None = None


class OrderSummary(BaseModel):
    """One entry of a car's sales history."""
    id: int
    check_num: int
    quantity: int
    sold_at: date


class CarDetailResponse(BaseModel):
    """A car together with its sales history, most recent first."""
    car_info: CarFull
    sales_history: list[OrderSummary]


class CheapCarRow(BaseModel):
    """Row of the get_cars_cheaper_than_price table function."""
    id: int
    name: str
    price: Decimal
    description: str | None = None
