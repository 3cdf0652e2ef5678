"""Sale Schemas — full order projection and the add-sale request.

Invariants:
    - OrderFull.total is computed by the store (quantity * price), never by clients
    - AddSaleRequest declares types only; stock and name rules live in add_car_sale
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SALE_QUANTITY = 1
SALE_PROCESSED_MESSAGE = "Sale processed successfully"


class OrderFull(BaseModel):
    """Order joined with the sold car, its brand and centre."""
    id: int
    check_num: int
    centre_name: str
    car_id: int
    car_brand: str
    car_name: str
    price: Decimal
    quantity: int
    total: Decimal
    sold_at: date


class AddSaleRequest(BaseModel):
    """Sell a car found by name."""
    car_name: str = Field(
        description="Name of the car (partial case insensitive search)",
    )
    check_num: int | None = Field(
        None, description="Optional check number. If not provided, it will be generated",
    )
    quantity: int | None = Field(
        None, description="Quantity to sell, defaults to 1",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"car_name": "camry", "check_num": 1042, "quantity": 1}],
        },
    )

    @property
    def effective_quantity(self) -> int:
        return self.quantity if self.quantity is not None else DEFAULT_SALE_QUANTITY
