"""Car Shop Repository — SQL statements, procedure and function calls behind the API.

Invariants:
    - Every value reaches the store as a bound parameter
    - Rows are returned as dicts keyed by response field names
    - Store errors propagate unchanged; nothing here catches them
    - add_sale delegates validation and mutation to the add_car_sale
      procedure and commits only after it succeeds

Design Decisions:
    - SQLAlchemy select() over the ORM tables for joins: typed columns give
      Decimal prices and date values without manual conversion
    - Database routines are called through func.* / text() so the store
      keeps ownership of the business rules (name resolution, stock checks)
"""

import logging
from decimal import Decimal

from sqlalchemy import Integer, Numeric, String, Text, bindparam, column, func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from car_shop.models import Brand, Car, CarCentre, Order

logger = logging.getLogger(__name__)

PRICE_TYPE = Numeric(12, 2, asdecimal=True)
# Unscaled so the threshold is compared exactly, not rounded to cents
THRESHOLD_TYPE = Numeric(asdecimal=True)

_ADD_CAR_SALE = text(
    "CALL add_car_sale(:car_name, :check_num, :quantity)"
).bindparams(
    bindparam("car_name", type_=String),
    bindparam("check_num", type_=Integer),
    bindparam("quantity", type_=Integer),
)


def _cars_query():
    """Cars joined with brand and centre, projected onto CarFull fields."""
    return (
        select(
            Car.id,
            Car.name,
            Brand.name.label("brand_name"),
            Brand.country_code.label("brand_country"),
            CarCentre.name.label("center_name"),
            Car.price,
            Car.quantity,
            Car.description,
        )
        .join(Brand, Car.brand_id == Brand.id)
        .join(CarCentre, Car.car_centre_id == CarCentre.id)
    )


def _sales_query():
    """Orders joined with car, brand and centre; total computed by the store."""
    return (
        select(
            Order.id,
            Order.car_id,
            Order.check_num,
            Order.quantity,
            Order.sold_at,
            Car.price,
            Car.name.label("car_name"),
            Brand.name.label("car_brand"),
            CarCentre.name.label("centre_name"),
            (Order.quantity * Car.price).label("total"),
        )
        .join(Car, Order.car_id == Car.id)
        .join(Brand, Car.brand_id == Brand.id)
        .join(CarCentre, Car.car_centre_id == CarCentre.id)
    )


def _cheaper_than_price(price: Decimal):
    """Table-valued call of get_cars_cheaper_than_price($1)."""
    return func.get_cars_cheaper_than_price(
        bindparam("price", price, type_=THRESHOLD_TYPE),
    ).table_valued(
        column("id", Integer),
        column("model", String),
        column("price", PRICE_TYPE),
        column("description", Text),
        name="cheap_cars",
    )


class SqlCarShopRepository:
    """CarShopRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_cars(self) -> list[dict]:
        result = await self._db.execute(_cars_query())
        return [dict(row) for row in result.mappings()]

    async def list_sales(self) -> list[dict]:
        result = await self._db.execute(_sales_query())
        return [dict(row) for row in result.mappings()]

    async def get_car(self, car_id: int) -> dict | None:
        result = await self._db.execute(_cars_query().where(Car.id == car_id))
        row = result.mappings().one_or_none()
        return dict(row) if row is not None else None

    async def list_car_orders(self, car_id: int) -> list[dict]:
        """Sales history of one car, most recent first."""
        stmt = (
            select(Order.id, Order.check_num, Order.quantity, Order.sold_at)
            .where(Order.car_id == car_id)
            .order_by(Order.sold_at.desc(), Order.id.desc())
        )
        result = await self._db.execute(stmt)
        return [dict(row) for row in result.mappings()]

    async def add_sale(
        self, car_name: str, check_num: int | None, quantity: int,
    ) -> None:
        await self._db.execute(
            _ADD_CAR_SALE,
            {"car_name": car_name, "check_num": check_num, "quantity": quantity},
        )
        await self._db.commit()
        logger.info(
            f"Sale recorded for '{car_name}' (quantity {quantity})",
        )

    async def count_cars_cheaper_than_average(self) -> int:
        stmt = select(func.count_cars_cheaper_than_average(type_=Integer))
        result = await self._db.execute(stmt)
        # An empty cars table has no average; report zero cars below it
        return result.scalar_one() or 0

    async def list_cars_cheaper_than(self, price: Decimal) -> list[dict]:
        cheap = _cheaper_than_price(price)
        stmt = select(
            cheap.c.id,
            cheap.c.model.label("name"),
            cheap.c.price,
            cheap.c.description,
        )
        result = await self._db.execute(stmt)
        return [dict(row) for row in result.mappings()]
