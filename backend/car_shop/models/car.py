"""Car ORM — stock unit belonging to exactly one brand and one centre.

Invariants:
    - brand_id and car_centre_id are enforced by foreign keys in the store
    - price is NUMERIC(12, 2); Python side always sees Decimal
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from car_shop.db.base import Base


class Car(Base):
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    brand_id: Mapped[int] = mapped_column(
        ForeignKey("brand.id"), nullable=False,
    )
    car_centre_id: Mapped[int] = mapped_column(
        ForeignKey("carcentres.id"), nullable=False,
    )
    price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2, asdecimal=True), nullable=False,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
