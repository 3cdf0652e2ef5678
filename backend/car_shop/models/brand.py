"""Brand ORM — car manufacturer with an optional country code."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from car_shop.db.base import Base


class Brand(Base):
    __tablename__ = "brand"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    country_code: Mapped[str | None] = mapped_column(String(3), nullable=True)
