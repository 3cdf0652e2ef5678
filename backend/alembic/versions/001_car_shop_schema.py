"""Car shop schema — brand, carcentres, cars, orders.

Revision ID: 001_car_shop_schema
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_car_shop_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "brand",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("country_code", sa.String(3), nullable=True),
    )

    op.create_table(
        "carcentres",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("address", sa.Text, nullable=True),
    )

    op.create_table(
        "cars",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("brand_id", sa.Integer, sa.ForeignKey("brand.id"), nullable=False),
        sa.Column("car_centre_id", sa.Integer, sa.ForeignKey("carcentres.id"), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="0"),
        sa.Column("description", sa.Text, nullable=True),
        sa.CheckConstraint("price >= 0", name="ck_cars_price_nonnegative"),
        sa.CheckConstraint("quantity >= 0", name="ck_cars_quantity_nonnegative"),
    )

    op.create_table(
        "orders",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("car_id", sa.Integer, sa.ForeignKey("cars.id"), nullable=False),
        sa.Column("check_num", sa.Integer, nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False),
        sa.Column("sold_at", sa.Date, nullable=False, server_default=sa.func.current_date()),
        sa.CheckConstraint("quantity > 0", name="ck_orders_quantity_positive"),
    )
    op.create_index("ix_orders_car_id", "orders", ["car_id"])


def downgrade() -> None:
    op.drop_index("ix_orders_car_id", table_name="orders")
    op.drop_table("orders")
    op.drop_table("cars")
    op.drop_table("carcentres")
    op.drop_table("brand")
