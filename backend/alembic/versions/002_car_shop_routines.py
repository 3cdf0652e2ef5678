"""Car shop routines — add_car_sale procedure, price functions.

Revision ID: 002_car_shop_routines
Revises: 001_car_shop_schema
Create Date: 2026-10-19

add_car_sale raises plain RAISE EXCEPTION (SQLSTATE P0001); the API passes
those messages to clients as 400 responses.
"""
from typing import Sequence, Union

from alembic import op

revision: str = "002_car_shop_routines"
down_revision: Union[str, None] = "001_car_shop_schema"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ADD_CAR_SALE = """
CREATE OR REPLACE PROCEDURE add_car_sale(
    p_car_name VARCHAR,
    p_check_num INTEGER DEFAULT NULL,
    p_quantity INTEGER DEFAULT 1
)
LANGUAGE plpgsql
AS $$
DECLARE
    v_matches INTEGER;
    v_car_id INTEGER;
    v_stock INTEGER;
    v_check_num INTEGER;
BEGIN
    IF p_quantity IS NULL OR p_quantity <= 0 THEN
        RAISE EXCEPTION 'Quantity must be positive';
    END IF;

    SELECT count(*) INTO v_matches
    FROM cars
    WHERE name ILIKE '%' || p_car_name || '%';

    IF v_matches = 0 THEN
        RAISE EXCEPTION 'Car matching ''%'' not found', p_car_name;
    ELSIF v_matches > 1 THEN
        RAISE EXCEPTION 'Car name ''%'' is ambiguous (% matches)', p_car_name, v_matches;
    END IF;

    SELECT id, quantity INTO v_car_id, v_stock
    FROM cars
    WHERE name ILIKE '%' || p_car_name || '%'
    FOR UPDATE;

    IF v_stock < p_quantity THEN
        RAISE EXCEPTION 'Not enough cars in stock (available %, requested %)',
            v_stock, p_quantity;
    END IF;

    v_check_num := COALESCE(
        p_check_num,
        (SELECT COALESCE(MAX(check_num), 0) + 1 FROM orders)
    );

    INSERT INTO orders (car_id, check_num, quantity, sold_at)
    VALUES (v_car_id, v_check_num, p_quantity, CURRENT_DATE);

    UPDATE cars SET quantity = quantity - p_quantity WHERE id = v_car_id;
END;
$$
"""

COUNT_CARS_CHEAPER_THAN_AVERAGE = """
CREATE OR REPLACE FUNCTION count_cars_cheaper_than_average()
RETURNS INTEGER
LANGUAGE sql
STABLE
AS $$
    SELECT count(*)::int
    FROM cars
    WHERE price < (SELECT avg(price) FROM cars);
$$
"""

GET_CARS_CHEAPER_THAN_PRICE = """
CREATE OR REPLACE FUNCTION get_cars_cheaper_than_price(p_price NUMERIC)
RETURNS TABLE (id INTEGER, model VARCHAR, price NUMERIC, description TEXT)
LANGUAGE sql
STABLE
AS $$
    SELECT c.id, c.name, c.price, c.description
    FROM cars c
    WHERE c.price < p_price
    ORDER BY c.price, c.id;
$$
"""


def upgrade() -> None:
    op.execute(ADD_CAR_SALE)
    op.execute(COUNT_CARS_CHEAPER_THAN_AVERAGE)
    op.execute(GET_CARS_CHEAPER_THAN_PRICE)


def downgrade() -> None:
    op.execute("DROP FUNCTION IF EXISTS get_cars_cheaper_than_price(NUMERIC)")
    op.execute("DROP FUNCTION IF EXISTS count_cars_cheaper_than_average()")
    op.execute("DROP PROCEDURE IF EXISTS add_car_sale(VARCHAR, INTEGER, INTEGER)")
