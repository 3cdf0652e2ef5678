"""End-to-end routes over SQLite — real repository, real joins, no fakes.

Design Decisions:
    - Only the plain-SQL endpoints run here; routines need PostgreSQL
"""

from decimal import Decimal


async def test_cars_joined_from_tables(sqlite_client, seed_rows):
    res = await sqlite_client.get("/cars")
    assert res.status_code == 200
    body = res.json()
    assert {c["name"] for c in body} == {"Camry", "Corolla", "Niva"}
    niva = next(c for c in body if c["name"] == "Niva")
    assert niva["brand_name"] == "Lada"
    assert niva["brand_country"] is None
    assert niva["center_name"] == "North Centre"
    assert Decimal(niva["price"]) == Decimal("9000.25")


async def test_details_from_tables(sqlite_client, seed_rows):
    res = await sqlite_client.get("/cars/1/details")
    assert res.status_code == 200
    body = res.json()
    assert body["car_info"]["name"] == "Camry"
    assert [o["sold_at"] for o in body["sales_history"]] == [
        "2024-03-05", "2024-01-10", "2023-12-24",
    ]


async def test_details_unknown_car_from_tables(sqlite_client, seed_rows):
    res = await sqlite_client.get("/cars/42/details")
    assert res.status_code == 404
    assert res.json() == {"error": "Car with id 42 not found"}


async def test_sales_totals_from_tables(sqlite_client, seed_rows):
    body = (await sqlite_client.get("/sales")).json()
    assert len(body) == 4
    for order in body:
        assert Decimal(order["total"]) == order["quantity"] * Decimal(order["price"])
