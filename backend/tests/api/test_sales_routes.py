"""Sale routes — full sales listing and the add_car_sale procedure call.

Invariants:
    - total == quantity * price exactly, for every order
    - business-rule failures from the store → 400 with the store message
    - omitted quantity is sent as 1; omitted check_num is sent as null
"""

from decimal import Decimal


async def test_get_sales_totals_are_exact(client):
    res = await client.get("/sales")
    assert res.status_code == 200
    body = res.json()
    assert len(body) == 4
    for order in body:
        assert Decimal(order["total"]) == order["quantity"] * Decimal(order["price"])


async def test_get_sales_row_shape(client):
    body = (await client.get("/sales")).json()
    corolla = next(o for o in body if o["id"] == 3)
    assert corolla == {
        "id": 3,
        "check_num": 103,
        "centre_name": "South Centre",
        "car_id": 2,
        "car_brand": "Toyota",
        "car_name": "Corolla",
        "price": "20000.50",
        "quantity": 3,
        "total": "60001.50",
        "sold_at": "2024-02-01",
    }


async def test_add_sale_success_message(client, fake_repo):
    res = await client.post(
        "/sales", json={"car_name": "camry", "check_num": 500, "quantity": 2},
    )
    assert res.status_code == 200
    assert res.json() == "Sale processed successfully"
    assert fake_repo.sale_calls == [("camry", 500, 2)]
    assert fake_repo.cars[0]["quantity"] == 3


async def test_add_sale_without_quantity_sells_one(client, fake_repo):
    res = await client.post("/sales", json={"car_name": "NIVA"})
    assert res.status_code == 200
    assert fake_repo.sale_calls == [("NIVA", None, 1)]


async def test_add_sale_omitted_quantity_matches_explicit_one(client, fake_repo):
    await client.post("/sales", json={"car_name": "corolla"})
    await client.post("/sales", json={"car_name": "corolla", "quantity": 1})
    assert fake_repo.sale_calls[0][2] == fake_repo.sale_calls[1][2] == 1


async def test_add_sale_null_quantity_sells_one(client, fake_repo):
    res = await client.post("/sales", json={"car_name": "camry", "quantity": None})
    assert res.status_code == 200
    assert fake_repo.sale_calls[-1] == ("camry", None, 1)


async def test_add_sale_unknown_car_returns_store_message(client):
    res = await client.post("/sales", json={"car_name": "tesla"})
    assert res.status_code == 400
    assert res.json() == {"error": "Car matching 'tesla' not found"}


async def test_add_sale_ambiguous_name_returns_400(client):
    # every car name contains an "a"
    res = await client.post("/sales", json={"car_name": "a"})
    assert res.status_code == 400
    assert res.json() == {"error": "Car name 'a' is ambiguous (3 matches)"}


async def test_add_sale_insufficient_stock_returns_400(client, fake_repo):
    res = await client.post("/sales", json={"car_name": "niva", "quantity": 2})
    assert res.status_code == 400
    assert res.json() == {
        "error": "Not enough cars in stock (available 1, requested 2)",
    }
    assert fake_repo.cars[2]["quantity"] == 1


async def test_add_sale_generated_check_number(client, fake_repo):
    await client.post("/sales", json={"car_name": "camry"})
    assert fake_repo.orders[-1]["check_num"] == 105


async def test_add_sale_missing_car_name_returns_400(client, fake_repo):
    res = await client.post("/sales", json={"quantity": 1})
    assert res.status_code == 400
    assert "car_name" in res.json()["error"]
    assert fake_repo.sale_calls == []


async def test_add_sale_non_integer_quantity_returns_400(client, fake_repo):
    res = await client.post("/sales", json={"car_name": "camry", "quantity": "many"})
    assert res.status_code == 400
    assert fake_repo.sale_calls == []
