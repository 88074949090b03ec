import pytest


@pytest.fixture
async def milk(client):
    response = await client.post(
        "/house/inventory/",
        json={"name": "Milk", "supermarket": "Walmart", "last_price": 2.0, "inventory_level": "low"},
    )
    return response.json()


async def test_supermarkets(client):
    response = await client.get("/shopping/supermarkets")
    assert response.json() == ["Walmart", "Pricesmart", "Super Selectos", "Agromercado"]


async def test_preview(client, milk):
    response = await client.post(
        "/shopping/preview",
        json={
            "house_items": [
                {"product_id": milk["id"], "product_name": "Milk", "price": 2.5, "supermarket": "Walmart"},
                {"product_name": "Bread", "price": 1, "supermarket": "Walmart"},
            ],
            "airbnb_items": [{"product_name": "Soap", "price": 3, "supplier": "CleanPro"}],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["house"]["total"] == 3.5
    assert body["house"]["items"][0]["last_price"] == 2.0
    assert body["house"]["items"][0]["price_difference"] == 0.5
    assert body["house"]["items"][1]["price_difference"] is None
    assert body["airbnb"]["total"] == 3
    assert body["combined_total"] == 6.5


async def test_checkout(client, milk):
    response = await client.post(
        "/shopping/checkout",
        json={
            "house_items": [
                {"product_id": milk["id"], "product_name": "Milk", "price": 2.5, "supermarket": "Walmart"},
                {"product_name": "Bread", "brand": "Bimbo", "price": 1.5, "supermarket": "Pricesmart"},
                {"product_name": "Cheese", "price": 4, "supermarket": "Walmart"},
            ],
            "airbnb_items": [{"product_name": "Soap", "price": 6, "supplier": "CleanPro"}],
            "purchase_date": "2024-05-10",
        },
    )

    assert response.status_code == 201
    result = response.json()
    assert result["house"]["total_amount"] == 8
    assert result["house"]["store"] == "Walmart"
    assert result["house"]["expense_description"] == "Groceries - Walmart, Pricesmart"
    assert result["house"]["item_count"] == 3
    assert result["airbnb"]["expense_description"] == "Supplies - CleanPro"

    house_expenses = (await client.get("/house/expenses/")).json()["entries"]
    assert len(house_expenses) == 1
    assert house_expenses[0]["amount"] == 8
    assert house_expenses[0]["category"] == "groceries"
    assert house_expenses[0]["date"] == "2024-05-10"
    airbnb_expenses = (await client.get("/airbnb/expenses/")).json()["entries"]
    assert airbnb_expenses[0]["category"] == "supplies"

    products = {p["name"]: p for p in (await client.get("/house/inventory/")).json()}
    assert sorted(products) == ["Bread", "Cheese", "Milk"]
    assert products["Milk"]["last_price"] == 2.5
    assert products["Milk"]["inventory_level"] == "full"
    assert products["Milk"]["last_purchase_date"] == "2024-05-10"
    assert products["Bread"]["supermarket"] == "Pricesmart"
    assert products["Bread"]["brand"] == "Bimbo"
    assert [p["name"] for p in (await client.get("/airbnb/inventory/")).json()] == ["Soap"]

    carts = (await client.get("/shopping/carts/house")).json()
    assert len(carts) == 1
    assert carts[0]["supermarket"] == "Walmart"
    assert carts[0]["is_completed"] is True
    assert carts[0]["id"] == result["house"]["cart_id"]
    assert sorted(item["product_name"] for item in carts[0]["items"]) == ["Bread", "Cheese", "Milk"]


async def test_checkout_of_one_cart(client):
    response = await client.post(
        "/shopping/checkout",
        json={"airbnb_items": [{"product_name": "Towels", "price": 20, "supplier": "Hotel Supply"}]},
    )

    assert response.status_code == 201
    assert response.json()["house"] is None
    assert (await client.get("/shopping/carts/house")).json() == []
    assert len((await client.get("/shopping/carts/airbnb")).json()) == 1


async def test_empty_carts_are_rejected(client):
    response = await client.post("/shopping/checkout", json={"house_items": [], "airbnb_items": []})

    assert response.status_code == 400
    assert response.json()["detail"] == "Both carts are empty"


async def test_house_items_need_a_supermarket(client):
    response = await client.post(
        "/shopping/checkout",
        json={"house_items": [{"product_name": "Milk", "price": 2, "supermarket": ""}]},
    )
    assert response.status_code == 422


async def test_unknown_product_rolls_back_checkout(client):
    response = await client.post(
        "/shopping/checkout",
        json={
            "house_items": [
                {"product_name": "Bread", "price": 1, "supermarket": "Walmart"},
                {"product_id": "missing", "product_name": "Milk", "price": 2, "supermarket": "Walmart"},
            ],
        },
    )

    assert response.status_code == 404
    assert (await client.get("/shopping/carts/house")).json() == []
    assert (await client.get("/house/expenses/")).json()["entries"] == []
    assert (await client.get("/house/inventory/")).json() == []


async def test_free_item_keeps_expense_list_readable(client):
    response = await client.post(
        "/shopping/checkout",
        json={"house_items": [{"product_name": "Free sample", "price": 0, "supermarket": "Walmart"}]},
    )
    assert response.status_code == 201
    assert response.json()["house"]["total_amount"] == 0

    response = await client.get("/house/expenses/")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 0
    assert body["entries"][0]["amount"] == 0
    assert body["entries"][0]["description"] == "Groceries - Walmart"
