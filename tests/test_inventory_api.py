async def create_product(client, path="/house/inventory/", **fields):
    response = await client.post(path, json=fields)
    assert response.status_code == 201
    return response.json()


async def test_create_and_filter_products(client):
    await create_product(client, name="Milk", brand="Dos Pinos", supermarket="Walmart", inventory_level="low")
    await create_product(client, name="Almond milk", supermarket="Pricesmart", inventory_level="full")
    await create_product(client, name="Rice", supermarket="Walmart")

    names = lambda response: [p["name"] for p in response.json()]

    assert names(await client.get("/house/inventory/")) == ["Almond milk", "Milk", "Rice"]
    assert sorted(names(await client.get("/house/inventory/", params={"search": "MILK"}))) == [
        "Almond milk", "Milk"
    ]
    assert names(await client.get("/house/inventory/", params={"store": "wal", "inventory_level": "low"})) == [
        "Milk"
    ]


async def test_blank_name_is_rejected(client):
    response = await client.post("/house/inventory/", json={"name": "   "})
    assert response.status_code == 422


async def test_empty_brand_and_weight_are_stored_as_null(client):
    product = await create_product(client, name=" Coffee ", brand="", weight="")

    assert product["name"] == "Coffee"
    assert product["brand"] is None
    assert product["weight"] is None


async def test_update_inventory_level(client):
    product = await create_product(client, path="/airbnb/inventory/", name="Towels", supplier="Hotel Supply")

    response = await client.patch(f"/airbnb/inventory/{product['id']}/level", json={"inventory_level": "medium"})
    assert response.status_code == 200
    assert response.json()["inventory_level"] == "medium"

    response = await client.patch(f"/airbnb/inventory/{product['id']}/level", json={"inventory_level": None})
    assert response.json()["inventory_level"] is None

    response = await client.patch("/airbnb/inventory/missing/level", json={"inventory_level": "low"})
    assert response.status_code == 404

    response = await client.patch(f"/airbnb/inventory/{product['id']}/level", json={"inventory_level": "plenty"})
    assert response.status_code == 422


async def test_stores(client):
    await create_product(client, name="Milk", supermarket="Walmart")
    await create_product(client, name="Bread", supermarket="Walmart")
    await create_product(client, name="Eggs", supermarket="Agromercado")
    await create_product(client, name="Salt")

    response = await client.get("/house/inventory/stores")

    assert response.json() == ["Agromercado", "Walmart"]


async def test_suggestions(client):
    await create_product(client, name="Milk", brand="Dos Pinos")
    await create_product(client, name="Milk powder", brand="Nestle")
    await create_product(client, path="/airbnb/inventory/", name="Soap", brand="Dove")

    names = await client.get("/house/inventory/suggestions", params={"kind": "name", "q": "mil"})
    brands = await client.get("/house/inventory/suggestions", params={"kind": "brand", "q": "do"})
    nothing = await client.get("/house/inventory/suggestions", params={"kind": "name", "q": ""})

    assert names.json() == ["Milk", "Milk powder"]
    assert brands.json() == ["Dos Pinos", "Dove"]
    assert nothing.json() == []


async def test_brand_suggestions_are_sorted_across_tables(client):
    await create_product(client, name="Detergent", brand="Sodo")
    await create_product(client, path="/airbnb/inventory/", name="Soap", brand="Dove")
    await create_product(client, path="/airbnb/inventory/", name="Shampoo", brand="Adora")

    response = await client.get("/house/inventory/suggestions", params={"kind": "brand", "q": "do"})

    assert response.json() == ["Adora", "Dove", "Sodo"]
