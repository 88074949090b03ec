async def test_income_list_with_total(client):
    for amount, day in [(1000, "2024-01-15"), (250.5, "2024-02-01")]:
        response = await client.post(
            "/house/income/",
            json={"amount": amount, "description": "Salary", "date": day},
        )
        assert response.status_code == 201

    response = await client.get("/house/income/")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1250.5
    assert [e["date"] for e in body["entries"]] == ["2024-02-01", "2024-01-15"]


async def test_recurring_day_dropped_for_one_off_entries(client):
    response = await client.post(
        "/house/income/",
        json={"amount": 10, "description": "Gift", "date": "2024-01-01", "recurring_day": 5},
    )
    assert response.json()["recurring_day"] is None

    response = await client.post(
        "/house/income/",
        json={
            "amount": 10,
            "description": "Allowance",
            "date": "2024-01-01",
            "is_recurring": True,
            "recurring_day": 5,
        },
    )
    assert response.json()["recurring_day"] == 5


async def test_invalid_amount_is_rejected(client):
    response = await client.post(
        "/house/income/",
        json={"amount": 0, "description": "Nothing", "date": "2024-01-01"},
    )
    assert response.status_code == 422


async def test_expense_categories_per_property(client):
    supplies = {"amount": 40, "description": "Soap", "date": "2024-01-01", "category": "supplies"}

    assert (await client.post("/house/expenses/", json=supplies)).status_code == 422

    response = await client.post("/airbnb/expenses/", json=supplies)
    assert response.status_code == 201
    assert response.json()["category"] == "supplies"

    response = await client.post(
        "/house/expenses/",
        json={"amount": 40, "description": "Bus", "date": "2024-01-01"},
    )
    assert response.json()["category"] == "general"


async def test_delete_entry(client):
    created = await client.post(
        "/airbnb/income/",
        json={"amount": 300, "description": "Booking", "date": "2024-01-01"},
    )
    entry_id = created.json()["id"]

    response = await client.delete(f"/airbnb/income/{entry_id}")
    assert response.status_code == 200
    assert (await client.get("/airbnb/income/")).json()["entries"] == []

    response = await client.delete(f"/airbnb/income/{entry_id}")
    assert response.status_code == 404


async def test_balances(client):
    await client.post("/house/income/", json={"amount": 1000, "description": "Salary", "date": "2024-01-01"})
    await client.post("/house/expenses/", json={"amount": 400, "description": "Rent", "date": "2024-01-02"})
    await client.post("/airbnb/income/", json={"amount": 200, "description": "Booking", "date": "2024-01-03"})

    house = (await client.get("/house/balance")).json()
    airbnb = (await client.get("/airbnb/balance")).json()

    assert house == {"total_income": 1000, "total_expenses": 400, "balance": 600}
    assert airbnb["balance"] == 200
