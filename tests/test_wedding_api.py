import pytest


@pytest.fixture
async def venue(client):
    response = await client.post("/wedding/categories", json={"name": " Venue "})
    assert response.status_code == 201
    return response.json()


async def post(client, path, **fields):
    response = await client.post(path, json=fields)
    assert response.status_code == 201, response.text
    return response.json()


async def test_categories(client, venue):
    await post(client, "/wedding/categories", name="Catering")

    assert venue["name"] == "Venue"
    assert [c["name"] for c in (await client.get("/wedding/categories")).json()] == ["Catering", "Venue"]


async def test_duplicate_category_is_rejected(client, venue):
    response = await client.post("/wedding/categories", json={"name": "Venue"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Category already exists"
    assert len((await client.get("/wedding/categories")).json()) == 1


async def test_blank_category_is_rejected(client):
    response = await client.post("/wedding/categories", json={"name": " "})
    assert response.status_code == 422


async def test_expenses(client, venue):
    await post(client, "/wedding/expenses", amount=1500, description="Deposit",
               category_id=venue["id"], date="2024-02-01")
    await post(client, "/wedding/expenses", amount=200, description="Invitations", date="2024-03-01")

    body = (await client.get("/wedding/expenses")).json()

    assert body["total"] == 1700
    assert [e["description"] for e in body["expenses"]] == ["Invitations", "Deposit"]
    assert [e["category_name"] for e in body["expenses"]] == ["Uncategorized", "Venue"]


async def test_deleting_category_uncategorizes_rows(client, venue):
    expense = await post(client, "/wedding/expenses", amount=100, description="Deposit",
                         category_id=venue["id"], date="2024-02-01")

    assert (await client.delete(f"/wedding/categories/{venue['id']}")).status_code == 200
    assert (await client.delete(f"/wedding/categories/{venue['id']}")).status_code == 404

    expenses = (await client.get("/wedding/expenses")).json()["expenses"]
    assert expenses[0]["id"] == expense["id"]
    assert expenses[0]["category_id"] is None
    assert expenses[0]["category_name"] == "Uncategorized"


async def test_budget_summary(client, venue):
    budget = await post(client, "/wedding/budgets", name="Wedding", initial_balance=10000)
    path = f"/wedding/budgets/{budget['id']}/items"
    await post(client, path, type="income", amount=2000, description="Gift from parents", is_real=True)
    await post(client, path, type="income", amount=500, description="Expected gift")
    await post(client, path, type="expense", amount=3000, description="Venue", category_id=venue["id"],
               is_real=True, date="2024-05-01")
    await post(client, path, type="expense", amount=1200, description="Band")

    summary = (await client.get(f"/wedding/budgets/{budget['id']}/summary")).json()

    assert summary["initial_balance"] == 10000
    assert summary["income"] == 2500
    assert summary["expenses"] == 4200
    assert summary["projected_balance"] == 8300
    assert summary["real_income"] == 2000
    assert summary["real_expenses"] == 3000
    assert summary["real_balance"] == 9000

    items = (await client.get(path)).json()
    assert items[0]["description"] == "Venue"
    assert items[0]["category_name"] == "Venue"
    assert items[-1]["date"] is None


async def test_budget_items_and_deletion(client):
    budget = await post(client, "/wedding/budgets", name="Reception")
    item = await post(client, f"/wedding/budgets/{budget['id']}/items", amount=50, description="Flowers")

    assert item["type"] == "expense"
    assert (await client.delete(f"/wedding/budgets/{budget['id']}/items/{item['id']}")).status_code == 200
    assert (await client.delete(f"/wedding/budgets/{budget['id']}")).status_code == 200
    assert (await client.get("/wedding/budgets")).json() == []
    assert (await client.get(f"/wedding/budgets/{budget['id']}/summary")).status_code == 404
    assert (await client.get(f"/wedding/budgets/{budget['id']}/items")).status_code == 404


async def test_quotes(client, venue):
    photo = await post(client, "/wedding/categories", name="Photography")
    await post(client, "/wedding/quotes", person_name="Ana", concept="Full day", price=1200,
               category_id=photo["id"])
    await post(client, "/wedding/quotes", person_name="Studio Luz", concept="Half day", price=950,
               category_id=photo["id"])
    await post(client, "/wedding/quotes", person_name="Hacienda", concept="Garden", price=5000,
               category_id=venue["id"])
    await post(client, "/wedding/quotes", person_name="Cousin", concept="Cake", price=0)

    quotes = (await client.get("/wedding/quotes")).json()
    assert len(quotes) == 4

    groups = (await client.get("/wedding/quotes/grouped")).json()
    assert [g["category_name"] for g in groups] == ["Photography", "Venue", "Uncategorized"]
    assert len(groups[0]["quotes"]) == 2

    compared = (await client.get(f"/wedding/quotes/compare/{photo['id']}")).json()
    assert [q["price"] for q in compared] == [950, 1200]

    assert (await client.delete(f"/wedding/quotes/{quotes[0]['id']}")).status_code == 200
    assert (await client.delete(f"/wedding/quotes/{quotes[0]['id']}")).status_code == 404


async def test_quote_needs_person_and_concept(client):
    response = await client.post("/wedding/quotes", json={"person_name": " ", "concept": "Cake", "price": 10})
    assert response.status_code == 422


async def test_folders_and_notes(client):
    ideas = await post(client, "/wedding/folders", name="Ideas")
    await post(client, "/wedding/folders", name="Guests")
    assert [f["name"] for f in (await client.get("/wedding/folders")).json()] == ["Guests", "Ideas"]

    path = f"/wedding/folders/{ideas['id']}/notes"
    colors = await post(client, path, title="Colors", content="Sage green")
    await post(client, path, title="Music")

    response = await client.patch(f"/wedding/notes/{colors['id']}", json={"content": "Ivory"})
    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Colors"
    assert updated["content"] == "Ivory"
    assert updated["updated_at"] >= colors["updated_at"]

    notes = (await client.get(path)).json()
    assert notes[0]["title"] == "Colors"

    assert (await client.patch("/wedding/notes/missing", json={"title": "X"})).status_code == 404
    assert (await client.post("/wedding/folders/missing/notes", json={"title": "X"})).status_code == 404

    assert (await client.delete(f"/wedding/folders/{ideas['id']}")).status_code == 200
    assert (await client.get(path)).status_code == 404
    assert (await client.delete(f"/wedding/notes/{colors['id']}")).status_code == 404
