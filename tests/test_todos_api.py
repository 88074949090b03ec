from datetime import date, timedelta

from sqlalchemy import select

from components.todo.models import Todo


async def create_todo(client, **fields):
    response = await client.post("/todos/", json=fields)
    assert response.status_code == 201
    return response.json()


async def test_create_plain_todo(client):
    todo = await create_todo(
        client, title="  Buy paint ", description="", recurrence_type="daily", recurrence_value=3
    )

    assert todo["title"] == "Buy paint"
    assert todo["description"] is None
    assert todo["priority"] == "mid"
    assert todo["is_recurring"] is False
    assert todo["recurrence_type"] is None
    assert todo["recurrence_value"] is None
    assert todo["completed"] is False


async def test_recurrence_fields_follow_the_rule(client):
    default_rule = await create_todo(client, title="Water plants", is_recurring=True, recurrence_value=3)
    monthly = await create_todo(
        client,
        title="Pay rent",
        is_recurring=True,
        recurrence_type="monthly",
        recurrence_value=3,
        recurrence_day_of_month=5,
    )

    assert default_rule["recurrence_type"] == "custom_days"
    assert default_rule["recurrence_value"] == 3
    assert monthly["recurrence_value"] is None
    assert monthly["recurrence_day_of_month"] == 5


async def test_blank_title_is_rejected(client):
    response = await client.post("/todos/", json={"title": "   "})
    assert response.status_code == 422


async def test_list_order(client):
    done = await create_todo(client, title="Done", priority="high")
    await client.post(f"/todos/{done['id']}/toggle")
    await create_todo(client, title="Low dated", priority="low", due_date="2024-01-01")
    await create_todo(client, title="Mid undated")
    await create_todo(client, title="Mid dated", due_date="2030-01-01")
    await create_todo(client, title="High", priority="high", due_date="2031-01-01")

    titles = [t["title"] for t in (await client.get("/todos/")).json()]

    assert titles == ["High", "Mid dated", "Mid undated", "Low dated", "Done"]


async def test_filters(client):
    await create_todo(client, title="Daily", is_recurring=True, recurrence_type="daily", priority="low")
    plain = await create_todo(client, title="Plain", priority="high")
    await client.post(f"/todos/{plain['id']}/toggle")

    async def titles(**params):
        return [t["title"] for t in (await client.get("/todos/", params=params)).json()]

    assert await titles(status="active") == ["Daily"]
    assert await titles(status="completed") == ["Plain"]
    assert await titles(priority="low") == ["Daily"]
    assert await titles(recurring="non-recurring") == ["Plain"]
    assert (await client.get("/todos/", params={"status": "later"})).status_code == 422


async def test_toggle_plain_todo(client):
    todo = await create_todo(client, title="Call plumber")

    done = (await client.post(f"/todos/{todo['id']}/toggle")).json()
    assert done["completed"] is True
    assert done["completed_at"] is not None

    reopened = (await client.post(f"/todos/{todo['id']}/toggle")).json()
    assert reopened["completed"] is False
    assert reopened["completed_at"] is None
    assert len((await client.get("/todos/")).json()) == 1


async def test_completing_recurring_todo_schedules_next(client, session):
    todo = await create_todo(
        client, title="Clean filters", is_recurring=True, recurrence_type="custom_days",
        recurrence_value=10, due_date="2024-01-25",
    )

    done = (await client.post(f"/todos/{todo['id']}/toggle")).json()

    assert done["completed"] is True
    assert done["last_occurrence_date"] == "2024-01-25"
    result = await session.execute(select(Todo).where(Todo.completed.is_(False)))
    copies = result.scalars().all()
    assert len(copies) == 1
    assert copies[0].title == "Clean filters"
    assert copies[0].due_date == date(2024, 2, 4)
    assert copies[0].recurrence_value == 10


async def test_open_recurring_todo_shows_current_occurrence(client):
    await create_todo(
        client, title="Feed fish", is_recurring=True, recurrence_type="daily",
        due_date=(date.today() - timedelta(days=5)).isoformat(),
    )

    todos = (await client.get("/todos/")).json()

    assert todos[0]["due_date"] == date.today().isoformat()


async def test_get_and_delete(client):
    todo = await create_todo(client, title="Temporary")

    assert (await client.get(f"/todos/{todo['id']}")).json()["title"] == "Temporary"
    assert (await client.delete(f"/todos/{todo['id']}")).status_code == 200
    assert (await client.get(f"/todos/{todo['id']}")).status_code == 404
    assert (await client.delete(f"/todos/{todo['id']}")).status_code == 404
    assert (await client.post(f"/todos/{todo['id']}/toggle")).status_code == 404
