from sqlalchemy.exc import OperationalError

from components.core.init_db import get_db


class UnavailableSession:
    """Session whose every query fails as if the database went away."""

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, ConnectionError("connection lost"))

    async def rollback(self):
        pass


async def test_database_failure_answers_500(app, client):
    async def broken_db():
        yield UnavailableSession()

    app.dependency_overrides[get_db] = broken_db

    response = await client.get("/todos/")

    assert response.status_code == 500
    assert response.json() == {"detail": "Database error. Please try again."}


async def test_database_failure_on_write(app, client):
    async def broken_db():
        yield UnavailableSession()

    app.dependency_overrides[get_db] = broken_db

    response = await client.delete("/house/income/some-id")

    assert response.status_code == 500
    assert response.json()["detail"] == "Database error. Please try again."
