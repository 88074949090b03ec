"""Shared fixtures: an in-memory database per test and an HTTP client on the app."""

import os

os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_JSON", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from components.core.config import get_settings
from components.core.database import DatabaseManager
from components.core.init_db import get_db
from restapi.router import create_app


@pytest.fixture
def user_id():
    return get_settings().USER_ID


@pytest.fixture
async def database():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    manager = DatabaseManager(engine)
    await manager.create_all()
    yield manager
    await engine.dispose()


@pytest.fixture
async def session(database):
    async with database.get_db() as session:
        yield session


@pytest.fixture
def app(database):
    app = create_app()

    async def override_get_db():
        async with database.get_db() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
