"""Database initialization and dependency injection."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import fastapi
import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.config import get_settings
from components.core.database import DatabaseManager
# Import all models to ensure they're registered
import components.finance.models
import components.inventory.models
import components.shopping.models
import components.todo.models
import components.budget.models
import components.wedding.models

logger = structlog.get_logger(__name__)

# Create a single instance of DatabaseManager
db_manager = DatabaseManager()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for getting database sessions."""
    async with db_manager.get_db() as session:
        yield session


def get_user_id() -> str:
    """FastAPI dependency for the household user id."""
    return get_settings().USER_ID


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    """Create missing tables on startup and release connections on shutdown."""
    await db_manager.create_all()
    logger.info("database_ready", app=app.title)
    yield
    await db_manager.engine.dispose()
