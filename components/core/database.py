"""Core classes and mixins for DB connections"""

import uuid
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict, Optional, cast
from typing import Callable, AsyncContextManager

from sqlalchemy import Column, DateTime, String
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from components.core import config

settings = config.get_settings()
Base = declarative_base()
SessionMaker = Callable[[], AsyncContextManager[AsyncSession]]


def generate_id() -> str:
    """New primary key value."""
    return str(uuid.uuid4())


class IdMixin:
    """UUID string primary key and creation timestamp."""
    id = Column(String(36), primary_key=True, default=generate_id)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class UserOwnedMixin(IdMixin):
    """Rows scoped by the household user id."""
    user_id = Column(String(36), nullable=False, index=True)


class DatabaseManager:
    def __init__(self, engine: Optional[AsyncEngine] = None) -> None:
        """Initialize DatabaseManager with optional engine for testing."""
        self.engine = engine or self._create_engine()

    def _create_engine(self) -> AsyncEngine:
        """Create async engine for the configured database."""
        url = settings.async_db_url
        options: Dict[str, Any] = {
            "echo": settings.DEBUG,
            "pool_pre_ping": True,  # Enable connection health checks
        }
        if not url.startswith("sqlite"):
            options["pool_size"] = 5
            options["max_overflow"] = 10
        return create_async_engine(url, **options)

    def get_session(self) -> SessionMaker:
        """Returns SessionMaker for database sessions."""
        if not self.engine:
            raise ValueError("Database engine wasn't initialized")

        return cast(
            SessionMaker,
            sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autocommit=False,
                autoflush=False,
            ),
        )

    @asynccontextmanager
    async def get_db(self) -> AsyncContextManager[AsyncSession]:
        """Get database session context manager."""
        async_session = self.get_session()
        async with async_session() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create every table registered on Base."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
