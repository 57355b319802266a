"""
Database Connection Module
Owns the SQLAlchemy async engine and session factory.

A ``Database`` is built explicitly by the application factory, opened in the
lifespan handler and disposed at shutdown; nothing here is created at import
time.
"""

import logging
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


# Base class for all our models
class Base(DeclarativeBase):
    pass


class Database:
    """Engine + session factory with an explicit open/close lifecycle."""

    def __init__(
        self,
        url: str,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
    ):
        self.url = url
        if url.startswith("sqlite"):
            # In-memory databases live on a single connection
            engine_kwargs = {
                "connect_args": {"check_same_thread": False},
                "poolclass": StaticPool,
            }
        else:
            engine_kwargs = {
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_pre_ping": True,
            }

        self.engine: AsyncEngine = create_async_engine(url, echo=echo, **engine_kwargs)
        self.session_maker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False  # Objects remain accessible after commit
        )

    async def connect(self, create_tables: bool = True) -> None:
        """Verify connectivity and optionally create all tables."""
        async with self.engine.begin() as conn:
            if create_tables:
                await conn.run_sync(Base.metadata.create_all)
            else:
                await conn.execute(select(1))
        logger.info("Connected to the database")

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> Optional[str]:
        """Return None when healthy, otherwise the error text."""
        try:
            async with self.session_maker() as session:
                await session.execute(select(1))
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return str(e)
        return None

    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_maker() as session:
            try:
                yield session
            finally:
                await session.close()

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed")


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Dependency injection for FastAPI routes.
    Yields a database session from the application's Database and ensures cleanup.
    """
    database: Database = request.app.state.database
    async for session in database.session():
        yield session
