"""
PeakPerformance Backend — Database Session Management
=======================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   A `Database` object owns the engine (connection pool) and the session
       factory. The application lifespan creates exactly one, attaches it to
       `app.state.database`, and disposes it on shutdown. Route handlers get a
       per-request session through the `get_db_session` dependency.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Database is created at startup; sessions are created per request.

Architecture Decision:
    The pool is an injected collaborator rather than a module-level engine.
    Tests build a `Database` over a temporary SQLite file and hand it to
    `create_app()`; production builds one from `Settings`. Nothing in the
    handlers looks the pool up through a global.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from peakperformance.config import Settings

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All nine resource tables register with this metadata so that
    `Database.create_tables()` can create any that are missing.
    """
    pass


class Database:
    """
    Owns the async engine (connection pool) and the session factory.

    Lifecycle:
        1. Built once at process start (`Database.from_settings`)
        2. Sessions acquired and released per request (`session()`)
        3. Disposed at shutdown (`dispose()`), closing every pooled connection
    """

    def __init__(self, url: str, **engine_options: Any):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_options)
        # expire_on_commit=False: attributes stay readable after commit
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build the production pool from configuration."""
        return cls(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,  # below MySQL's default 8h wait_timeout
            echo=settings.log_level == "DEBUG",
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide a session that commits on success and rolls back on error.

        The connection goes back to the pool on every path, including
        when the caller raises.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def ping(self) -> bool:
        """Run `SELECT 1`; returns False instead of raising when unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def create_tables(self) -> None:
        """Create any resource table that does not exist yet."""
        # Register every model with Base.metadata before create_all
        import peakperformance.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Gracefully close all connections in the pool."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    The session comes from the `Database` attached to the running
    application, so each app instance (and each test) uses its own pool.

    Example usage in a route:
        @router.get("/api/productos")
        async def list_products(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
