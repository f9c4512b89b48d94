"""
Products API: Database Pool & Session Management
================================================

What:  The `Database` resource (async SQLAlchemy engine + session factory)
       and the FastAPI dependency that hands a session to each request.
How:   `create_app()` builds one `Database`, stores it on `app.state.database`
       and disposes it on shutdown. Route handlers receive a session through
       `Depends(get_db_session)`, which commits on success, rolls back on
       error and always returns the connection to the pool.
Who:   Used by the application factory, route handlers and the health check.

Connection Pooling:
    pool_size:     Persistent connections for normal load
    max_overflow:  Temporary connections for traffic spikes
    pool_pre_ping: Validates connections before use (catches stale connections)
    pool_recycle:  Replaces connections older than the configured age

    SQLite (used by the test suite) is created without these arguments;
    its dialect picks a pool that does not accept them.
"""

import logging
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models; owns the shared metadata."""
    pass


class Database:
    """
    Process-wide connection pool and session factory.

    Lifecycle:
        1. Constructed once by the application factory (no connection is
           opened until the first query)
        2. Shared by every request through `app.state.database`
        3. `dispose()` closes all pooled connections at shutdown

    Attributes:
        engine:          The async engine; owns the connection pool
        session_factory: Produces one AsyncSession per request
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        # expire_on_commit=False keeps loaded rows readable after commit
        self.session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_url(
        cls,
        url: URL,
        pool_size: int = 10,
        max_overflow: int = 5,
        pool_pre_ping: bool = True,
        pool_recycle: int = 3600,
        echo: bool = False,
    ) -> "Database":
        """Create the engine for `url`, applying pool sizing where the backend supports it."""
        engine_kwargs = {"echo": echo}
        if url.get_backend_name() != "sqlite":
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=pool_pre_ping,
                pool_recycle=pool_recycle,
            )
        engine = create_async_engine(url, **engine_kwargs)
        logger.debug(
            "Database engine created for %s",
            url.render_as_string(hide_password=True),
        )
        return cls(engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls.from_url(
            settings.sqlalchemy_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=settings.db_pool_recycle,
            echo=settings.log_level == "DEBUG",
        )

    async def ping(self) -> bool:
        """Run `SELECT 1` on a pooled connection; False when the store is unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close every connection held by the pool."""
        await self.engine.dispose()
        logger.info("Database connections closed")


def get_database(request: Request) -> Optional[Database]:
    """The `Database` attached to the running application."""
    return getattr(request.app.state, "database", None)


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the application's `Database`
        2. Yields it to the route handler
        3. On success: commits any work the handler left pending
        4. On error: rolls back and re-raises for the exception handlers
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/products")
        async def list_products(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database = get_database(request)
    if database is None:
        raise RuntimeError("Application has no database configured")

    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
