"""
ContactBook Backend: Database Engine and Session Management
===========================================================

What:  Engine factory, session factory, ORM base class and the FastAPI
       session dependency.
How:   The application lifespan calls `create_engine_from_settings()` once,
       stores the engine and its session factory on `app.state`, and disposes
       the engine at shutdown. Each request borrows one session from that pool
       through `get_db_session`.

Connection Pooling:
    pool_size:      persistent connections kept open for normal load
    max_overflow:   temporary connections for bursts (total = size + overflow)
    pool_pre_ping:  validates a connection before handing it out
    pool_recycle:   replaces connections older than this many seconds

    SQLite (used by the test suite) manages its own pool, so the sizing
    arguments are only passed for server databases.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from contactbook.config import Settings

# Key in `AsyncSession.info` holding the per-statement deadline (seconds)
STATEMENT_TIMEOUT_KEY = "statement_timeout"


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for autogenerate.
    """
    pass


# ── Engine Configuration ──────────────────────────────────────────────────
def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create the process-wide async engine (and its connection pool).

    Args:
        settings: Startup configuration; only the database fields are read.

    Returns:
        An AsyncEngine. The caller owns it and must `await engine.dispose()`.
    """
    kwargs = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        # SQL echo is only useful while developing
        "echo": settings.log_level == "DEBUG",
    }
    if settings.uses_queue_pool:
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=settings.db_pool_recycle,
        )
    return create_async_engine(settings.postgres_url, **kwargs)


# ── Session Factory ───────────────────────────────────────────────────────
def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Build the session factory bound to `engine`.

    expire_on_commit=False keeps loaded attributes readable after the
    dependency commits.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that lends one pooled session to a request.

    How it works:
        1. Opens a session from the factory created at startup and records
           the statement deadline in `session.info`
        2. Yields it to the route handler
        3. On success: commits
        4. On error: rolls back and re-raises for the exception handlers
        5. Always: closes the session, returning the connection to the pool

    Example usage in a route:
        @router.get("/contacts")
        async def list_contacts(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    settings: Settings = request.app.state.settings
    async with session_factory() as session:
        session.info[STATEMENT_TIMEOUT_KEY] = settings.db_statement_timeout
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
