"""
Database configuration and session management.

This module provides:
- Database URL selection (testing, development, production)
- The async SQLAlchemy engine and session factory
- Table creation at startup
- The FastAPI dependency that hands one session to each request

Every request gets its own ``AsyncSession``; a core write commits that
session exactly once.
"""

import os
import logging
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool
from dotenv import load_dotenv

from src.models.base import Base
# Import all models so their tables are registered on Base.metadata
from src.models import Category, MenuItem, Order, OrderSummary  # noqa: F401
from src.utils.config import get_settings

load_dotenv()

logger = logging.getLogger(__name__)

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None

def get_database_url() -> str:
    """
    Get database URL based on environment.

    Returns:
        str: Async database connection URL
    """
    if os.getenv("TESTING", "").lower() == "true":
        logger.info("Using in-memory SQLite database for testing")
        return "sqlite+aiosqlite://"

    db_url = os.getenv("DATABASE_URL") or get_settings().DATABASE_URL
    # Fix potential newline issues in .env file
    db_url = db_url.split('\n')[0].strip()

    if db_url.startswith("sqlite:///"):
        db_url = db_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    elif db_url.startswith("postgresql://"):
        db_url = db_url.replace("postgresql://", "postgresql+asyncpg://", 1)

    return db_url

def get_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create an async engine tuned for the target database.

    Args:
        database_url (str, optional): Database URL. If None, determined from environment.

    Returns:
        AsyncEngine: Configured SQLAlchemy engine
    """
    if database_url is None:
        database_url = get_database_url()

    settings = get_settings()
    engine_args = {"echo": settings.DEBUG}

    if database_url.startswith("sqlite"):
        engine_args["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite+aiosqlite://", "sqlite+aiosqlite:///:memory:"):
            # In-memory databases only live as long as their single connection
            engine_args["poolclass"] = StaticPool
        else:
            engine_args["poolclass"] = NullPool
    elif database_url.startswith("postgresql"):
        engine_args.update({
            "pool_size": settings.POOL_SIZE,
            "max_overflow": settings.MAX_OVERFLOW,
            "pool_timeout": settings.POOL_TIMEOUT,
            "pool_recycle": settings.POOL_RECYCLE,
            "pool_pre_ping": True
        })
        logger.info(f"Using connection pool for PostgreSQL (size={settings.POOL_SIZE}, max_overflow={settings.MAX_OVERFLOW})")

    return create_async_engine(database_url, **engine_args)

def get_session_local(engine: AsyncEngine) -> async_sessionmaker:
    """
    Get the session factory for an engine.

    Sessions keep attribute values after commit so that responses can be
    built from committed objects without another round trip.

    Args:
        engine (AsyncEngine): SQLAlchemy engine

    Returns:
        async_sessionmaker: Configured session factory
    """
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session.

    This is a FastAPI dependency that provides a database session
    for route handlers.

    Yields:
        AsyncSession: A database session
    """
    if _session_factory is None:
        await init_db()
    async with _session_factory() as session:
        yield session

async def init_db(database_url: Optional[str] = None) -> None:
    """Create the engine, the session factory and any missing tables.

    This function should be called during application startup.
    """
    global _engine, _session_factory
    try:
        _engine = get_engine(database_url)
        _session_factory = get_session_local(_engine)
        async with _engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Initialized database at {_engine.url.render_as_string(hide_password=True)}")
    except Exception as e:
        logger.error(f"Error initializing database: {str(e)}")
        raise

async def close_db() -> None:
    """Dispose of the engine.

    This function should be called during application shutdown.
    """
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.info("Closed database connection")
    _engine = None
    _session_factory = None
