"""
Database configuration and session management.

Provides SQLAlchemy async engine setup, session factory, and dependency
injection for database sessions in FastAPI routes.
"""

import os
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from gspro.core.config import settings
from gspro.models.base import Base


def get_async_engine() -> AsyncEngine:
    """
    Create and configure the async SQLAlchemy engine.

    For SQLite:
    - Uses StaticPool for in-memory databases so every session sees the same data
    - Enables check_same_thread=False for async compatibility
    - Turns on foreign key enforcement per connection

    Returns:
        Configured AsyncEngine instance
    """
    is_sqlite = "sqlite" in settings.database_url

    connect_args: dict = {"check_same_thread": False} if is_sqlite else {}

    engine_kwargs = {
        "echo": False,
        "future": True,
        "connect_args": connect_args,
    }

    if is_sqlite and ":memory:" in settings.database_url:
        engine_kwargs["poolclass"] = StaticPool

    engine = create_async_engine(
        settings.database_url,
        **engine_kwargs,
    )

    if is_sqlite:
        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


# Global async engine instance
engine = get_async_engine()


# Async session factory
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def init_db() -> None:
    """
    Initialize the database.

    Tables are only created when ENABLE_DB_CREATE_ALL is set; production
    deployments manage the schema through migrations.
    """
    # Import models to ensure metadata is populated before create_all()
    from gspro import models  # noqa: F401

    async with engine.begin() as conn:
        if os.getenv("ENABLE_DB_CREATE_ALL", "").lower() in {"1", "true", "yes"}:
            await conn.run_sync(Base.metadata.create_all)

        if "sqlite" in settings.database_url:
            await conn.execute(text("PRAGMA foreign_keys=ON"))


async def close_db() -> None:
    """Dispose of all pooled connections at application shutdown."""
    await engine.dispose()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function to get database session.

    Commits when the request handler returns normally and rolls back
    when it raises.

    Yields:
        AsyncSession instance for database operations
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

