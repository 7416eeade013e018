"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- In-memory database fixtures
- Authenticated HTTP client fixtures
"""

import os
import sys
from pathlib import Path

import pytest


# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test_secret_key_at_least_32_characters_long_for_jwt"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "60"
os.environ["LOG_JSON"] = "false"

# Add backend directory to path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))


@pytest.fixture
def anyio_backend():
    """
    Configure anyio backend for async tests.

    Returns:
        str: Backend name ("asyncio")
    """
    return "asyncio"


@pytest.fixture(scope="function")
async def setup_db():
    """
    Create all tables on the shared in-memory engine and drop them afterwards.
    """
    from gspro.core.database import engine
    from gspro.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(scope="function")
async def db_session(setup_db):
    """
    Provide a database session for tests.

    Tests commit what they want the API to see.
    """
    from gspro.core.database import async_session_maker

    async with async_session_maker() as session:
        yield session


@pytest.fixture
async def admin_user(db_session):
    """Persisted admin user (password: ``changeme123``)."""
    from gspro.repositories.user import UserRepository

    user = await UserRepository(db_session).create_user(
        email="admin@gspro.com.br",
        name="Administrador",
        password="changeme123",
        role="admin",
    )
    await db_session.commit()
    return user


@pytest.fixture
def auth_headers(admin_user):
    """Bearer token headers for the admin user."""
    from gspro.core.security import create_access_token

    token = create_access_token({"sub": admin_user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(setup_db):
    """HTTP client bound to the ASGI app (no network)."""
    from httpx import ASGITransport, AsyncClient

    from gspro.main import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
async def api(client, auth_headers):
    """HTTP client that sends the admin's bearer token on every request."""
    client.headers.update(auth_headers)
    return client
