"""
Integration tests for login and the current-user endpoint.
"""

import pytest

from gspro.core.security import create_access_token


@pytest.mark.anyio
async def test_login_and_me(client, admin_user):
    """
    Arrange: Seeded admin user
    Act: Log in with the OAuth2 form, then call /auth/me
    Assert: Token works and returns the profile
    """
    # Act
    resp = await client.post(
        "/api/v1/auth/token",
        data={"username": "ADMIN@gspro.com.br", "password": "changeme123"},
    )

    # Assert
    assert resp.status_code == 200
    token = resp.json()["access_token"]
    assert resp.json()["token_type"] == "bearer"

    me = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "admin@gspro.com.br"
    assert me.json()["role"] == "admin"


@pytest.mark.anyio
async def test_login_wrong_password(client, admin_user):
    resp = await client.post(
        "/api/v1/auth/token",
        data={"username": "admin@gspro.com.br", "password": "wrong"},
    )

    assert resp.status_code == 401
    assert resp.json()["detail"] == "E-mail ou senha incorretos"


@pytest.mark.anyio
async def test_login_unknown_user(client):
    resp = await client.post(
        "/api/v1/auth/token",
        data={"username": "ninguem@gspro.com.br", "password": "changeme123"},
    )

    assert resp.status_code == 401


@pytest.mark.anyio
async def test_disabled_user_cannot_log_in(client, db_session, admin_user):
    admin_user.is_active = False
    await db_session.commit()

    resp = await client.post(
        "/api/v1/auth/token",
        data={"username": "admin@gspro.com.br", "password": "changeme123"},
    )

    assert resp.status_code == 401


@pytest.mark.anyio
async def test_business_endpoints_require_token(client):
    resp = await client.get("/api/v1/products")

    assert resp.status_code in (401, 403)


@pytest.mark.anyio
async def test_token_for_deleted_user_is_rejected(client, setup_db):
    token = create_access_token({"sub": "fantasma@gspro.com.br"})

    resp = await client.get("/api/v1/products", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401
