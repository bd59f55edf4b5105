"""Registration, login and ``/auth/me`` through the HTTP layer."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from backend.security import create_access_token


@pytest.mark.asyncio
async def test_register_login_and_me(client: AsyncClient) -> None:
    registered = await client.post(
        "/auth/register", json={"email": "Brock@Example.com", "password": "onix-rocks"}
    )
    assert registered.status_code == 201
    token_payload = registered.json()
    assert token_payload["token_type"] == "bearer"
    assert token_payload["user"]["email"] == "brock@example.com"

    logged_in = await client.post(
        "/auth/login", json={"email": "brock@example.com", "password": "onix-rocks"}
    )
    assert logged_in.status_code == 200
    token = logged_in.json()["access_token"]

    me = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == token_payload["user"]["id"]


@pytest.mark.asyncio
async def test_register_duplicate_email_is_400(client: AsyncClient) -> None:
    credentials = {"email": "misty@example.com", "password": "starmie"}
    first = await client.post("/auth/register", json=credentials)
    assert first.status_code == 201

    second = await client.post("/auth/register", json=credentials)

    assert second.status_code == 400
    assert second.json()["error_type"] == "conflict"
    assert second.json()["message"] == "Email misty@example.com is already registered"


@pytest.mark.asyncio
async def test_register_rejects_invalid_payload(client: AsyncClient) -> None:
    response = await client.post(
        "/auth/register", json={"email": "not-an-email", "password": "123"}
    )

    assert response.status_code == 422
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"body.email", "body.password"}


@pytest.mark.asyncio
async def test_login_with_wrong_password_is_401(client: AsyncClient) -> None:
    await client.post(
        "/auth/register", json={"email": "gary@example.com", "password": "eevee1"}
    )

    response = await client.post(
        "/auth/login", json={"email": "gary@example.com", "password": "wrong-one"}
    )

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert response.json()["message"] == "Incorrect email or password"


@pytest.mark.asyncio
async def test_me_with_token_for_unknown_user_is_401(client: AsyncClient) -> None:
    token = create_access_token("424242")

    response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Token references an unknown user"


@pytest.mark.asyncio
async def test_me_with_expired_token_is_401(client: AsyncClient) -> None:
    token = create_access_token("1", expires_minutes=-1)

    response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
