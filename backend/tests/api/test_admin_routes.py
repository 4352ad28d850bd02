"""Admin Routes — register, login and the admin listing over HTTP."""

import asyncio
import time

from wellspring.services.admin_auth import decode_token

CREDS = {"username": "editor", "password": "s3cret-pass"}


async def test_register_returns_public_fields(client):
    res = await client.post("/api/admin/register", json=CREDS)
    assert res.status_code == 200
    assert res.json() == {"success": True, "admin": {"id": 1, "username": "editor"}}


async def test_register_missing_password_returns_400(client, store):
    res = await client.post("/api/admin/register", json={"username": "editor"})
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["message"] == "Username and password required"
    assert store.get_admins() == []


async def test_register_wrong_types_returns_400(client):
    res = await client.post(
        "/api/admin/register", json={"username": 5, "password": ["x"]},
    )
    assert res.status_code == 400


async def test_register_malformed_json_returns_400(client):
    res = await client.post(
        "/api/admin/register", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400


async def test_login_with_valid_credentials_returns_token(client, store, settings):
    await client.post("/api/admin/register", json=CREDS)
    res = await client.post("/api/login", json=CREDS)
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    claims = decode_token(body["token"], settings)
    admin = store.get_admins()[0]
    assert claims.id == admin.id
    assert claims.username == admin.username


async def test_login_wrong_password_returns_401_without_token(client):
    await client.post("/api/admin/register", json=CREDS)
    res = await client.post(
        "/api/login", json={"username": "editor", "password": "nope"},
    )
    assert res.status_code == 401
    body = res.json()
    assert body["success"] is False
    assert "token" not in body


async def test_login_unknown_user_returns_401(client):
    res = await client.post("/api/login", json=CREDS)
    assert res.status_code == 401
    assert res.json()["message"] == "Invalid credentials"


async def test_login_empty_body_returns_401(client):
    res = await client.post("/api/login")
    assert res.status_code == 401


async def test_admins_listing_includes_password_hash(client):
    await client.post("/api/admin/register", json=CREDS)
    res = await client.get("/api/admins")
    assert res.status_code == 200
    [admin] = res.json()
    assert admin["username"] == "editor"
    assert admin["passwordHash"].startswith("$2")
    assert "createdAt" in admin


async def test_registration_keeps_event_loop_responsive(client, app):
    """bcrypt at a high cost runs off the loop; other tasks keep ticking."""
    app.state.settings = app.state.settings.model_copy(update={"bcrypt_rounds": 13})
    gaps: list[float] = []
    finished = asyncio.Event()

    async def ticker():
        last = time.perf_counter()
        while not finished.is_set():
            await asyncio.sleep(0.01)
            now = time.perf_counter()
            gaps.append(now - last)
            last = now

    task = asyncio.create_task(ticker())
    res = await client.post("/api/admin/register", json=CREDS)
    finished.set()
    await task

    assert res.status_code == 200
    assert len(gaps) > 5
    assert max(gaps) < 0.25
