"""Root conftest — shared fixtures for store, settings and the test client.

Invariants:
    - Every test gets a fresh MemoryStore (seeded) and its own app instance
    - The payment gateway is always a fake; Stripe is never called
    - Settings are built explicitly, never read from the developer's .env
"""

import os
from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure tests don't accidentally use real secrets
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_fake_key")
os.environ.setdefault("JWT_SECRET", "test-secret-for-jwt-signing")

from wellspring.config import Settings  # noqa: E402
from wellspring.core.store import MemoryStore  # noqa: E402
from wellspring.main import create_app  # noqa: E402


class StepClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


class FakeGateway:
    """Records create_payment_intent calls; optionally fails."""

    def __init__(self):
        self.calls: list[dict] = []
        self.error: Exception | None = None

    async def create_payment_intent(self, amount, currency, metadata):
        self.calls.append(
            {"amount": amount, "currency": currency, "metadata": metadata},
        )
        if self.error is not None:
            raise self.error
        return f"pi_test_{len(self.calls)}_secret_abc"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        jwt_secret="test-secret-for-jwt-signing",
        stripe_secret_key="sk_test_fake_key",
        bcrypt_rounds=4,
    )


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def store(clock):
    return MemoryStore(clock=clock)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def app(settings, store, gateway):
    return create_app(settings=settings, store=store, gateway=gateway)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def admin_token(client):
    """Register an admin and return a valid bearer token for it."""
    creds = {"username": "editor", "password": "s3cret-pass"}
    await client.post("/api/admin/register", json=creds)
    res = await client.post("/api/login", json=creds)
    return res.json()["token"]


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
