"""Donation Routes — payment intents through the fake gateway, confirmations."""

import logging

from wellspring.core.errors import PaymentGatewayError

DONATION = {"name": "Bo Reyes", "email": "bo@example.org", "amount": 50}


async def test_payment_intent_returns_client_secret(client, gateway):
    res = await client.post("/api/donations/create-payment-intent", json=DONATION)
    assert res.status_code == 200
    assert res.json() == {"clientSecret": "pi_test_1_secret_abc"}
    assert gateway.calls == [{
        "amount": 50,
        "currency": "usd",
        "metadata": {"email": "bo@example.org", "name": "Bo Reyes"},
    }]


async def test_payment_intent_does_not_store_donation(client, store):
    await client.post("/api/donations/create-payment-intent", json=DONATION)
    assert store.get_donations() == []


async def test_invalid_payment_intent_returns_400(client, gateway):
    res = await client.post(
        "/api/donations/create-payment-intent", json={**DONATION, "amount": -1},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid donation data"
    assert gateway.calls == []


async def test_gateway_failure_returns_500(client, gateway):
    gateway.error = PaymentGatewayError("api_connection_error")
    res = await client.post("/api/donations/create-payment-intent", json=DONATION)
    assert res.status_code == 500
    assert res.json()["error"] == "Failed to create payment intent"


async def test_confirm_stores_donation(client, store):
    res = await client.post(
        "/api/donations/confirm", json={**DONATION, "message": "Keep it up"},
    )
    assert res.status_code == 200
    assert res.json() == {"id": 1, **DONATION, "message": "Keep it up"}
    assert len(store.get_donations()) == 1


async def test_confirm_invalid_payload_returns_400(client, store):
    res = await client.post("/api/donations/confirm", json={"name": "Bo"})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid donation data"
    assert store.get_donations() == []


async def test_donation_listing_requires_token(client, auth_headers):
    await client.post("/api/donations/confirm", json=DONATION)
    assert (await client.get("/api/donations")).status_code == 403
    res = await client.get("/api/donations", headers=auth_headers)
    assert res.status_code == 200
    assert [d["amount"] for d in res.json()] == [50]


async def test_gateway_failure_logged_as_critical(client, gateway, caplog):
    gateway.error = PaymentGatewayError("api_connection_error")
    with caplog.at_level(logging.WARNING, logger="wellspring.api.error_handlers"):
        await client.post("/api/donations/create-payment-intent", json=DONATION)
    [record] = [
        r for r in caplog.records if r.name == "wellspring.api.error_handlers"
    ]
    assert record.levelno == logging.CRITICAL
    assert record.category == "external_api"
    assert record.debug_info == {"provider_message": "api_connection_error"}
