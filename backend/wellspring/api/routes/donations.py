"""Donation Routes — Stripe payment intents and donation records.

Invariants:
    - create-payment-intent never touches the store
    - confirm stores the donation without checking any payment intent status
      (the web client calls it after Stripe.js reports success)
    - Both endpoints validate the same DonationCreate payload
"""

from fastapi import APIRouter, Depends, Request

from wellspring.api.dependencies import (
    get_app_settings, get_gateway, get_store, require_admin,
)
from wellspring.api.payloads import parse_payload
from wellspring.config import Settings
from wellspring.core.store import MemoryStore
from wellspring.infrastructure.payment_gateway import PaymentGateway
from wellspring.models import Donation
from wellspring.schemas.donation import DonationCreate
from wellspring.services.admin_auth import AdminClaims

router = APIRouter(prefix="/api/donations", tags=["donations"])

_INVALID_DONATION = "Invalid donation data"


@router.post("/create-payment-intent")
async def create_payment_intent(
    request: Request,
    gateway: PaymentGateway = Depends(get_gateway),
    settings: Settings = Depends(get_app_settings),
):
    """Start a Stripe charge; the client completes it with the secret."""
    payload = await parse_payload(request, DonationCreate, _INVALID_DONATION)
    client_secret = await gateway.create_payment_intent(
        payload.amount,
        settings.payment_currency,
        {"email": payload.email, "name": payload.name},
    )
    return {"clientSecret": client_secret}


@router.post("/confirm", response_model=Donation)
async def confirm_donation(
    request: Request, store: MemoryStore = Depends(get_store),
):
    payload = await parse_payload(request, DonationCreate, _INVALID_DONATION)
    return store.create_donation(payload)


@router.get("", response_model=list[Donation])
async def list_donations(
    admin: AdminClaims = Depends(require_admin),
    store: MemoryStore = Depends(get_store),
):
    return store.get_donations()
