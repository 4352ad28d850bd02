"""Payment Gateway — thin Stripe adapter for donation payment intents.

Invariants:
    - Amounts enter in whole currency units and leave in minor units (x100)
    - Donor email and name travel as payment-intent metadata
    - Any Stripe failure surfaces as PaymentGatewayError (500); no retries
    - Only the client secret leaves this module; it is never logged

Design Decisions:
    - PaymentGateway Protocol: routes depend on the contract, tests inject a fake
    - Stripe's SDK is blocking, so the call runs in Starlette's threadpool
    - api_key passed per call instead of mutating stripe.api_key globally
"""

import logging
from typing import Protocol

import stripe
from starlette.concurrency import run_in_threadpool

from wellspring.core.errors import PaymentGatewayError

logger = logging.getLogger(__name__)

MINOR_UNITS_PER_UNIT = 100


def to_minor_units(amount: int) -> int:
    """Convert whole currency units to the processor's minor units (cents)."""
    return amount * MINOR_UNITS_PER_UNIT


class PaymentGateway(Protocol):
    """Contract for creating payment intents — implemented by StripePaymentGateway."""
    async def create_payment_intent(
        self, amount: int, currency: str, metadata: dict[str, str],
    ) -> str: ...


class StripePaymentGateway:
    """Creates Stripe PaymentIntents and returns their client secrets."""

    def __init__(self, api_key: str):
        self.api_key = api_key

    async def create_payment_intent(
        self, amount: int, currency: str, metadata: dict[str, str],
    ) -> str:
        minor = to_minor_units(amount)
        try:
            intent = await run_in_threadpool(
                stripe.PaymentIntent.create,
                api_key=self.api_key,
                amount=minor,
                currency=currency,
                metadata=metadata,
            )
        except stripe.StripeError as e:
            logger.error(
                f"Stripe payment intent failed: {e.user_message or type(e).__name__}",
                extra={"amount": minor},
            )
            raise PaymentGatewayError(str(e)) from e
        logger.info("Created payment intent", extra={"amount": minor})
        return intent.client_secret
