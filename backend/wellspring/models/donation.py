"""Donation record — stored by the confirm endpoint, never cross-checked with Stripe."""

from wellspring.core.domain_types import DonationId
from wellspring.models.base import RecordModel


class Donation(RecordModel):
    id: DonationId
    name: str
    email: str
    amount: int  # whole currency units, > 0
    message: str | None = None
