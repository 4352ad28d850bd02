"""Donation Schemas — shared by create-payment-intent and confirm.

Invariants:
    - amount is a positive whole number of currency units (converted to
      minor units only at the payment gateway boundary)
"""

from pydantic import BaseModel, Field


class DonationCreate(BaseModel):
    name: str
    email: str
    amount: int = Field(gt=0)
    message: str | None = None
