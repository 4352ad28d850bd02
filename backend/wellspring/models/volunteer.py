"""Volunteer record — immutable signup submitted from the public form."""

from wellspring.core.domain_types import VolunteerId
from wellspring.models.base import RecordModel


class Volunteer(RecordModel):
    id: VolunteerId
    name: str
    email: str
    phone: str | None = None
    availability: str | None = None
    skills: str | None = None
