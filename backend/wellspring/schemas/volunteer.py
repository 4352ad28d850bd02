"""Volunteer Schemas — public signup form payload."""

from pydantic import BaseModel


class VolunteerCreate(BaseModel):
    name: str
    email: str
    phone: str | None = None
    availability: str | None = None
    skills: str | None = None
