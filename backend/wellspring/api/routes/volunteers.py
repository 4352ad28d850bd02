"""Volunteer Routes — public signup and the admin-only roster."""

from fastapi import APIRouter, Depends, Request

from wellspring.api.dependencies import get_store, require_admin
from wellspring.api.payloads import parse_payload
from wellspring.core.store import MemoryStore
from wellspring.models import Volunteer
from wellspring.schemas.volunteer import VolunteerCreate
from wellspring.services.admin_auth import AdminClaims

router = APIRouter(prefix="/api/volunteers", tags=["volunteers"])


@router.post("", response_model=Volunteer)
async def create_volunteer(
    request: Request, store: MemoryStore = Depends(get_store),
):
    payload = await parse_payload(
        request, VolunteerCreate, "Invalid volunteer data",
    )
    return store.create_volunteer(payload)


@router.get("", response_model=list[Volunteer])
async def list_volunteers(
    admin: AdminClaims = Depends(require_admin),
    store: MemoryStore = Depends(get_store),
):
    return store.get_volunteers()
