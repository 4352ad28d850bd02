"""Admin Routes — registration, login and the admin listing.

Invariants:
    - Registration never echoes the password hash
    - Login answers 401 for unknown users and wrong passwords alike
    - GET /api/admins returns full records, hashes included (known leak,
      kept for compatibility with the existing admin screens)
"""

from fastapi import APIRouter, Depends, Request

from wellspring.api.dependencies import get_app_settings, get_store
from wellspring.api.payloads import parse_payload
from wellspring.config import Settings
from wellspring.core.errors import (
    InvalidCredentialsError, MissingCredentialsError, PayloadValidationError,
)
from wellspring.core.store import MemoryStore
from wellspring.models import Admin
from wellspring.schemas.admin import AdminCredentials, AdminPublic
from wellspring.services import admin_auth

router = APIRouter(prefix="/api", tags=["admin"])


@router.post("/admin/register")
async def register_admin(
    request: Request,
    store: MemoryStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Create an admin account."""
    try:
        credentials = await parse_payload(
            request, AdminCredentials, "Username and password required",
        )
    except PayloadValidationError as e:
        raise MissingCredentialsError() from e
    admin = await admin_auth.register_admin(store, credentials, settings)
    return {
        "success": True,
        "admin": AdminPublic(id=admin.id, username=admin.username).model_dump(),
    }


@router.post("/login")
async def login(
    request: Request,
    store: MemoryStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Exchange admin credentials for a bearer token."""
    try:
        credentials = await parse_payload(
            request, AdminCredentials, "Invalid credentials",
        )
    except PayloadValidationError as e:
        raise InvalidCredentialsError() from e
    token = await admin_auth.login(store, credentials, settings)
    return {"success": True, "token": token}


@router.get("/admins", response_model=list[Admin])
async def list_admins(store: MemoryStore = Depends(get_store)):
    return store.get_admins()
