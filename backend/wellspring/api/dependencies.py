"""Route Dependencies — injected store, gateway, settings and admin identity.

Invariants:
    - Store, gateway and settings live on app.state, set once by create_app()
    - require_admin returns AdminClaims or raises 403 before the body is read

Design Decisions:
    - app.state over module globals: each app instance (and each test) owns its store
"""

import logging

from fastapi import Depends, Header, Request

from wellspring.config import Settings
from wellspring.core.errors import MissingTokenError
from wellspring.core.store import MemoryStore
from wellspring.infrastructure.payment_gateway import PaymentGateway
from wellspring.services.admin_auth import AdminClaims, decode_token

logger = logging.getLogger(__name__)


def get_store(request: Request) -> MemoryStore:
    return request.app.state.store


def get_gateway(request: Request) -> PaymentGateway:
    return request.app.state.gateway


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def bearer_token(authorization: str | None) -> str | None:
    """Second whitespace-separated part of the Authorization header."""
    if not authorization:
        return None
    parts = authorization.split()
    return parts[1] if len(parts) > 1 else None


def require_admin(
    request: Request,
    authorization: str | None = Header(None),
    settings: Settings = Depends(get_app_settings),
) -> AdminClaims:
    """Gate for content-mutation endpoints."""
    token = bearer_token(authorization)
    if not token:
        logger.warning(
            "Protected route called without token",
            extra={"path": request.url.path},
        )
        raise MissingTokenError()
    claims = decode_token(token, settings)
    logger.debug("Admin authenticated", extra={"admin_id": claims.id})
    return claims
