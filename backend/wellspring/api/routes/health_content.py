"""Health Content Routes — public reads, admin-only writes.

Invariants:
    - POST/PATCH run require_admin before the body is read (403 beats 400)
    - PATCH validates the body before looking up the id (400 beats 404)
    - An id segment that is not plain ASCII digits is an unknown id (404);
      int() forms like "1_0", " 1" or "+1" are not accepted
"""

import logging
import re

from fastapi import APIRouter, Depends, Query, Request

from wellspring.api.dependencies import get_store, require_admin
from wellspring.api.payloads import parse_payload
from wellspring.core.domain_types import ContentStatus, EntityKind
from wellspring.core.errors import ResourceNotFoundError
from wellspring.core.store import MemoryStore
from wellspring.models import HealthContent
from wellspring.schemas.content import HealthContentCreate, HealthContentUpdate
from wellspring.services.admin_auth import AdminClaims

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health-content", tags=["health-content"])

_NOT_FOUND = "Content not found"
_INVALID_CONTENT = "Invalid content data"
_ID_PATTERN = re.compile(r"[0-9]+")


def _parse_id(raw: str) -> int:
    """Positive integer id (ASCII digits only), or ResourceNotFoundError."""
    if not _ID_PATTERN.fullmatch(raw):
        raise ResourceNotFoundError(_NOT_FOUND, EntityKind.HEALTH_CONTENT.value)
    content_id = int(raw)
    if content_id < 1:
        raise ResourceNotFoundError(
            _NOT_FOUND, EntityKind.HEALTH_CONTENT.value, content_id,
        )
    return content_id


@router.get("", response_model=list[HealthContent])
async def list_health_content(
    status: ContentStatus | None = Query(None),
    store: MemoryStore = Depends(get_store),
):
    """All articles, optionally only those in one editorial status."""
    if status is not None:
        return store.get_health_content_by_status(status)
    return store.get_health_content()


@router.get("/{content_id}", response_model=HealthContent)
async def get_health_content(
    content_id: str, store: MemoryStore = Depends(get_store),
):
    parsed = _parse_id(content_id)
    content = store.get_health_content_by_id(parsed)
    if content is None:
        raise ResourceNotFoundError(
            _NOT_FOUND, EntityKind.HEALTH_CONTENT.value, parsed,
        )
    return content


@router.post("", response_model=HealthContent)
async def create_health_content(
    request: Request,
    admin: AdminClaims = Depends(require_admin),
    store: MemoryStore = Depends(get_store),
):
    payload = await parse_payload(request, HealthContentCreate, _INVALID_CONTENT)
    content = store.create_health_content(payload)
    logger.info(
        "Health content created",
        extra={"admin_id": admin.id, "entity_id": content.id},
    )
    return content


@router.patch("/{content_id}", response_model=HealthContent)
async def update_health_content(
    content_id: str,
    request: Request,
    admin: AdminClaims = Depends(require_admin),
    store: MemoryStore = Depends(get_store),
):
    payload = await parse_payload(request, HealthContentUpdate, _INVALID_CONTENT)
    content = store.update_health_content(_parse_id(content_id), payload.changes())
    logger.info(
        "Health content updated",
        extra={"admin_id": admin.id, "entity_id": content.id},
    )
    return content
