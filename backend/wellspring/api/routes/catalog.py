"""Catalog Routes — public resources and partner listings."""

from fastapi import APIRouter, Depends, Query

from wellspring.api.dependencies import get_store
from wellspring.core.store import MemoryStore
from wellspring.models import Partner, Resource

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/resources", response_model=list[Resource])
async def list_resources(
    category: str | None = Query(None),
    store: MemoryStore = Depends(get_store),
):
    """All resources, or only those whose category matches exactly."""
    if category:
        return store.get_resources_by_category(category)
    return store.get_resources()


@router.get("/partners", response_model=list[Partner])
async def list_partners(store: MemoryStore = Depends(get_store)):
    return store.get_partners()
