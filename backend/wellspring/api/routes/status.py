"""Liveness Probe — answers 200 whenever the process is serving requests."""

from fastapi import APIRouter, status

router = APIRouter(prefix="/api/status", tags=["status"])


@router.get("", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "healthy", "service": "wellspring-api", "version": "1.0.0"}
