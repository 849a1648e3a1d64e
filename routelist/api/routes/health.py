"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /api/health always returns 200 if the process is up
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from routelist.api.dependencies import get_app_settings
from routelist.config import Settings

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.app_version,
    }
