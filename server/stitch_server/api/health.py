"""Health check API routes"""

from typing import Any
from fastapi import APIRouter, Depends

from ..config import Settings, get_remote_config, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, Any]:
    """Liveness probe."""
    return {"ok": True}


@router.get("/api/health")
async def health_check(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Health check endpoint.

    Returns:
        dict containing health status and whether the remote optimizer is
        configured. A missing key is not unhealthy: requests fall back to
        local heuristics.
    """
    remote_config = get_remote_config(settings)
    return {
        "status": "healthy",
        "remote_optimizer": {
            "configured": remote_config is not None,
            "endpoint": remote_config.endpoint if remote_config else None,
        },
    }
