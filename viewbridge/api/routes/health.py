"""
Health Routes
=============

FastAPI routes for health check endpoints.
"""

from fastapi import APIRouter, Depends

from viewbridge.api.dependencies import get_bridge, get_current_settings, get_pool
from viewbridge.config.settings import Settings
from viewbridge.core.bridge import RenderBridge
from viewbridge.core.pool import RenderPool
from viewbridge.models.schemas import HealthStatus

router = APIRouter(prefix="/api/v1", tags=["Health"])


@router.get("/health", response_model=HealthStatus)
async def health_check(
    bridge: RenderBridge = Depends(get_bridge),
    pool: RenderPool = Depends(get_pool),
    settings: Settings = Depends(get_current_settings),
) -> HealthStatus:
    """Basic health check endpoint."""
    healthy = not (bridge.closed or pool.closed)
    return HealthStatus(
        status="healthy" if healthy else "unhealthy",
        version=settings.app_version,
        components=len(bridge.registry),
    )
