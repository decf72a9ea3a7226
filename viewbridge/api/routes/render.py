"""
Render Routes
=============

FastAPI routes for component rendering.
"""

from fastapi import APIRouter, Depends, Request, Response
from starlette.concurrency import run_in_threadpool

from viewbridge.api.dependencies import get_bridge, get_pool
from viewbridge.core.bridge import RenderBridge
from viewbridge.core.pool import RenderPool
from viewbridge.models.schemas import ComponentListResponse

router = APIRouter(prefix="/api/v1", tags=["Rendering"])


@router.post("/render")
async def render(request: Request, pool: RenderPool = Depends(get_pool)) -> Response:
    """
    Render a component.

    The body is passed through to the bridge as the serialized request
    envelope, and the serialized response envelope is returned as is.
    """
    body = await request.body()
    response_json = await run_in_threadpool(pool.render, body)
    return Response(content=response_json, media_type="application/json")


@router.get("/components", response_model=ComponentListResponse)
async def list_components(bridge: RenderBridge = Depends(get_bridge)) -> ComponentListResponse:
    """List declared component names."""
    return ComponentListResponse(
        components=bridge.registry.names(), loaded=bridge.registry.loaded()
    )
