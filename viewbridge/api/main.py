"""
FastAPI Application
==================

HTTP host adapter for the render bridge. The bridge and its render pool are
constructed at startup and handed to the routes through dependencies.
"""

from contextlib import asynccontextmanager
import uuid
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from viewbridge.config.settings import get_settings
from viewbridge.config.logging import get_logger
from viewbridge.core.bridge import RenderBridge
from viewbridge.core.errors import (
    BridgeClosed,
    BridgeError,
    ComponentLoadError,
    ComponentNotFound,
    MalformedRequest,
    RenderError,
    RenderTimeout,
)
from viewbridge.core.pool import RenderPool
from viewbridge.core.registry import default_registry
from viewbridge.models.schemas import ErrorResponse

logger = get_logger(__name__)

# Most specific first
ERROR_STATUS = [
    (MalformedRequest, 400),
    (ComponentNotFound, 404),
    (ComponentLoadError, 500),
    (RenderError, 422),
    (BridgeClosed, 503),
    (RenderTimeout, 504),
]


def status_for(exc: BridgeError) -> int:
    """Map a bridge error to an HTTP status code."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return 500


def create_app(bridge: Optional[RenderBridge] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        bridge: Bridge to serve; defaults to one over the bundled components

    Returns:
        Configured application
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager."""
        logger.info("Starting render bridge", components=len(app.state.bridge.registry))
        try:
            yield
        finally:
            logger.info("Shutting down render bridge")
            app.state.pool.close()

    app = FastAPI(
        title=settings.app_name,
        description="Render named view components to HTML",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.state.bridge = bridge or RenderBridge(default_registry())
    app.state.pool = RenderPool(app.state.bridge)

    # Request ID middleware
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):  # type: ignore
        """Add request ID to all requests."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        return response

    @app.exception_handler(BridgeError)
    async def bridge_exception_handler(request: Request, exc: BridgeError) -> JSONResponse:
        """Handle bridge failures with a structured error response."""
        status_code = status_for(exc)
        details = {"name": exc.name} if getattr(exc, "name", None) else None
        error_response = ErrorResponse(
            error=str(exc),
            error_code=exc.error_code,
            details=details,
            request_id=getattr(request.state, "request_id", None),
        )

        logger.warning(
            "Render request failed",
            status_code=status_code,
            error_code=exc.error_code,
            request_id=error_response.request_id,
        )

        return JSONResponse(status_code=status_code, content=error_response.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """General exception handler for unexpected errors."""
        error_response = ErrorResponse(
            error="Internal server error",
            error_code="INTERNAL_ERROR",
            details={"exception": str(exc)} if settings.debug else None,
            request_id=getattr(request.state, "request_id", None),
        )

        logger.error(
            "Unhandled exception",
            exception=str(exc),
            request_id=error_response.request_id,
            exc_info=True,
        )

        return JSONResponse(status_code=500, content=error_response.model_dump(mode="json"))

    from viewbridge.api.routes.health import router as health_router
    from viewbridge.api.routes.render import router as render_router

    app.include_router(health_router)
    app.include_router(render_router)

    return app


def main() -> None:
    """Run the HTTP adapter with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
