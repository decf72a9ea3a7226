"""
Route Dependencies
==================

Hand the bridge and pool constructed at startup to route handlers.
Tests replace them through ``app.dependency_overrides``.
"""

from fastapi import Request

from viewbridge.config.settings import Settings, get_settings
from viewbridge.core.bridge import RenderBridge
from viewbridge.core.pool import RenderPool


def get_bridge(request: Request) -> RenderBridge:
    """Dependency to get the application's render bridge."""
    return request.app.state.bridge


def get_pool(request: Request) -> RenderPool:
    """Dependency to get the application's render pool."""
    return request.app.state.pool


def get_current_settings() -> Settings:
    """Dependency to get current settings."""
    return get_settings()
