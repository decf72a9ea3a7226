"""
View Bridge
===========

An in-process bridge that renders named view components to HTML for a
host process.

This package provides:
- A component registry resolving names to renderable components
- A render bridge with synchronous and callback entry points
- A thread pool with per-request timeouts
- A FastAPI adapter for hosts that talk HTTP
"""

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
from viewbridge.core.registry import ComponentRegistry, default_registry
from viewbridge.models.schemas import RenderRequest, RenderResponse

__version__ = "1.0.0"

__all__ = [
    "RenderBridge",
    "RenderPool",
    "ComponentRegistry",
    "default_registry",
    "RenderRequest",
    "RenderResponse",
    "BridgeError",
    "MalformedRequest",
    "ComponentNotFound",
    "RenderError",
    "ComponentLoadError",
    "RenderTimeout",
    "BridgeClosed",
]
