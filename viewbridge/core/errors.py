"""
Bridge Errors
=============

Exception taxonomy shared by the registry, the bridge and the render pool.
Every error is terminal for the request that raised it.
"""

from typing import Optional


class BridgeError(Exception):
    """Base class for all bridge failures."""

    error_code = "BRIDGE_ERROR"


class MalformedRequest(BridgeError):
    """Raised when a request envelope cannot be decoded."""

    error_code = "MALFORMED_REQUEST"


class ComponentNotFound(BridgeError):
    """Raised when no component is declared under the requested name."""

    error_code = "COMPONENT_NOT_FOUND"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No component registered with name '{name}'")


class RenderError(BridgeError):
    """Raised when the rendering engine cannot produce markup."""

    error_code = "RENDER_ERROR"

    def __init__(self, message: str, name: Optional[str] = None):
        self.name = name
        super().__init__(message)


class ComponentLoadError(RenderError):
    """Raised when a declared component definition cannot be loaded."""

    error_code = "COMPONENT_LOAD_ERROR"


class RenderTimeout(BridgeError):
    """Raised when a pooled render does not finish in time."""

    error_code = "RENDER_TIMEOUT"

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Render timed out after {timeout}s")


class BridgeClosed(BridgeError):
    """Raised when a closed bridge or pool is asked to render."""

    error_code = "BRIDGE_CLOSED"
