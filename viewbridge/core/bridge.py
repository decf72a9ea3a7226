"""
Render Bridge
=============

Entry point used by the host process. One pipeline (resolve, render,
encode) is exposed through two facades:

- ``render(request_json)`` decodes a serialized request and returns the
  serialized response.
- ``render_with_callback(request, complete)`` takes a decoded request and
  hands the serialized response to ``complete``.

Failures propagate as exceptions in both modes; no error envelope is
ever produced.
"""

from typing import Any, Callable, Mapping, Union
import json
import time

from pydantic import ValidationError

from viewbridge.config.logging import get_logger
from viewbridge.core.errors import BridgeClosed, MalformedRequest
from viewbridge.core.registry import ComponentRegistry
from viewbridge.models.schemas import RenderRequest, RenderResponse

logger = get_logger(__name__)

CompletionCallback = Callable[[str], None]


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {token}")


def decode_request(payload: Union[str, bytes]) -> RenderRequest:
    """
    Decode a serialized request envelope.

    Raises:
        MalformedRequest: If the payload is not a JSON object with a valid name
    """
    try:
        data = json.loads(payload, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise MalformedRequest(f"Request is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedRequest("Request must be a JSON object")
    if "name" not in data:
        raise MalformedRequest("Request is missing the 'name' field")

    return coerce_request(data)


def coerce_request(request: Union[RenderRequest, Mapping[str, Any]]) -> RenderRequest:
    """Validate a structured request value."""
    if isinstance(request, RenderRequest):
        return request
    try:
        return RenderRequest.model_validate(request)
    except ValidationError as e:
        raise MalformedRequest(f"Invalid request envelope: {e}") from e


def encode_response(response: RenderResponse) -> str:
    """Serialize a response envelope."""
    return response.model_dump_json()


class RenderBridge:
    """Resolves named components and renders them to markup."""

    def __init__(self, registry: ComponentRegistry) -> None:
        self.registry = registry
        self.logger: Any = logger.bind(component="bridge")
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Refuse all future requests."""
        self._closed = True
        self.logger.info("Render bridge closed")

    def execute(self, request: RenderRequest) -> RenderResponse:
        """
        Run the shared pipeline for a decoded request.

        Raises:
            BridgeClosed: If the bridge has been closed
            ComponentNotFound: If the name is not registered
            RenderError: If the component cannot render the props
        """
        if self._closed:
            raise BridgeClosed("Render bridge is closed")

        started = time.perf_counter()
        component = self.registry.resolve(request.name)
        html = component.render(request.props)
        elapsed = time.perf_counter() - started

        self.logger.debug(
            "Component rendered", name=request.name, html_length=len(html), elapsed=elapsed
        )
        return RenderResponse(html=html, elapsed=elapsed)

    def render(self, request_json: Union[str, bytes]) -> str:
        """
        Render a serialized request and return the serialized response.

        Args:
            request_json: ``{"name": ..., "props": {...}}``

        Returns:
            ``{"html": ...}``
        """
        request = decode_request(request_json)
        return encode_response(self.execute(request))

    def render_with_callback(
        self,
        request: Union[RenderRequest, Mapping[str, Any]],
        complete: CompletionCallback,
    ) -> None:
        """
        Render a decoded request and deliver the serialized response.

        ``complete`` is called exactly once when rendering succeeds and never
        when it fails.
        """
        response_json = encode_response(self.execute(coerce_request(request)))
        complete(response_json)
