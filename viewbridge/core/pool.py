"""
Render Pool
===========

Runs bridge renders on a bounded set of worker threads and bounds how long
a caller waits for each one.
"""

from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import Any, Mapping, Optional, Union
import threading

from viewbridge.config.logging import get_logger
from viewbridge.config.settings import get_settings
from viewbridge.core.bridge import CompletionCallback, RenderBridge
from viewbridge.core.errors import BridgeClosed, RenderTimeout
from viewbridge.models.schemas import RenderRequest

logger = get_logger(__name__)

# Wait used when neither the call nor the settings supply one
DEFAULT_TIMEOUT = 5.0


def _check_timeout(timeout: float) -> float:
    if timeout <= 0:
        raise ValueError(f"Render timeout must be positive, got {timeout}")
    return timeout


class RenderPool:
    """
    Thread pool in front of a RenderBridge.

    A render that outlives its timeout is not cancelled: it finishes on its
    worker and the result is discarded.
    """

    def __init__(
        self,
        bridge: RenderBridge,
        size: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> None:
        settings = get_settings()
        self.bridge = bridge
        if size is None:
            size = settings.pool_size
        if timeout is None:
            timeout = settings.render_timeout or DEFAULT_TIMEOUT
        if size <= 0:
            raise ValueError(f"Pool size must be positive, got {size}")
        self.size = size
        self.timeout = _check_timeout(timeout)
        self.logger: Any = logger.bind(component="pool", size=self.size)
        self._executor = ThreadPoolExecutor(
            max_workers=self.size, thread_name_prefix="viewbridge-render"
        )
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _submit(self, fn: Any, *args: Any) -> Future:
        with self._lock:
            if self._closed:
                raise BridgeClosed("Render pool is closed")
            return self._executor.submit(fn, *args)

    def _resolve_timeout(self, timeout: Optional[float]) -> float:
        return self.timeout if timeout is None else _check_timeout(timeout)

    def _wait(self, future: Future, timeout: float) -> Any:
        try:
            return future.result(timeout=timeout)
        except FutureTimeout:
            self.logger.warning("Render timed out", timeout=timeout)
            raise RenderTimeout(timeout) from None

    def render(self, request_json: Union[str, bytes], timeout: Optional[float] = None) -> str:
        """Render a serialized request on a worker thread."""
        timeout = self._resolve_timeout(timeout)
        return self._wait(self._submit(self.bridge.render, request_json), timeout)

    def render_with_callback(
        self,
        request: Union[RenderRequest, Mapping[str, Any]],
        complete: CompletionCallback,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Render a decoded request on a worker.

        ``complete`` runs on the calling thread once the worker has finished,
        so a timed-out render never reaches it.
        """
        timeout = self._resolve_timeout(timeout)
        response_json = self._wait(self._submit(self._collect, request), timeout)
        complete(response_json)

    def _collect(self, request: Union[RenderRequest, Mapping[str, Any]]) -> str:
        delivered: list[str] = []
        self.bridge.render_with_callback(request, delivered.append)
        return delivered[0]

    def close(self) -> None:
        """Stop accepting work. In-flight renders are allowed to finish."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=False)
        self.logger.info("Render pool closed")

    def __enter__(self) -> "RenderPool":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
