"""
Unit Tests for Render Pool
==========================

Tests for pooled rendering, timeouts and shutdown.
"""

import json
import threading
import pytest
from unittest.mock import Mock

from viewbridge.core.bridge import RenderBridge
from viewbridge.core.errors import BridgeClosed, ComponentNotFound, MalformedRequest, RenderTimeout
from viewbridge.core.pool import DEFAULT_TIMEOUT, RenderPool
from viewbridge.core.registry import ComponentRegistry
from viewbridge.models.schemas import RenderRequest

from tests.utils.components import Slow


@pytest.fixture
def pool(bridge):
    """Render pool over the bundled components."""
    with RenderPool(bridge, size=2, timeout=2.0) as pool:
        yield pool


@pytest.fixture
def slow_pool():
    """Render pool whose only component is slower than its timeout."""
    bridge = RenderBridge(ComponentRegistry({"Slow": Slow(delay=0.5)}))
    with RenderPool(bridge, size=1, timeout=0.05) as pool:
        yield pool


class TestPoolConfiguration:
    """Test pool sizing and timeout defaults."""

    def test_defaults_from_settings(self, bridge, test_settings):
        """Test size and timeout fall back to settings."""
        with RenderPool(bridge) as pool:
            assert pool.size == test_settings.pool_size
            assert pool.timeout == test_settings.render_timeout

    def test_default_timeout_constant(self):
        assert DEFAULT_TIMEOUT == 5.0

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_rejected(self, bridge, size):
        """Test an explicit zero size is not replaced by the default."""
        with pytest.raises(ValueError, match="Pool size"):
            RenderPool(bridge, size=size)

    @pytest.mark.parametrize("timeout", [0, 0.0, -1.0])
    def test_non_positive_timeout_rejected(self, bridge, timeout):
        """Test an explicit zero timeout is not replaced by the default."""
        with pytest.raises(ValueError, match="Render timeout"):
            RenderPool(bridge, timeout=timeout)

    @pytest.mark.parametrize("timeout", [0, -0.5])
    def test_non_positive_call_timeout_rejected(self, bridge, timeout):
        """Test a per-call zero timeout is rejected before any work is queued."""
        complete = Mock()

        with RenderPool(bridge, size=1, timeout=2.0) as pool:
            with pytest.raises(ValueError, match="Render timeout"):
                pool.render('{"name": "Greeting", "props": {"who": "x"}}', timeout=timeout)
            with pytest.raises(ValueError, match="Render timeout"):
                pool.render_with_callback(RenderRequest(name="Greeting"), complete, timeout=timeout)

        assert bridge.registry.loaded() == []
        complete.assert_not_called()


class TestPoolRender:
    """Test pooled rendering in both modes."""

    def test_render(self, pool, greeting_request_json):
        """Test a pooled synchronous render."""
        assert pool.render(greeting_request_json) == '{"html":"<p>Hello, World</p>"}'

    def test_render_with_callback(self, pool):
        """Test the callback fires once on the calling thread."""
        calls = []

        def complete(response_json):
            calls.append((response_json, threading.current_thread()))

        pool.render_with_callback(RenderRequest(name="Greeting", props={"who": "W"}), complete)

        assert calls == [('{"html":"<p>Hello, W</p>"}', threading.current_thread())]

    def test_errors_propagate_unchanged(self, pool):
        """Test bridge errors surface from the pool."""
        with pytest.raises(ComponentNotFound):
            pool.render('{"name": "WrongWidget"}')
        with pytest.raises(MalformedRequest):
            pool.render("{")

    def test_callback_not_invoked_on_error(self, pool):
        complete = Mock()

        with pytest.raises(ComponentNotFound):
            pool.render_with_callback(RenderRequest(name="WrongWidget"), complete)

        complete.assert_not_called()

    def test_concurrent_renders(self, pool):
        """Test many threads rendering distinct props through one pool."""
        errors = []

        def worker(i):
            serial = f"N-{i}-A"
            request_json = json.dumps(
                {"name": "Widget", "props": {"serial": serial, "date": "2017-10-17"}}
            )
            for _ in range(20):
                html = json.loads(pool.render(request_json))["html"]
                if serial not in html or "2017-10-17" not in html:
                    errors.append(html)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []


class TestPoolTimeout:
    """Test bounded waits."""

    def test_render_times_out(self, slow_pool):
        """Test a slow render raises RenderTimeout."""
        with pytest.raises(RenderTimeout, match="timed out") as exc_info:
            slow_pool.render('{"name": "Slow"}')

        assert exc_info.value.timeout == 0.05

    def test_per_call_timeout_overrides_default(self, slow_pool):
        """Test a generous per-call timeout lets the render finish."""
        assert slow_pool.render('{"name": "Slow"}', timeout=5.0) == '{"html":"<p>slow</p>"}'

    def test_callback_not_invoked_on_timeout(self, slow_pool):
        """Test a timed-out render never reaches the callback."""
        complete = Mock()

        with pytest.raises(RenderTimeout):
            slow_pool.render_with_callback(RenderRequest(name="Slow"), complete)

        # Let the abandoned render finish on its worker
        slow_pool.render('{"name": "Slow"}', timeout=5.0)
        complete.assert_not_called()


class TestPoolClose:
    """Test pool shutdown."""

    def test_closed_pool_refuses_work(self, bridge, greeting_request_json):
        """Test renders after close raise BridgeClosed."""
        pool = RenderPool(bridge, size=1)
        pool.close()

        assert pool.closed
        with pytest.raises(BridgeClosed):
            pool.render(greeting_request_json)
        with pytest.raises(BridgeClosed):
            pool.render_with_callback(RenderRequest(name="Greeting"), Mock())

    def test_close_is_idempotent(self, bridge):
        pool = RenderPool(bridge, size=1)
        pool.close()
        pool.close()

        assert pool.closed
