"""
Test Configuration
==================

Pytest configuration with fixtures shared by unit and integration tests.
Provides testing settings, fresh registries and bridges, and sample envelopes.
"""

import json
import pytest
from typing import Generator

from pydantic_settings import SettingsConfigDict

import viewbridge.config.settings as settings_module
from viewbridge.config.settings import Settings
from viewbridge.components import NAMESPACE
from viewbridge.core.bridge import RenderBridge
from viewbridge.core.registry import ComponentRegistry


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    pool_size: int = 4
    render_timeout: float = 2.0
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test", env_prefix="VIEWBRIDGE_TEST_")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(scope="session", autouse=True)
def override_settings(test_settings: TestSettings) -> Generator[TestSettings, None, None]:
    """Override application settings for testing."""
    previous = settings_module.settings
    settings_module.settings = test_settings
    yield test_settings
    settings_module.settings = previous


@pytest.fixture
def registry() -> ComponentRegistry:
    """Fresh registry over the bundled components."""
    return ComponentRegistry(NAMESPACE)


@pytest.fixture
def bridge(registry: ComponentRegistry) -> RenderBridge:
    """Render bridge over a fresh registry."""
    return RenderBridge(registry)


@pytest.fixture
def greeting_request_json() -> str:
    """Serialized request for the Greeting component."""
    return json.dumps({"name": "Greeting", "props": {"who": "World"}})


@pytest.fixture
def widget_props() -> dict:
    """Props for the Widget component."""
    return {"serial": "N-1-A", "date": "2017-10-17"}
