"""Shared pytest fixtures for observe_ui tests.

This module provides fixtures for:
- Test environment variables (loaded from .env, with test defaults)
- Settings instances with known values
- Mocked Playwright pages for unit tests

Usage:
    @pytest.mark.unit
    def test_something(mock_page, test_settings):
        AlertsPage(mock_page, settings=test_settings).navigate_to_alerts()
"""

import os
from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest

from observe_ui.config.settings import Settings, get_settings
from tests.support.page_fakes import make_mock_page

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    os.environ.setdefault("ZO_BASE_URL", "http://localhost:5080")
    os.environ.setdefault("ZO_ROOT_USER_EMAIL", "root@example.com")
    os.environ.setdefault("ZO_ROOT_USER_PASSWORD", "Complexpass#123")

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings with fixed values, independent of the environment."""
    return Settings(
        base_url="http://observe.test:5080",
        root_user_email="root@example.com",
        root_user_password="Complexpass#123",  # type: ignore[arg-type]
        action_timeout_ms=5_000,
        navigation_timeout_ms=10_000,
    )


# =============================================================================
# Playwright Mocks
# =============================================================================


@pytest.fixture
def mock_page() -> MagicMock:
    """Mock Playwright page.

    Each selector resolves to its own mock handle; successful clicks are
    recorded in ``mock_page.clicks`` in order.
    """
    return make_mock_page()


@pytest.fixture
def mock_expect() -> Generator[MagicMock, None, None]:
    """Patch Playwright's expect() used by Locator assertions."""
    with patch("observe_ui.locators.locator.expect") as mock:
        yield mock
