"""Playwright E2E test fixtures for the OpenObserve UI.

This module provides fixtures for:
- Browser context configuration
- Skipping the suite when no OpenObserve instance is reachable
- A signed-in page and an AlertsPage built on it

Usage:
    @pytest.mark.e2e
    def test_alerts_menu(alerts_page):
        alerts_page.navigate_to_alerts()
"""

from collections.abc import Generator
from typing import Any

import httpx
import pytest
from playwright.sync_api import Page

from observe_ui.config.settings import Settings, get_settings
from observe_ui.pages.alerts_page import AlertsPage
from observe_ui.pages.login_page import LoginPage

# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(scope="session")
def e2e_settings() -> Settings:
    return get_settings()


@pytest.fixture(scope="session", autouse=True)
def require_openobserve(e2e_settings: Settings) -> None:
    """Skip E2E tests when the UI is not running."""
    try:
        httpx.get(f"{e2e_settings.base_url}/healthz", timeout=3.0)
    except httpx.HTTPError as e:
        pytest.skip(f"OpenObserve not reachable at {e2e_settings.base_url}: {e}")


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser context for OpenObserve testing."""
    return {
        **browser_context_args,
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }


# =============================================================================
# Page Fixtures
# =============================================================================


@pytest.fixture
def signed_in_page(page: Page, e2e_settings: Settings) -> Generator[Page, None, None]:
    """Sign in as the root user and yield the page."""
    page.set_default_timeout(e2e_settings.action_timeout_ms)
    page.set_default_navigation_timeout(e2e_settings.navigation_timeout_ms)

    login = LoginPage(page, settings=e2e_settings)
    login.open()
    login.login()

    yield page


@pytest.fixture
def alerts_page(signed_in_page: Page, e2e_settings: Settings) -> AlertsPage:
    return AlertsPage(signed_in_page, settings=e2e_settings)
