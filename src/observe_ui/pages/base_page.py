"""Shared page-object plumbing.

A page object borrows a Playwright page owned by the test runner. It never
closes or replaces it.
"""

from enum import Enum

from playwright.sync_api import Page

from observe_ui.config.logging import get_logger
from observe_ui.config.settings import Settings, get_settings
from observe_ui.locators.locator import Locator


class ViewState(str, Enum):
    """Last view a page object navigated to, as far as it knows."""

    UNKNOWN = "unknown"
    ALERTS = "alerts"
    SIGNED_OUT = "signed_out"


class BasePage:
    """Base class for page objects with timeout-aware helpers."""

    def __init__(self, page: Page, *, settings: Settings | None = None) -> None:
        self.page = page
        self.settings = settings or get_settings()
        self.timeout_ms = self.settings.action_timeout_ms
        self.state = ViewState.UNKNOWN
        self.log = get_logger(type(self).__module__).bind(
            page_object=type(self).__name__
        )

    def goto(self, path: str = "") -> None:
        """Navigate to a path under the configured base URL."""
        url = f"{self.settings.base_url}{path}"
        self.log.info("page_goto", url=url)
        self.page.goto(url, timeout=self.settings.navigation_timeout_ms)
        self.state = ViewState.UNKNOWN

    def click(self, locator: Locator) -> None:
        locator.click(self.page, timeout=self.timeout_ms)

    def fill(self, locator: Locator, value: str) -> None:
        locator.fill(self.page, value, timeout=self.timeout_ms)

    def assert_text(self, locator: Locator, expected: str) -> None:
        locator.assert_text_contains(self.page, expected, timeout=self.timeout_ms)

    def _expect_state(self, expected: ViewState, action: str) -> None:
        # Ordering is the caller's job; only flag it
        if self.state is not expected:
            self.log.warning(
                "page_state_unexpected",
                action=action,
                expected=expected.value,
                actual=self.state.value,
            )
