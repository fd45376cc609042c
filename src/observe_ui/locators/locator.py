"""Locator value type.

A Locator is an immutable description of how to find element(s) on a page.
It is resolved against a Playwright page only when an action runs, so page
objects can build their locator tables up front without touching the
browser.

This module is the only place that calls into Playwright's element API;
page objects go through ``click`` and ``assert_text_contains``.
"""

from dataclasses import dataclass
from enum import Enum

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator as PlaywrightLocator
from playwright.sync_api import Page, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from observe_ui.config.logging import get_logger
from observe_ui.core.exceptions import ElementResolutionError, TextAssertionError

log = get_logger(__name__)


class LocatorStrategy(str, Enum):
    """How a selector is turned into a Playwright locator."""

    CSS = "css"  # page.locator(selector)
    TEXT = "text"  # page.get_by_text(selector)
    FILTERED = "filtered"  # page.locator(selector).filter(has_text=...)


@dataclass(frozen=True)
class Locator:
    """Named, declarative reference to zero or more DOM elements.

    Attributes:
        name: Semantic name used in logs and errors, e.g. ``add_alert_button``.
        selector: CSS selector, or the visible text for TEXT locators.
        strategy: Resolution strategy.
        has_text: Filter text for FILTERED locators.
    """

    name: str
    selector: str
    strategy: LocatorStrategy = LocatorStrategy.CSS
    has_text: str | None = None

    @classmethod
    def css(cls, name: str, selector: str) -> "Locator":
        return cls(name=name, selector=selector)

    @classmethod
    def text(cls, name: str, text: str) -> "Locator":
        return cls(name=name, selector=text, strategy=LocatorStrategy.TEXT)

    @classmethod
    def filtered(cls, name: str, selector: str, has_text: str | None) -> "Locator":
        """Match ``selector`` elements whose visible text contains ``has_text``."""
        return cls(
            name=name,
            selector=selector,
            strategy=LocatorStrategy.FILTERED,
            has_text=has_text,
        )

    @property
    def description(self) -> str:
        """Selector plus filter, as shown in error messages."""
        if self.strategy is LocatorStrategy.FILTERED:
            return f"{self.selector} >> has_text={self.has_text!r}"
        if self.strategy is LocatorStrategy.TEXT:
            return f"text={self.selector}"
        return self.selector

    def resolve(self, page: Page) -> PlaywrightLocator:
        """Build the Playwright locator for this reference.

        Raises:
            ElementResolutionError: FILTERED locator with empty filter text.
                An empty has_text filter would match every element.
        """
        if self.strategy is LocatorStrategy.TEXT:
            return page.get_by_text(self.selector)
        if self.strategy is LocatorStrategy.FILTERED:
            if not self.has_text:
                log.warning("locator_empty_filter", locator=self.name, selector=self.selector)
                raise ElementResolutionError(
                    self.name, self.description, reason="filter text is empty"
                )
            return page.locator(self.selector).filter(has_text=self.has_text)
        return page.locator(self.selector)

    def click(self, page: Page, timeout: float | None = None) -> None:
        """Resolve and click.

        Raises:
            ElementResolutionError: No clickable element within the timeout, or
                Playwright rejected the target (strict mode, detached).
        """
        handle = self.resolve(page)
        log.debug("locator_click", locator=self.name)
        try:
            handle.click(timeout=timeout)
        except PlaywrightTimeoutError as e:
            log.error("locator_click_failed", locator=self.name, error=str(e))
            raise ElementResolutionError(self.name, self.description, timeout_ms=timeout) from e
        except PlaywrightError as e:
            log.error("locator_click_failed", locator=self.name, error=str(e))
            raise ElementResolutionError(self.name, self.description, reason=str(e)) from e

    def fill(self, page: Page, value: str, timeout: float | None = None) -> None:
        """Resolve and fill an input.

        Raises:
            ElementResolutionError: No editable element within the timeout, or
                Playwright rejected the target.
        """
        handle = self.resolve(page)
        log.debug("locator_fill", locator=self.name)
        try:
            handle.fill(value, timeout=timeout)
        except PlaywrightTimeoutError as e:
            log.error("locator_fill_failed", locator=self.name, error=str(e))
            raise ElementResolutionError(self.name, self.description, timeout_ms=timeout) from e
        except PlaywrightError as e:
            log.error("locator_fill_failed", locator=self.name, error=str(e))
            raise ElementResolutionError(self.name, self.description, reason=str(e)) from e

    def assert_text_contains(
        self, page: Page, expected: str, timeout: float | None = None
    ) -> None:
        """Assert the element's visible text contains ``expected``.

        Raises:
            ElementResolutionError: Element never attached within the timeout,
                or Playwright rejected the target.
            TextAssertionError: Element found but its text did not match.
        """
        handle = self.resolve(page)
        try:
            handle.wait_for(state="attached", timeout=timeout)
        except PlaywrightTimeoutError as e:
            log.error("locator_assert_unresolved", locator=self.name, error=str(e))
            raise ElementResolutionError(self.name, self.description, timeout_ms=timeout) from e
        except PlaywrightError as e:
            log.error("locator_assert_unresolved", locator=self.name, error=str(e))
            raise ElementResolutionError(self.name, self.description, reason=str(e)) from e

        try:
            expect(handle).to_contain_text(expected, timeout=timeout)
        except AssertionError as e:
            actual = self._read_text(handle)
            log.error(
                "locator_text_mismatch",
                locator=self.name,
                expected=expected,
                actual=actual,
            )
            raise TextAssertionError(self.name, expected, actual) from e
        except PlaywrightError as e:
            log.error("locator_assert_unresolved", locator=self.name, error=str(e))
            raise ElementResolutionError(self.name, self.description, reason=str(e)) from e

    def _read_text(self, handle: PlaywrightLocator) -> str | None:
        try:
            return handle.text_content(timeout=1_000)
        except PlaywrightError as e:
            log.debug("locator_text_unreadable", locator=self.name, error=str(e))
            return None
