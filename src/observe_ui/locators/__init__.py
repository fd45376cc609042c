"""Locator value type and shared locator constants.

Usage:
    from observe_ui.locators import Locator, DATE_TIME_BUTTON

    DATE_TIME_BUTTON.click(page)
"""

from observe_ui.locators.common import (
    ABSOLUTE_TAB,
    DATE_TIME_BUTTON,
    PAST_30_SECONDS_TEXT,
    RELATIVE_30_SECONDS_BUTTON,
)
from observe_ui.locators.locator import Locator, LocatorStrategy

__all__ = [
    "ABSOLUTE_TAB",
    "DATE_TIME_BUTTON",
    "PAST_30_SECONDS_TEXT",
    "RELATIVE_30_SECONDS_BUTTON",
    "Locator",
    "LocatorStrategy",
]
