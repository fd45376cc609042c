"""Locators shared across OpenObserve pages.

The date/time picker appears on logs, metrics, dashboards and alerts, so its
locators live here instead of on a single page object.
"""

from observe_ui.locators.locator import Locator

DATE_TIME_BUTTON = Locator.css("date_time_button", '[data-test="date-time-btn"]')

RELATIVE_30_SECONDS_BUTTON = Locator.css(
    "relative_30_seconds_button",
    '[data-test="date-time-relative-30-s-btn"] > .q-btn__content > .block',
)

ABSOLUTE_TAB = Locator.css("absolute_tab", '[data-test="date-time-absolute-tab"]')

# Text the date/time button shows after picking "30 Seconds" (icon ligatures included)
PAST_30_SECONDS_TEXT = "schedule30 Seconds agoarrow_drop_down"
