"""Alerts page object.

Usage:
    alerts = AlertsPage(page, account_email="root@example.com")
    alerts.navigate_to_alerts()
    alerts.create_alert()
    alerts.set_time_to_past_30_seconds()
    alerts.verify_time_set_to_30_seconds()
    alerts.sign_out()

Each action clicks through its steps in order and stops at the first element
that fails to resolve; later steps never run.
"""

from collections.abc import Mapping
from types import MappingProxyType

from playwright.sync_api import Page

from observe_ui.config.settings import Settings
from observe_ui.locators.common import (
    ABSOLUTE_TAB,
    DATE_TIME_BUTTON,
    PAST_30_SECONDS_TEXT,
    RELATIVE_30_SECONDS_BUTTON,
)
from observe_ui.locators.locator import Locator
from observe_ui.pages.base_page import BasePage, ViewState


class AlertsPage(BasePage):
    """Alerts list, alert creation form and account menu."""

    def __init__(
        self,
        page: Page,
        account_email: str | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(page, settings=settings)
        if account_email is None:
            account_email = self.settings.root_user_email
        self.account_email = account_email

        self.alert_menu = Locator.css("alert_menu", '[data-test="menu-link-\\/alerts-item"]')
        self.add_alert_button = Locator.css(
            "add_alert_button", '[data-test="alert-list-add-alert-btn"]'
        )
        self.sql_option = Locator.text("sql_option", "SQL")
        self.add_time_range_button = Locator.css(
            "add_time_range_button", '[data-test="multi-time-range-alerts-add-btn"]'
        )

        self.date_time_button = DATE_TIME_BUTTON
        self.relative_30_seconds_button = RELATIVE_30_SECONDS_BUTTON
        self.absolute_tab = ABSOLUTE_TAB

        # Profile button shows the signed-in account's email
        self.profile_button = Locator.filtered("profile_button", "button", account_email)
        self.sign_out_button = Locator.text("sign_out_button", "Sign Out")

    @property
    def locators(self) -> Mapping[str, Locator]:
        """Read-only view of every locator this page uses, by name."""
        return MappingProxyType(
            {
                loc.name: loc
                for loc in (
                    self.alert_menu,
                    self.add_alert_button,
                    self.sql_option,
                    self.add_time_range_button,
                    self.date_time_button,
                    self.relative_30_seconds_button,
                    self.absolute_tab,
                    self.profile_button,
                    self.sign_out_button,
                )
            }
        )

    def navigate_to_alerts(self) -> None:
        self.log.info("alerts_navigate")
        self.click(self.alert_menu)
        self.state = ViewState.ALERTS

    def create_alert(self) -> None:
        """Open a new SQL alert with the time range editor."""
        self._expect_state(ViewState.ALERTS, "create_alert")
        self.log.info("alerts_create")
        self.click(self.add_alert_button)
        self.click(self.sql_option)
        self.click(self.add_time_range_button)

    def set_time_to_past_30_seconds(self) -> None:
        self.log.info("alerts_set_relative_time", seconds=30)
        self.click(self.date_time_button)
        self.click(self.relative_30_seconds_button)

    def verify_time_set_to_30_seconds(self) -> None:
        """Assert the date/time button shows the relative 30 second range.

        Raises:
            TextAssertionError: Button text does not contain the expected label.
        """
        self.assert_text(self.date_time_button, PAST_30_SECONDS_TEXT)

    def open_absolute_time_tab(self) -> None:
        self.log.info("alerts_open_absolute_time")
        self.click(self.date_time_button)
        self.click(self.absolute_tab)

    def sign_out(self) -> None:
        """Open the account menu and sign out.

        Raises:
            ElementResolutionError: No profile button shows the account email,
                including when the email is empty.
        """
        self.log.info("alerts_sign_out", account=self.account_email)
        self.click(self.profile_button)
        self.click(self.sign_out_button)
        self.state = ViewState.SIGNED_OUT
