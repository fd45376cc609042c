"""
Page Objects

Page Object Model (POM) for the OpenObserve web UI.
Encapsulates page interactions and locators.

Usage:
    from observe_ui.pages import AlertsPage, LoginPage

    LoginPage(page).login()
    alerts = AlertsPage(page)
    alerts.navigate_to_alerts()

Pattern:
    - One class per page/major component
    - Locators are Locator values, resolved when an action runs
    - Methods for actions (click, fill)
    - Assertions as methods
"""

from observe_ui.pages.alerts_page import AlertsPage
from observe_ui.pages.base_page import BasePage, ViewState
from observe_ui.pages.login_page import LoginPage

__all__ = ["AlertsPage", "BasePage", "LoginPage", "ViewState"]
