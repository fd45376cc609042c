"""Alerts smoke run against a live OpenObserve instance.

Signs in as the root user, opens the alerts page, starts a SQL alert, sets
the relative 30 second range and checks the picker label, then signs out.

Usage:
    uv run observe-ui-smoke
    uv run observe-ui-smoke --base-url http://localhost:5080 --headed
    uv run observe-ui-smoke --email root@example.com --skip-sign-out

Exit codes:
    0 - Every step passed
    1 - A step failed (element missing, text mismatch or bad configuration)
"""

import argparse
import sys

from playwright.sync_api import Page, sync_playwright
from pydantic import ValidationError

from observe_ui.config import Settings, configure_logging, get_logger, get_settings
from observe_ui.core.exceptions import ConfigurationError, ObserveUIError
from observe_ui.pages.alerts_page import AlertsPage
from observe_ui.pages.login_page import LoginPage

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="observe-ui-smoke",
        description="Drive the OpenObserve alerts page through a smoke scenario",
    )
    parser.add_argument("--base-url", help="UI base URL (default: ZO_BASE_URL)")
    parser.add_argument("--email", help="Root user email (default: ZO_ROOT_USER_EMAIL)")
    parser.add_argument(
        "--headed", action="store_true", help="Show the browser window"
    )
    parser.add_argument(
        "--skip-sign-out", action="store_true", help="Stay signed in at the end"
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Apply command line overrides on top of environment settings.

    Raises:
        ConfigurationError: An override fails settings validation.
    """
    settings = get_settings()
    overrides: dict[str, object] = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.email:
        overrides["root_user_email"] = args.email
    if args.headed:
        overrides["headless"] = False
    if not overrides:
        return settings
    try:
        return Settings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid command line override: {e}") from e


def run_scenario(page: Page, settings: Settings, *, sign_out: bool = True) -> None:
    """Run the alerts scenario on an already open page."""
    login = LoginPage(page, settings=settings)
    login.open()
    login.login()

    alerts = AlertsPage(page, settings=settings)
    alerts.navigate_to_alerts()
    alerts.create_alert()
    alerts.set_time_to_past_30_seconds()
    alerts.verify_time_set_to_30_seconds()
    if sign_out:
        alerts.sign_out()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ConfigurationError as e:
        log.error("smoke_config_invalid", error=str(e))
        return 1
    configure_logging(settings)

    log.info("smoke_start", base_url=settings.base_url, headless=settings.headless)
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=settings.headless)
        try:
            page = browser.new_page()
            page.set_default_timeout(settings.action_timeout_ms)
            page.set_default_navigation_timeout(settings.navigation_timeout_ms)
            run_scenario(page, settings, sign_out=not args.skip_sign_out)
        except ObserveUIError as e:
            log.error("smoke_failed", error=str(e), error_type=type(e).__name__)
            return 1
        finally:
            browser.close()

    log.info("smoke_passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
