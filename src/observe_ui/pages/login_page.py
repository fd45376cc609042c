"""Login page object."""

from observe_ui.core.exceptions import ConfigurationError
from observe_ui.locators.locator import Locator
from observe_ui.pages.base_page import BasePage, ViewState

LOGIN_PATH = "/web/login"


class LoginPage(BasePage):
    """Email/password sign-in form."""

    user_id_input = Locator.css("user_id_input", '[data-test="login-user-id"]')
    password_input = Locator.css("password_input", '[data-test="login-password"]')
    sign_in_button = Locator.css("sign_in_button", '[data-test="login-sign-in"]')

    def open(self) -> None:
        self.goto(LOGIN_PATH)

    def login(self, email: str | None = None, password: str | None = None) -> None:
        """Sign in, defaulting to the configured root user.

        Raises:
            ConfigurationError: No email or password given or configured.
            ElementResolutionError: A form control did not resolve.
        """
        if email is None:
            email = self.settings.root_user_email
        if password is None:
            password = self.settings.root_user_password.get_secret_value()
        if not email or not password:
            raise ConfigurationError(
                "Login needs ZO_ROOT_USER_EMAIL and ZO_ROOT_USER_PASSWORD"
            )

        self.log.info("login_submit", email=email)
        self.fill(self.user_id_input, email)
        self.fill(self.password_input, password)
        self.click(self.sign_in_button)
        self.state = ViewState.UNKNOWN
