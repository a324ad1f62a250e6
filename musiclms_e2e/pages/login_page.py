"""Login page object for E2E testing."""

from __future__ import annotations

from ..interactions import Interactions
from ..locators import Locator


class LoginPage:
    """Page object for the ``/login`` screen."""

    path = "/login"

    # Locators
    EMAIL = Locator.by_id("email", "email input")
    PASSWORD = Locator.by_id("password", "password input")
    LOGIN_BUTTON = Locator.text("Log in", tag="button", name="log in button")
    GOOGLE_LOGIN_BUTTON = Locator.text("Continue with Google", tag="button")
    MAGIC_LINK_BUTTON = Locator.text("magic link", tag="button")
    SIGNUP_LINK = Locator.text("Sign up", tag="a", name="sign up link")
    ERROR_MESSAGE = Locator.css(".text-destructive", "error message")
    PAGE_TITLE = Locator.text("Welcome back", tag="h2", name="login heading")

    def __init__(self, ui: Interactions, base_url: str) -> None:
        self.ui = ui
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    def open(self) -> "LoginPage":
        self.ui.open(self.url)
        return self

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def enter_email(self, email: str) -> "LoginPage":
        self.ui.type(self.EMAIL, email)
        return self

    def enter_password(self, password: str) -> "LoginPage":
        self.ui.type(self.PASSWORD, password)
        return self

    def click_login(self) -> "LoginPage":
        self.ui.click(self.LOGIN_BUTTON)
        return self

    def click_google_login(self) -> "LoginPage":
        self.ui.click(self.GOOGLE_LOGIN_BUTTON)
        return self

    def click_magic_link(self) -> "LoginPage":
        self.ui.click(self.MAGIC_LINK_BUTTON)
        return self

    def click_signup_link(self) -> "LoginPage":
        self.ui.click(self.SIGNUP_LINK)
        return self

    def login(self, email: str, password: str) -> None:
        """Fill both fields and submit."""
        self.enter_email(email).enter_password(password).click_login()

    def login_and_verify(self, email: str, password: str) -> bool:
        """Log in and report whether the dashboard was reached in time."""
        self.login(email, password)
        return self.ui.wait_for_url_contains("/dashboard")

    # ------------------------------------------------------------------
    # Verifications
    # ------------------------------------------------------------------

    def is_page_displayed(self) -> bool:
        return self.ui.is_displayed(self.PAGE_TITLE, timeout=None)

    def is_error_message_displayed(self) -> bool:
        return self.ui.is_displayed(self.ERROR_MESSAGE, timeout=None)

    def error_message_text(self) -> str:
        return self.ui.text_of(self.ERROR_MESSAGE, timeout=None)

    def is_email_field_empty(self) -> bool:
        return self.ui.value_of(self.EMAIL) == ""

    def is_login_button_enabled(self) -> bool:
        return self.ui.is_enabled(self.LOGIN_BUTTON)

    def is_email_valid(self) -> bool:
        return self.ui.check_validity(self.EMAIL)

    def is_still_on_login(self) -> bool:
        return self.path in self.ui.current_url
