"""Signup page object for E2E testing."""

from __future__ import annotations

from ..interactions import Interactions
from ..locators import Locator
from ..utils.random_data import random_email


class SignupPage:
    """Page object for the teacher ``/signup`` screen."""

    path = "/signup"

    FULL_NAME = Locator.by_id("fullName", "full name input")
    EMAIL = Locator.by_id("email", "email input")
    PASSWORD = Locator.by_id("password", "password input")
    CREATE_ACCOUNT_BUTTON = Locator.text("Create Account", tag="button", name="create account button")
    GOOGLE_SIGNUP_BUTTON = Locator.text("Continue with Google", tag="button")
    LOGIN_LINK = Locator.text("Log in", tag="a", name="log in link")
    PAGE_TITLE = Locator.text("Create your account", tag="h2", name="signup heading")
    TERMS_TEXT = Locator.text("Terms of Service", tag="p", name="terms text")

    def __init__(self, ui: Interactions, base_url: str) -> None:
        self.ui = ui
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    def open(self) -> "SignupPage":
        self.ui.open(self.url)
        return self

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def enter_full_name(self, full_name: str) -> "SignupPage":
        self.ui.type(self.FULL_NAME, full_name)
        return self

    def enter_email(self, email: str) -> "SignupPage":
        self.ui.type(self.EMAIL, email)
        return self

    def enter_password(self, password: str) -> "SignupPage":
        self.ui.type(self.PASSWORD, password)
        return self

    def click_create_account(self) -> "SignupPage":
        self.ui.click(self.CREATE_ACCOUNT_BUTTON)
        return self

    def click_google_signup(self) -> "SignupPage":
        self.ui.click(self.GOOGLE_SIGNUP_BUTTON)
        return self

    def click_login_link(self) -> "SignupPage":
        self.ui.click(self.LOGIN_LINK)
        return self

    def signup(self, full_name: str, email: str, password: str) -> None:
        self.enter_full_name(full_name).enter_email(email).enter_password(password)
        self.click_create_account()

    def signup_with_random_email(self, full_name: str, password: str) -> str:
        """Sign up with a generated-unique address and return it."""
        email = random_email("teacher")
        self.signup(full_name, email, password)
        return email

    # ------------------------------------------------------------------
    # Verifications
    # ------------------------------------------------------------------

    def is_page_displayed(self) -> bool:
        return self.ui.is_displayed(self.PAGE_TITLE, timeout=None)

    def is_create_account_button_enabled(self) -> bool:
        return self.ui.is_enabled(self.CREATE_ACCOUNT_BUTTON)

    def is_terms_text_displayed(self) -> bool:
        return self.ui.is_displayed(self.TERMS_TEXT)

    def email_value(self) -> str:
        return self.ui.value_of(self.EMAIL)

    def full_name_value(self) -> str:
        return self.ui.value_of(self.FULL_NAME)

    def has_validation_error(self) -> bool:
        """True when the browser rejects the email field's current value."""
        if self.ui.is_displayed(self.EMAIL):
            return not self.ui.check_validity(self.EMAIL)
        return False

    def is_password_valid(self) -> bool:
        return self.ui.check_validity(self.PASSWORD)
