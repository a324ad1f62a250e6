"""Student invite page object for E2E testing.

The invite screen renders one of three states depending on the token and
the current session: the registration form, an invalid-invite card, or an
already-logged-in card.
"""

from __future__ import annotations

from ..interactions import Interactions
from ..locators import Locator


def _select_trigger(label: str, name: str) -> Locator:
    return Locator.xpath(
        f"//label[contains(normalize-space(.), '{label}')]/following::button[@role='combobox'][1]",
        name,
    )


class InvitePage:
    """Page object for ``/invite/<token>``."""

    path = "/invite"

    FULL_NAME = Locator.by_id("fullName", "full name input")
    EMAIL = Locator.by_id("email", "email input")
    PASSWORD = Locator.by_id("password", "password input")
    INSTRUMENT_DROPDOWN = _select_trigger("Primary Instrument", "instrument dropdown")
    SKILL_LEVEL_DROPDOWN = _select_trigger("Skill Level", "skill level dropdown")
    CREATE_STUDENT_ACCOUNT_BUTTON = Locator.text(
        "Create Student Account", tag="button", name="create student account button"
    )
    LOGIN_LINK = Locator.text("Log in", tag="a", name="log in link")

    JOIN_AS_STUDENT_TITLE = Locator.text("Join as a Student", name="join as student heading")
    INVALID_INVITE_TITLE = Locator.text("Invalid Invite", name="invalid invite heading")
    INVALID_INVITE_MESSAGE = Locator.text("invalid or has expired", tag="p")
    HOMEPAGE_LINK = Locator.text("Go to Homepage", name="homepage link")
    ALREADY_LOGGED_IN_TITLE = Locator.text("Already Logged In", name="already logged in heading")
    LOGOUT_AND_ACCEPT_BUTTON = Locator.text("Log Out & Accept Invite", tag="button")
    GO_TO_DASHBOARD_BUTTON = Locator.text("Go to Dashboard", tag="button")

    def __init__(self, ui: Interactions, base_url: str) -> None:
        self.ui = ui
        self.base_url = base_url.rstrip("/")

    def url(self, token: str) -> str:
        return f"{self.base_url}{self.path}/{token}"

    def open(self, token: str) -> "InvitePage":
        self.ui.open(self.url(token))
        return self

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def enter_full_name(self, full_name: str) -> "InvitePage":
        self.ui.type(self.FULL_NAME, full_name)
        return self

    def enter_email(self, email: str) -> "InvitePage":
        # Pre-filled and locked when the invite was sent to a specific address.
        if self.ui.is_enabled(self.EMAIL):
            self.ui.type(self.EMAIL, email)
        return self

    def enter_password(self, password: str) -> "InvitePage":
        self.ui.type(self.PASSWORD, password)
        return self

    def select_instrument(self, instrument: str) -> "InvitePage":
        self.ui.select_custom_option(self.INSTRUMENT_DROPDOWN, instrument)
        return self

    def select_skill_level(self, level: str) -> "InvitePage":
        self.ui.select_custom_option(self.SKILL_LEVEL_DROPDOWN, level)
        return self

    def click_create_student_account(self) -> None:
        self.ui.click(self.CREATE_STUDENT_ACCOUNT_BUTTON)

    def click_logout_and_accept(self) -> None:
        self.ui.click(self.LOGOUT_AND_ACCEPT_BUTTON)

    def click_go_to_dashboard(self) -> None:
        self.ui.click(self.GO_TO_DASHBOARD_BUTTON)

    def click_login_link(self) -> None:
        self.ui.click(self.LOGIN_LINK)

    def register_as_student(
        self,
        full_name: str,
        email: str,
        password: str,
        instrument: str,
        skill_level: str,
    ) -> None:
        (
            self.enter_full_name(full_name)
            .enter_email(email)
            .enter_password(password)
            .select_instrument(instrument)
            .select_skill_level(skill_level)
        )
        self.click_create_student_account()

    # ------------------------------------------------------------------
    # Verifications
    # ------------------------------------------------------------------

    def selected_instrument(self) -> str:
        return self.ui.text_of(self.INSTRUMENT_DROPDOWN).strip()

    def selected_skill_level(self) -> str:
        return self.ui.text_of(self.SKILL_LEVEL_DROPDOWN).strip()

    def is_valid_invite_form_displayed(self) -> bool:
        return self.ui.is_displayed(self.JOIN_AS_STUDENT_TITLE)

    def is_invalid_invite_displayed(self) -> bool:
        return self.ui.is_displayed(self.INVALID_INVITE_TITLE)

    def is_already_logged_in_displayed(self) -> bool:
        return self.ui.is_displayed(self.ALREADY_LOGGED_IN_TITLE)

    def is_email_field_disabled(self) -> bool:
        return self.ui.is_displayed(self.EMAIL) and not self.ui.is_enabled(self.EMAIL)

    def email_value(self) -> str:
        return self.ui.value_of(self.EMAIL)

    def is_create_account_button_enabled(self) -> bool:
        return self.ui.is_enabled(self.CREATE_STUDENT_ACCOUNT_BUTTON)

    def wait_for_page_to_load(self) -> bool:
        """Block until any of the three invite states has rendered."""
        return self.ui.wait_for_any(
            (
                self.is_valid_invite_form_displayed,
                self.is_invalid_invite_displayed,
                self.is_already_logged_in_displayed,
            ),
            "invite page state",
        )
