"""Dashboard page object for E2E testing."""

from __future__ import annotations

from ..interactions import Interactions
from ..locators import Locator


class DashboardPage:
    """Page object for the signed-in dashboard shell and its sidebar."""

    path = "/dashboard"

    BRAND_LOGO = Locator.text("MusicLMS", tag="span", name="brand logo")
    USER_NAV = Locator.css("[data-testid='user-nav']", "user nav")
    LOGOUT_BUTTON = Locator.text("Log out", tag="button", name="log out button")
    DASHBOARD_TITLE = Locator.text("Dashboard", tag="h1", name="dashboard heading")

    # Sidebar links keyed by their visible text.
    NAV_LINKS: dict[str, Locator] = {
        "Dashboard": Locator.xpath(
            "//a[contains(@href, '/dashboard') and contains(normalize-space(.), 'Dashboard')]",
            "Dashboard link",
        ),
        "Students": Locator.xpath("//a[contains(@href, '/students')]", "Students link"),
        "Assignments": Locator.xpath("//a[contains(@href, '/assignments')]", "Assignments link"),
        "Library": Locator.xpath("//a[contains(@href, '/library')]", "Library link"),
        "Schedule": Locator.xpath("//a[contains(@href, '/schedule')]", "Schedule link"),
        "Practice Log": Locator.xpath("//a[contains(@href, '/practice')]", "Practice Log link"),
        "Messages": Locator.xpath("//a[contains(@href, '/messages')]", "Messages link"),
        "Submissions": Locator.xpath("//a[contains(@href, '/submissions')]", "Submissions link"),
        "Settings": Locator.xpath("//a[contains(@href, '/settings')]", "Settings link"),
    }

    def __init__(self, ui: Interactions, base_url: str) -> None:
        self.ui = ui
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    def open(self) -> "DashboardPage":
        self.ui.open(self.url)
        return self

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def navigate_to(self, section: str) -> "DashboardPage":
        """Click the sidebar link for *section* (e.g. ``"Assignments"``)."""
        try:
            locator = self.NAV_LINKS[section]
        except KeyError:
            raise ValueError(f"Unknown page: {section}") from None
        self.ui.click(locator)
        return self

    def navigate_to_students(self) -> "DashboardPage":
        return self.navigate_to("Students")

    def navigate_to_assignments(self) -> "DashboardPage":
        return self.navigate_to("Assignments")

    def navigate_to_schedule(self) -> "DashboardPage":
        return self.navigate_to("Schedule")

    def navigate_to_messages(self) -> "DashboardPage":
        return self.navigate_to("Messages")

    def open_user_nav(self) -> "DashboardPage":
        self.ui.click(self.USER_NAV)
        return self

    def logout(self) -> None:
        self.open_user_nav()
        self.ui.click(self.LOGOUT_BUTTON)

    def logout_and_verify(self) -> bool:
        self.logout()
        return self.ui.wait_for_url_contains("/login")

    # ------------------------------------------------------------------
    # Verifications
    # ------------------------------------------------------------------

    def is_page_displayed(self) -> bool:
        return self.path in self.ui.current_url

    def is_brand_logo_displayed(self) -> bool:
        return self.ui.is_displayed(self.BRAND_LOGO)

    def is_user_nav_displayed(self) -> bool:
        return self.ui.is_displayed(self.USER_NAV, timeout=None)

    def wait_for_dashboard_load(self) -> bool:
        return self.ui.wait_for_url_contains(self.path)

    def title(self) -> str:
        return self.ui.title
