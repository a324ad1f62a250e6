"""Pytest configuration for E2E tests with Selenium.

One browser is shared by the tests of a class; every test starts from a
signed-out session because cookies and web storage are cleared before it.
"""

from __future__ import annotations

import pytest

from musiclms_e2e.driver import create_driver, reset_session
from musiclms_e2e.interactions import Interactions
from musiclms_e2e.pages import AssignmentsPage, DashboardPage, InvitePage, LoginPage, SignupPage
from musiclms_e2e.utils.logging_utils import configure_logging, get_logger
from musiclms_e2e.waits import Waiter

logger = get_logger("tests")


@pytest.fixture(scope="session", autouse=True)
def suite_logging(settings):
    log_file = configure_logging(settings.log_level, settings.log_dir)
    logger.info("Logging to %s", log_file)


@pytest.fixture(scope="class")
def driver(settings):
    """Launch a browser for the test class."""
    browser = create_driver(settings)
    try:
        yield browser
    finally:
        logger.info("Closing browser")
        browser.quit()


@pytest.fixture(autouse=True)
def clean_session(driver):
    reset_session(driver)


@pytest.fixture
def ui(driver, settings) -> Interactions:
    return Interactions(driver, Waiter(driver, timeout=settings.wait_timeout))


@pytest.fixture
def step(report):
    """Log a line to both the suite log and the current report entry."""

    def _step(message: str, *args) -> None:
        text = message % args if args else message
        logger.info(text)
        report.log(text)

    return _step


@pytest.fixture
def credentials(settings) -> tuple[str, str]:
    if not (settings.test_email and settings.test_password):
        pytest.skip("testEmail/testPassword are not configured")
    return settings.test_email, settings.test_password


@pytest.fixture
def login_page(ui, settings) -> LoginPage:
    return LoginPage(ui, settings.app_url)


@pytest.fixture
def signup_page(ui, settings) -> SignupPage:
    return SignupPage(ui, settings.app_url)


@pytest.fixture
def dashboard_page(ui, settings) -> DashboardPage:
    return DashboardPage(ui, settings.app_url)


@pytest.fixture
def invite_page(ui, settings) -> InvitePage:
    return InvitePage(ui, settings.app_url)


@pytest.fixture
def assignments_page(ui, settings) -> AssignmentsPage:
    return AssignmentsPage(ui, settings.app_url)
