"""Login screen: TC_Auth_001 to TC_Auth_007."""

from __future__ import annotations

import pytest

from musiclms_e2e.utils.random_data import random_string

pytestmark = pytest.mark.e2e


class TestLogin:
    @pytest.mark.sanity
    def test_tc_auth_001_login_page_display(self, login_page, step):
        """Verify login page is displayed correctly"""
        step("========== TC_Auth_001: Verify Login Page Display ==========")
        login_page.open()

        displayed = login_page.is_page_displayed()
        step("Login page displayed: %s", displayed)
        assert displayed, "Login page should be displayed"

    @pytest.mark.sanity
    @pytest.mark.regression
    def test_tc_auth_002_valid_login(self, login_page, dashboard_page, credentials, step):
        """Verify login with valid credentials"""
        step("========== TC_Auth_002: Verify Valid Login ==========")
        email, password = credentials
        login_page.open()

        step("Logging in with email: %s", email)
        login_page.login(email, password)

        assert dashboard_page.wait_for_dashboard_load(), "Login should redirect to dashboard"
        assert dashboard_page.is_page_displayed(), "Dashboard should be displayed after login"

    @pytest.mark.regression
    def test_tc_auth_003_invalid_password(self, login_page, credentials, step):
        """Verify login fails with invalid password"""
        step("========== TC_Auth_003: Verify Invalid Password Login ==========")
        email, _ = credentials
        login_page.open()

        login_page.login(email, "WrongPassword123!")

        has_error = login_page.is_error_message_displayed()
        step("Error message displayed: %s", has_error)
        assert login_page.is_still_on_login(), "User should remain on login page after failed login"

    @pytest.mark.regression
    def test_tc_auth_004_unknown_email(self, login_page, step):
        """Verify login fails with non-existent email"""
        step("========== TC_Auth_004: Verify Invalid Email Login ==========")
        email = f"nonexistent_{random_string()}@test.com"
        login_page.open()

        step("Attempting login with non-existent email: %s", email)
        login_page.login(email, "AnyPassword123!")

        assert not login_page.ui.wait_for_url_contains("/dashboard", timeout=3)
        assert login_page.is_still_on_login(), "User should remain on login page"

    @pytest.mark.regression
    def test_tc_auth_005_empty_fields(self, login_page, step):
        """Verify login fails with empty fields"""
        step("========== TC_Auth_005: Verify Empty Fields Validation ==========")
        login_page.open()

        login_page.click_login()

        assert login_page.is_still_on_login(), "User should remain on login page"
        assert login_page.is_email_field_empty(), "Email field should still be empty"

    @pytest.mark.sanity
    def test_tc_auth_006_signup_navigation(self, login_page, signup_page, step):
        """Verify navigation from login to signup page"""
        step("========== TC_Auth_006: Verify Signup Navigation ==========")
        login_page.open()

        step("Clicking Sign up link")
        login_page.click_signup_link()

        assert login_page.ui.wait_for_url_contains("/signup"), "Should navigate to signup page"
        assert signup_page.is_page_displayed(), "Signup page should be displayed"

    @pytest.mark.sanity
    def test_tc_auth_007_login_button_state(self, login_page, step):
        """Verify login button is enabled"""
        step("========== TC_Auth_007: Verify Login Button State ==========")
        login_page.open()

        enabled = login_page.is_login_button_enabled()
        step("Login button enabled: %s", enabled)
        assert enabled, "Login button should be enabled"
