"""Unit tests for musiclms_e2e.reporting.screenshots."""

from __future__ import annotations

import re

import pytest

from musiclms_e2e.errors import MusicLMSError
from musiclms_e2e.reporting.screenshots import capture_screenshot, sanitize_name


@pytest.mark.unit
class TestSanitizeName:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("test_login", "test_login"),
            ("test_login[LoginData-1]", "test_login_LoginData-1"),
            ("tests/e2e/test_login.py::TestLogin::test_x", "tests_e2e_test_login.py_TestLogin_test_x"),
            ("[]", "test"),
        ],
    )
    def test_sanitize(self, raw, expected):
        assert sanitize_name(raw) == expected


@pytest.mark.unit
class TestCaptureScreenshot:
    def test_saves_timestamped_png(self, mock_driver, tmp_path):
        path = capture_screenshot(mock_driver, "test_login[LoginData-1]", tmp_path / "screenshots")

        assert path.parent == tmp_path / "screenshots"
        assert path.parent.is_dir()
        assert re.fullmatch(r"test_login_LoginData-1_\d{8}_\d{6}\.png", path.name)
        mock_driver.save_screenshot.assert_called_once_with(str(path))

    def test_failed_write_raises(self, mock_driver, tmp_path):
        mock_driver.save_screenshot.return_value = False
        with pytest.raises(MusicLMSError, match="could not be written"):
            capture_screenshot(mock_driver, "test_login", tmp_path)
