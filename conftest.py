"""Root conftest: plugin registration and fixtures shared by all test layers."""

from __future__ import annotations

import os
import textwrap
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from musiclms_e2e.config import ENV_VARS

pytest_plugins = ["pytester", "musiclms_e2e.reporting.plugin"]


@pytest.fixture()
def mock_driver() -> MagicMock:
    """A WebDriver stand-in whose element lookups all succeed."""
    driver = MagicMock()
    driver.current_url = "http://localhost:3000/login"
    driver.title = "MusicLMS"
    element = driver.find_element.return_value
    element.is_displayed.return_value = True
    element.is_enabled.return_value = True
    element.text = ""
    return driver


@pytest.fixture()
def properties_file(tmp_path: Path) -> Path:
    """Write a complete ``config.properties`` for configuration tests."""
    path = tmp_path / "config.properties"
    path.write_text(
        textwrap.dedent("""\
            # MusicLMS test configuration
            appUrl=http://musiclms.local:3000/
            browser=Firefox
            headless=true
            testEmail=teacher@musiclms.test
            testPassword=SecurePass123!
            waitTimeout=20
            implicitWait=0
            screenshotDir=out/screenshots
            reportDir=out/reports
        """),
    )
    return path


@pytest.fixture()
def clean_env():
    """Clear ``MUSICLMS_*`` variables so the process environment cannot leak into settings."""
    with patch.dict(os.environ, {name: "" for name in ENV_VARS.values()}, clear=False):
        yield
