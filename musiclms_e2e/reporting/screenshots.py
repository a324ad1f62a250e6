"""Failure screenshots."""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path

from selenium.webdriver.remote.webdriver import WebDriver

from ..errors import MusicLMSError
from ..utils.logging_utils import get_logger

logger = get_logger("screenshots")

_UNSAFE = re.compile(r"[^A-Za-z0-9_.-]+")


def sanitize_name(test_name: str) -> str:
    """Reduce a test id such as ``test_login[LoginData-1]`` to a safe file stem."""
    return _UNSAFE.sub("_", test_name).strip("_.") or "test"


def capture_screenshot(driver: WebDriver, test_name: str, directory: str | Path = "screenshots") -> Path:
    """Save the current viewport as ``<test name>_<YYYYmmdd_HHMMSS>.png``."""
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = target_dir / f"{sanitize_name(test_name)}_{stamp}.png"

    if not driver.save_screenshot(str(path)):
        raise MusicLMSError(f"Screenshot could not be written to {path}")
    logger.info("Screenshot saved: %s", path)
    return path
