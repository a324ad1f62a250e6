"""Suite configuration: one explicit ``Settings`` value per test session.

Sources, lowest to highest precedence:

1. Built-in defaults.
2. A properties-style file (``key=value`` lines, ``#`` comments).
3. ``MUSICLMS_*`` environment variables.
4. Explicit overrides (the pytest command-line options).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from dotenv import dotenv_values

from .errors import ConfigurationError
from .utils.logging_utils import get_logger

logger = get_logger("config")

SUPPORTED_BROWSERS = ("chrome", "firefox", "edge")

DEFAULT_CONFIG_FILE = "config.properties"

DEFAULTS: dict[str, str] = {
    "appUrl": "http://localhost:3000",
    "browser": "chrome",
    "headless": "false",
    "testEmail": "",
    "testPassword": "",
    "waitTimeout": "15",
    "implicitWait": "0",
    "screenshotDir": "screenshots",
    "reportDir": "reports",
    "logDir": "logs",
    "logLevel": "INFO",
    "inviteToken": "",
}

ENV_VARS: dict[str, str] = {
    "appUrl": "MUSICLMS_APP_URL",
    "browser": "MUSICLMS_BROWSER",
    "headless": "MUSICLMS_HEADLESS",
    "testEmail": "MUSICLMS_TEST_EMAIL",
    "testPassword": "MUSICLMS_TEST_PASSWORD",
    "waitTimeout": "MUSICLMS_WAIT_TIMEOUT",
    "reportDir": "MUSICLMS_REPORT_DIR",
    "logLevel": "MUSICLMS_LOG_LEVEL",
    "inviteToken": "MUSICLMS_INVITE_TOKEN",
}

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Resolved configuration passed to every component that needs it."""

    app_url: str
    browser: str = "chrome"
    headless: bool = False
    test_email: str = ""
    test_password: str = ""
    wait_timeout: float = 15.0
    implicit_wait: float = 0.0
    screenshot_dir: Path = Path("screenshots")
    report_dir: Path = Path("reports")
    log_dir: Path = Path("logs")
    log_level: str = "INFO"
    invite_token: str = ""

    def url(self, path: str = "") -> str:
        """Join *path* onto the application base URL."""
        if not path:
            return self.app_url
        return f"{self.app_url}/{path.lstrip('/')}"


def parse_bool(key: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    value = str(raw).strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"Setting '{key}' must be a boolean, got {raw!r}")


def _parse_seconds(key: str, raw: Any) -> float:
    try:
        seconds = float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Setting '{key}' must be a number of seconds, got {raw!r}") from exc
    if seconds < 0:
        raise ConfigurationError(f"Setting '{key}' must not be negative, got {raw!r}")
    return seconds


def normalize_browser(raw: Any) -> str:
    browser = str(raw or "").strip().lower()
    if browser not in SUPPORTED_BROWSERS:
        raise ConfigurationError(
            f"Browser not supported: {raw!r} (expected one of {', '.join(SUPPORTED_BROWSERS)})"
        )
    return browser


def _read_properties(path: Path) -> dict[str, str]:
    values = dotenv_values(path)
    return {key: value for key, value in values.items() if value is not None}


def load_settings(
    path: str | Path | None = DEFAULT_CONFIG_FILE,
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Build a ``Settings`` from defaults, *path*, the environment and *overrides*.

    A missing file is not an error (defaults and environment still apply);
    a missing or blank ``appUrl``, an unknown browser or a malformed value is.
    """
    raw: dict[str, Any] = dict(DEFAULTS)

    if path is not None:
        config_file = Path(path)
        if config_file.is_file():
            raw.update(_read_properties(config_file))
            logger.info("Configuration loaded from %s", config_file)
        else:
            logger.debug("No configuration file at %s, using defaults", config_file)

    env = os.environ if environ is None else environ
    for key, env_name in ENV_VARS.items():
        if env.get(env_name):
            raw[key] = env[env_name]

    for key, value in (overrides or {}).items():
        if value is not None:
            raw[key] = value

    app_url = str(raw.get("appUrl") or "").strip().rstrip("/")
    if not app_url:
        raise ConfigurationError("Setting 'appUrl' is required")

    return Settings(
        app_url=app_url,
        browser=normalize_browser(raw.get("browser")),
        headless=parse_bool("headless", raw.get("headless")),
        test_email=str(raw.get("testEmail") or ""),
        test_password=str(raw.get("testPassword") or ""),
        wait_timeout=_parse_seconds("waitTimeout", raw.get("waitTimeout")),
        implicit_wait=_parse_seconds("implicitWait", raw.get("implicitWait")),
        screenshot_dir=Path(raw.get("screenshotDir") or DEFAULTS["screenshotDir"]),
        report_dir=Path(raw.get("reportDir") or DEFAULTS["reportDir"]),
        log_dir=Path(raw.get("logDir") or DEFAULTS["logDir"]),
        log_level=str(raw.get("logLevel") or "INFO").upper(),
        invite_token=str(raw.get("inviteToken") or ""),
    )
