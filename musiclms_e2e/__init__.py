"""Browser end-to-end suite for the MusicLMS web application."""

from .config import Settings, load_settings
from .driver import create_driver, reset_session
from .errors import (
    ConfigurationError,
    DataSourceError,
    InteractionError,
    MusicLMSError,
    ReportStateError,
    WaitTimeoutError,
)
from .interactions import Interactions
from .locators import Locator
from .waits import Waiter

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "DataSourceError",
    "InteractionError",
    "Interactions",
    "Locator",
    "MusicLMSError",
    "ReportStateError",
    "Settings",
    "WaitTimeoutError",
    "Waiter",
    "create_driver",
    "load_settings",
    "reset_session",
]
