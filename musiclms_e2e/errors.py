"""Exception taxonomy for the MusicLMS E2E suite."""

from __future__ import annotations


class MusicLMSError(Exception):
    """Base exception for all framework failures."""


class WaitTimeoutError(MusicLMSError, TimeoutError):
    """A wait condition never became true within its budget."""

    def __init__(self, condition: str, timeout: float, elapsed: float) -> None:
        self.condition = condition
        self.timeout = timeout
        self.elapsed = elapsed
        super().__init__(
            f"Timed out after {elapsed:.1f}s waiting for {condition} (timeout {timeout:g}s)"
        )


class InteractionError(MusicLMSError):
    """An element vanished or became unclickable mid-action."""

    def __init__(self, action: str, target: str, reason: str = "") -> None:
        self.action = action
        self.target = target
        message = f"Could not {action} {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConfigurationError(MusicLMSError):
    """A required setting is missing or an unsupported option was given."""


class DataSourceError(MusicLMSError):
    """A test data file is unreadable or malformed."""


class ReportStateError(MusicLMSError):
    """A report lifecycle event arrived out of order."""
