"""HTML suite report, failure screenshots and the pytest plugin that feeds them."""

from .screenshots import capture_screenshot
from .sink import ReportEntry, ReportSink, Status, SuiteState

__all__ = ["ReportEntry", "ReportSink", "Status", "SuiteState", "capture_screenshot"]
