"""pytest plugin wiring settings and the HTML report into a test session.

Only tests that request the ``driver`` fixture are reported.  The suite is
started by the first such test, so sessions that never touch a browser
write no report.
"""

from __future__ import annotations

import getpass
import os
import platform
from pathlib import Path

import pytest

from ..config import DEFAULT_CONFIG_FILE, Settings, load_settings
from ..errors import ConfigurationError
from ..utils.logging_utils import get_logger
from .screenshots import capture_screenshot
from .sink import UNREPORTED_CAUSE, ReportSink, SuiteState

logger = get_logger("plugin")

settings_key = pytest.StashKey[Settings]()
sink_key = pytest.StashKey[ReportSink]()

DRIVER_FIXTURE = "driver"
XDIST_WORKER_VAR = "PYTEST_XDIST_WORKER"


def pytest_addoption(parser):
    group = parser.getgroup("musiclms", "MusicLMS end-to-end suite")
    group.addoption("--browser", action="store", default=None, help="Browser to run: chrome, firefox or edge")
    group.addoption(
        "--headless", action="store_true", default=None, help="Run the browser without a visible window"
    )
    group.addoption("--app-url", action="store", default=None, help="Base URL of the MusicLMS instance")
    group.addoption(
        "--musiclms-config",
        action="store",
        default=DEFAULT_CONFIG_FILE,
        help="Path to the properties file (default: %(default)s)",
    )
    group.addoption("--report-dir", action="store", default=None, help="Directory for the HTML report")


def _system_info(settings: Settings) -> dict[str, str]:
    return {
        "Application": "MusicLMS",
        "Base URL": settings.app_url,
        "Browser": settings.browser,
        "Headless": str(settings.headless),
        "OS": platform.platform(),
        "Python": platform.python_version(),
        "User": getpass.getuser(),
    }


def pytest_configure(config):
    overrides = {
        "browser": config.getoption("--browser"),
        "headless": config.getoption("--headless"),
        "appUrl": config.getoption("--app-url"),
        "reportDir": config.getoption("--report-dir"),
    }
    try:
        settings = load_settings(config.getoption("--musiclms-config"), overrides)
    except ConfigurationError as exc:
        pytest.exit(f"Invalid MusicLMS configuration: {exc}", returncode=pytest.ExitCode.USAGE_ERROR)

    config.stash[settings_key] = settings
    config.stash[sink_key] = ReportSink(
        settings.report_dir,
        title="MusicLMS Test Report",
        report_name="MusicLMS E2E Test Results",
        system_info=_system_info(settings),
        worker_id=os.environ.get(XDIST_WORKER_VAR),
    )


def _reported(item) -> bool:
    return DRIVER_FIXTURE in getattr(item, "fixturenames", ())


def _description(item) -> str:
    doc = getattr(getattr(item, "obj", None), "__doc__", None) or ""
    return doc.strip().splitlines()[0] if doc.strip() else ""


def _skip_reason(report) -> str:
    if isinstance(report.longrepr, tuple):
        return str(report.longrepr[2])
    return str(report.longrepr or "")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_setup(item):
    if _reported(item):
        sink = item.config.stash[sink_key]
        if sink.state is SuiteState.IDLE:
            sink.start_suite()
        if sink.current() is not None:
            sink.skip_test(UNREPORTED_CAUSE)
        sink.start_test(item.name, _description(item))
    yield


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if not _reported(item) or report.when == "teardown":
        return

    sink = item.config.stash[sink_key]
    if sink.current() is None:
        return

    if report.failed:
        cause = call.excinfo.exconly() if call.excinfo is not None else report.longreprtext
        driver = item.funcargs.get(DRIVER_FIXTURE) if hasattr(item, "funcargs") else None
        screenshot = None
        if driver is not None:
            directory = item.config.stash[settings_key].screenshot_dir
            screenshot = lambda: capture_screenshot(driver, item.name, directory)  # noqa: E731
        sink.fail_test(cause, screenshot)
    elif report.skipped:
        sink.skip_test(_skip_reason(report))
    elif report.when == "call":
        sink.pass_test()


@pytest.fixture
def report(request) -> ReportSink:
    """The session's report sink, for logging steps into the current test's entry."""
    return request.config.stash[sink_key]


@pytest.fixture(scope="session")
def settings(request) -> Settings:
    return request.config.stash[settings_key]


def pytest_sessionfinish(session, exitstatus):
    sink = session.config.stash.get(sink_key, None)
    if sink is not None and sink.state is SuiteState.SUITE_RUNNING:
        sink.finish_suite()


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    sink = config.stash.get(sink_key, None)
    if sink is not None and sink.state is SuiteState.SUITE_FINISHED:
        terminalreporter.write_sep("-", f"MusicLMS report: {Path(sink.report_path).resolve()}")
