"""Suite report sink.

Lifecycle::

    IDLE --start_suite--> SUITE_RUNNING --finish_suite--> SUITE_FINISHED

While the suite runs, each worker opens at most one test entry at a time
with ``start_test`` and closes it with exactly one of ``pass_test``,
``fail_test`` or ``skip_test``.  Open entries are kept in a mapping keyed by
worker (the calling thread by default), so concurrent tests never write into
each other's entry.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Callable, Hashable

from jinja2 import BaseLoader, Environment

from ..errors import ReportStateError
from ..utils.logging_utils import get_logger
from .screenshots import sanitize_name
from .templates import REPORT_TEMPLATE

logger = get_logger("report")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
UNREPORTED_CAUSE = "test did not report an outcome"


class Status(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    PASS = "PASS"
    FAIL = "FAIL"
    SKIP = "SKIP"


class SuiteState(Enum):
    IDLE = "idle"
    SUITE_RUNNING = "suite_running"
    SUITE_FINISHED = "suite_finished"


@dataclass
class LogLine:
    status: Status
    message: str
    timestamp: str


@dataclass
class ReportEntry:
    """One test's record in the report."""

    name: str
    key: Hashable
    description: str = ""
    started_at: str = ""
    finished_at: str = ""
    status: Status | None = None
    cause: str = ""
    screenshot: Path | None = None
    logs: list[LogLine] = field(default_factory=list)

    @property
    def finished(self) -> bool:
        return self.status is not None


ScreenshotSource = Callable[[], "Path | str"]


class ReportSink:
    """Collects test lifecycle events and renders them to one HTML file."""

    def __init__(
        self,
        report_dir: str | Path,
        title: str = "MusicLMS Test Report",
        report_name: str = "E2E Test Results",
        system_info: dict[str, str] | None = None,
        clock: Callable[[], datetime] = datetime.now,
        worker_id: str | None = None,
    ) -> None:
        self.report_dir = Path(report_dir)
        self.title = title
        self.report_name = report_name
        self.system_info = dict(system_info or {})
        self._clock = clock
        self.worker_id = worker_id
        self._env = Environment(loader=BaseLoader(), autoescape=True)
        self.state = SuiteState.IDLE
        self.started_at: datetime | None = None
        self.finished_at: datetime | None = None
        self.report_path: Path | None = None
        self.entries: list[ReportEntry] = []
        self._active: dict[Hashable, ReportEntry] = {}

    # ------------------------------------------------------------------
    # Suite lifecycle
    # ------------------------------------------------------------------

    def start_suite(self) -> Path:
        if self.state is not SuiteState.IDLE:
            raise ReportStateError(f"Cannot start suite in state {self.state.value}")
        self.started_at = self._clock()
        stem = f"MusicLMS_Report_{self.started_at:%Y-%m-%d_%H-%M-%S}"
        if self.worker_id:
            # Process-parallel workers each write their own file.
            stem = f"{stem}_{sanitize_name(self.worker_id)}"
        self.report_path = self.report_dir / f"{stem}.html"
        self.state = SuiteState.SUITE_RUNNING
        logger.info("Report initialized, will be saved to %s", self.report_path)
        return self.report_path

    def finish_suite(self) -> Path:
        """Close any open entries and write the report; later calls are no-ops."""
        if self.state is SuiteState.SUITE_FINISHED:
            if self.report_path is None:
                raise ReportStateError("Finished suite has no report path")
            return self.report_path
        if self.state is SuiteState.IDLE:
            raise ReportStateError("Cannot finish a suite that was never started")

        for key in list(self._active):
            self.skip_test(UNREPORTED_CAUSE, key=key)
        self.finished_at = self._clock()
        self.state = SuiteState.SUITE_FINISHED
        path = self.flush()
        logger.info("Report generated: %s", path)
        return path

    # ------------------------------------------------------------------
    # Test lifecycle
    # ------------------------------------------------------------------

    @staticmethod
    def _key(key: Hashable | None) -> Hashable:
        return threading.get_ident() if key is None else key

    def _now(self) -> str:
        return self._clock().strftime(TIMESTAMP_FORMAT)

    def current(self, key: Hashable | None = None) -> ReportEntry | None:
        """The open entry for *key*, if any."""
        return self._active.get(self._key(key))

    def _require_current(self, key: Hashable | None) -> ReportEntry:
        entry = self.current(key)
        if entry is None:
            raise ReportStateError(f"No test is running for worker {self._key(key)!r}")
        return entry

    def start_test(self, name: str, description: str = "", key: Hashable | None = None) -> ReportEntry:
        if self.state is not SuiteState.SUITE_RUNNING:
            raise ReportStateError(f"Cannot start test '{name}' in state {self.state.value}")
        worker = self._key(key)
        if worker in self._active:
            raise ReportStateError(
                f"Cannot start test '{name}': '{self._active[worker].name}' is still running on this worker"
            )
        entry = ReportEntry(name=name, key=worker, description=description, started_at=self._now())
        self._active[worker] = entry
        self.entries.append(entry)
        self.log(f"Test started: {name}", key=worker)
        return entry

    def log(self, message: str, status: Status = Status.INFO, key: Hashable | None = None) -> None:
        entry = self._require_current(key)
        entry.logs.append(LogLine(status=status, message=message, timestamp=self._now()))

    def pass_test(self, key: Hashable | None = None) -> ReportEntry:
        entry = self._require_current(key)
        self.log(f"Test PASSED: {entry.name}", Status.PASS, key=key)
        return self._close(entry, Status.PASS)

    def fail_test(
        self,
        cause: str,
        screenshot: ScreenshotSource | None = None,
        key: Hashable | None = None,
    ) -> ReportEntry:
        """Record a failure, capturing a screenshot first when a source is given.

        A screenshot that cannot be taken is logged as a warning on the entry;
        the failure itself is still recorded.
        """
        entry = self._require_current(key)
        self.log(f"Test FAILED: {entry.name}", Status.FAIL, key=key)
        entry.cause = cause
        if screenshot is not None:
            try:
                entry.screenshot = Path(screenshot())
            except Exception as exc:
                logger.warning("Could not capture screenshot for %s: %s", entry.name, exc)
                self.log(f"Could not capture screenshot: {exc}", Status.WARNING, key=key)
            else:
                self.log(f"Screenshot captured: {entry.screenshot}", key=key)
        return self._close(entry, Status.FAIL)

    def skip_test(self, reason: str = "", key: Hashable | None = None) -> ReportEntry:
        entry = self._require_current(key)
        self.log(f"Test SKIPPED: {entry.name}", Status.SKIP, key=key)
        entry.cause = reason
        return self._close(entry, Status.SKIP)

    def _close(self, entry: ReportEntry, status: Status) -> ReportEntry:
        entry.status = status
        entry.finished_at = self._now()
        del self._active[entry.key]
        return entry

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        if self.started_at is None:
            raise ReportStateError("Cannot render a report before the suite starts")
        counts = {status.value: 0 for status in (Status.PASS, Status.FAIL, Status.SKIP)}
        for entry in self.entries:
            if entry.status is not None:
                counts[entry.status.value] += 1

        template = self._env.from_string(REPORT_TEMPLATE)
        return template.render(
            title=self.title,
            report_name=self.report_name,
            started_at=self.started_at.strftime(TIMESTAMP_FORMAT),
            finished_at=self.finished_at.strftime(TIMESTAMP_FORMAT) if self.finished_at else "",
            system_info=sorted(self.system_info.items()),
            counts=counts,
            entries=[self._view(entry) for entry in self.entries if entry.finished],
        )

    def _view(self, entry: ReportEntry) -> dict:
        screenshot = ""
        if entry.screenshot is not None:
            screenshot = os.path.relpath(entry.screenshot, self.report_dir).replace(os.sep, "/")
        return {
            "name": entry.name,
            "description": entry.description,
            "status": entry.status,
            "cause": entry.cause,
            "screenshot": screenshot,
            "logs": entry.logs,
        }

    def flush(self) -> Path:
        """Write the report from the records collected so far.

        Rendering depends only on recorded state, so repeated flushes
        without new events produce identical files.
        """
        if self.report_path is None:
            raise ReportStateError("Cannot flush a report before the suite starts")
        self.report_dir.mkdir(parents=True, exist_ok=True)
        self.report_path.write_text(self.render(), encoding="utf-8")
        return self.report_path
