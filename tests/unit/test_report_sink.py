"""Unit tests for musiclms_e2e.reporting.sink.ReportSink."""

from __future__ import annotations

import threading
from datetime import datetime

import pytest

from musiclms_e2e.errors import ReportStateError
from musiclms_e2e.reporting.sink import UNREPORTED_CAUSE, ReportSink, Status, SuiteState

STARTED = datetime(2026, 1, 2, 3, 4, 5)


@pytest.fixture
def sink(tmp_path):
    return ReportSink(
        tmp_path / "reports",
        system_info={"Browser": "chrome", "Application": "MusicLMS"},
        clock=lambda: STARTED,
    )


@pytest.fixture
def running(sink):
    sink.start_suite()
    return sink


@pytest.mark.unit
class TestSuiteLifecycle:
    def test_starts_idle(self, sink):
        assert sink.state is SuiteState.IDLE
        assert sink.report_path is None

    def test_start_suite_names_report_after_start_time(self, sink, tmp_path):
        path = sink.start_suite()
        assert path == tmp_path / "reports" / "MusicLMS_Report_2026-01-02_03-04-05.html"
        assert sink.state is SuiteState.SUITE_RUNNING

    def test_worker_id_is_appended_to_report_name(self, tmp_path):
        sink = ReportSink(tmp_path, clock=lambda: STARTED, worker_id="gw1")
        assert sink.start_suite().name == "MusicLMS_Report_2026-01-02_03-04-05_gw1.html"

    def test_workers_started_in_same_second_write_separate_files(self, tmp_path):
        paths = set()
        for worker in ("gw0", "gw1"):
            sink = ReportSink(tmp_path, clock=lambda: STARTED, worker_id=worker)
            sink.start_suite()
            paths.add(sink.finish_suite())
        assert len(paths) == 2
        assert all(path.is_file() for path in paths)

    def test_start_suite_twice_raises(self, running):
        with pytest.raises(ReportStateError):
            running.start_suite()

    def test_start_test_before_suite_raises(self, sink):
        with pytest.raises(ReportStateError, match="Cannot start test 'login'"):
            sink.start_test("login")

    def test_finish_before_start_raises(self, sink):
        with pytest.raises(ReportStateError):
            sink.finish_suite()

    def test_finish_writes_report(self, running):
        running.start_test("test_login", "Verify login")
        running.pass_test()

        path = running.finish_suite()

        assert running.state is SuiteState.SUITE_FINISHED
        html = path.read_text(encoding="utf-8")
        assert "test_login" in html
        assert "Verify login" in html
        assert 'class="status PASS"' in html
        assert "MusicLMS" in html

    def test_finish_twice_does_not_rewrite(self, running):
        path = running.finish_suite()
        path.write_text("sentinel", encoding="utf-8")

        assert running.finish_suite() == path
        assert path.read_text(encoding="utf-8") == "sentinel"

    def test_finished_suite_without_report_path_raises(self, running):
        running.finish_suite()
        running.report_path = None
        with pytest.raises(ReportStateError, match="no report path"):
            running.finish_suite()

    def test_start_test_after_finish_raises(self, running):
        running.finish_suite()
        with pytest.raises(ReportStateError):
            running.start_test("late")

    def test_open_entries_are_skipped_at_finish(self, running):
        running.start_test("never_finished")

        running.finish_suite()

        (entry,) = running.entries
        assert entry.status is Status.SKIP
        assert entry.cause == UNREPORTED_CAUSE


@pytest.mark.unit
class TestTestLifecycle:
    def test_outcome_is_set_once(self, running):
        running.start_test("once")
        running.pass_test()

        with pytest.raises(ReportStateError, match="No test is running"):
            running.fail_test("second outcome")

        assert running.entries[0].status is Status.PASS

    def test_start_twice_on_same_worker_raises(self, running):
        running.start_test("first")
        with pytest.raises(ReportStateError, match="'first' is still running"):
            running.start_test("second")

    def test_log_without_test_raises(self, running):
        with pytest.raises(ReportStateError):
            running.log("orphan")

    def test_log_lines_are_recorded(self, running):
        running.start_test("steps")
        running.log("Navigated to login page")
        running.log("Slow response", Status.WARNING)

        entry = running.current()
        messages = [(line.status, line.message) for line in entry.logs]
        assert messages == [
            (Status.INFO, "Test started: steps"),
            (Status.INFO, "Navigated to login page"),
            (Status.WARNING, "Slow response"),
        ]

    def test_skip_records_reason(self, running):
        running.start_test("skipped")
        entry = running.skip_test("no invite token")
        assert entry.status is Status.SKIP
        assert entry.cause == "no invite token"


@pytest.mark.unit
class TestKeyedEntries:
    def test_interleaved_keys_do_not_mix(self, running):
        running.start_test("a", key="worker-1")
        running.start_test("b", key="worker-2")
        running.log("step for a", key="worker-1")
        running.fail_test("boom", key="worker-2")
        running.pass_test(key="worker-1")

        a, b = running.entries
        assert a.status is Status.PASS
        assert any(line.message == "step for a" for line in a.logs)
        assert not any(line.message == "step for a" for line in b.logs)
        assert b.status is Status.FAIL
        assert b.cause == "boom"

    def test_threads_get_their_own_entries(self, running):
        barrier = threading.Barrier(4)
        errors = []

        def worker(index):
            try:
                running.start_test(f"thread-{index}")
                barrier.wait(timeout=5)
                running.log(f"message from {index}")
                running.pass_test()
            except Exception as exc:  # pragma: no cover - surfaced below
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(running.entries) == 4
        for entry in running.entries:
            index = entry.name.split("-")[1]
            assert entry.status is Status.PASS
            assert [line.message for line in entry.logs if line.message.startswith("message")] == [
                f"message from {index}"
            ]


@pytest.mark.unit
class TestFailureScreenshots:
    def test_screenshot_path_is_linked_relative_to_report(self, running, tmp_path):
        shot = tmp_path / "screenshots" / "test_login_20260102_030405.png"

        running.start_test("test_login")
        entry = running.fail_test("AssertionError: Login should succeed", lambda: shot)
        html = running.finish_suite().read_text(encoding="utf-8")

        assert entry.screenshot == shot
        assert "../screenshots/test_login_20260102_030405.png" in html
        assert "AssertionError: Login should succeed" in html

    def test_screenshot_failure_is_a_warning(self, running, caplog):
        def broken():
            raise RuntimeError("browser already closed")

        running.start_test("test_login")
        entry = running.fail_test("AssertionError", broken)

        assert entry.status is Status.FAIL
        assert entry.screenshot is None
        warnings = [line for line in entry.logs if line.status is Status.WARNING]
        assert len(warnings) == 1
        assert "browser already closed" in warnings[0].message
        assert any("browser already closed" in rec.getMessage() for rec in caplog.records)


@pytest.mark.unit
class TestRendering:
    def test_flush_is_idempotent(self, running):
        running.start_test("test_one")
        running.pass_test()

        first = running.flush().read_bytes()
        second = running.flush().read_bytes()

        assert first == second

    def test_flush_before_start_raises(self, sink):
        with pytest.raises(ReportStateError):
            sink.flush()

    def test_names_are_escaped(self, running):
        running.start_test("<script>alert(1)</script>")
        running.pass_test()

        html = running.render()

        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_counts_and_environment(self, running):
        for name, outcome in (("p", "pass"), ("f", "fail"), ("s", "skip")):
            running.start_test(name)
            if outcome == "pass":
                running.pass_test()
            elif outcome == "fail":
                running.fail_test("boom")
            else:
                running.skip_test("later")

        html = running.render()

        assert "Total: 3" in html
        assert "Passed: 1" in html
        assert "Failed: 1" in html
        assert "Skipped: 1" in html
        assert "<th>Browser</th><td>chrome</td>" in html

    def test_open_entries_are_not_rendered(self, running):
        running.start_test("in_progress")
        assert "in_progress" not in running.render()
