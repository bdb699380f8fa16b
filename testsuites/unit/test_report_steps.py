import pytest

from pagewire.report_tools.allure_utils import (
    AllureReportSink,
    QueuedReportSink,
    Status,
    attach_json,
    attach_text,
    failed_step,
    reported_step,
    ui_step,
)
from testsuites.fakes import RecordingSink


def test_successful_step_is_passed_and_closed(report):
    with reported_step("Open menu") as step_id:
        assert step_id
    assert report.events == [("start", "Open menu"), ("status", Status.PASSED, None), ("stop",)]


def test_failing_step_is_failed_closed_and_reraised(report):
    with pytest.raises(RuntimeError, match="boom"):
        with reported_step("Click on button Save"):
            raise RuntimeError("boom")

    assert report.events[0] == ("start", "Click on button Save")
    assert report.events[1][:2] == ("status", Status.FAILED)
    assert isinstance(report.events[1][2], RuntimeError)
    assert report.events[-1] == ("stop",)
    assert [e[0] for e in report.events].count("stop") == 1


def test_nested_steps_close_innermost_first(report):
    with reported_step("outer"):
        with reported_step("inner"):
            pass
    assert [e[0] for e in report.events] == ["start", "start", "status", "stop", "status", "stop"]
    assert report.step_names == ["outer", "inner"]


def test_failed_step_records_failure(report):
    error = AssertionError("not found")
    failed_step("Get element", error)
    assert report.events == [("start", "Get element"), ("status", Status.FAILED, error), ("stop",)]


class _Named:
    def __init__(self):
        self.calls = []

    def step_text(self, key, **extras):
        return f"{key}:{extras}"

    @ui_step("write", text="value")
    def write(self, value, clear=True):
        self.calls.append((value, clear))
        return "done"


def test_ui_step_maps_placeholders(report):
    target = _Named()
    assert target.write("hello") == "done"
    assert target.calls == [("hello", True)]
    assert report.step_names == ["write:{'text': 'hello'}"]
    assert report.statuses == [Status.PASSED]


def test_queued_sink_preserves_order():
    recorder = RecordingSink()
    sink = QueuedReportSink(recorder)
    try:
        with reported_step("first", sink=sink):
            with reported_step("second", sink=sink):
                pass
        sink.flush()
    finally:
        sink.shutdown()
    assert recorder.step_names == ["first", "second"]
    assert [e[0] for e in recorder.events] == ["start", "start", "status", "stop", "status", "stop"]


def test_queued_sink_forgets_completed_calls():
    recorder = RecordingSink()
    sink = QueuedReportSink(recorder)
    try:
        for index in range(20):
            sink.start_step(f"id-{index}", f"step {index}")
            sink._pending[-1].result(timeout=5)
        sink.stop_step()
        assert len(sink._pending) == 1
        sink.flush()
    finally:
        sink.shutdown()
    assert len(recorder.step_names) == 20


def test_allure_sink_handles_pass_and_fail_without_running_report():
    sink = AllureReportSink()
    with reported_step("passing", sink=sink):
        pass
    with pytest.raises(ValueError):
        with reported_step("failing", sink=sink):
            raise ValueError("bad")
    sink.stop_step()


def test_attachment_helpers(report):
    attach_text("plain", name="Log")
    attach_json({"a": 1}, name="Data")
    assert report.events[0] == ("attach", "Log", "plain")
    assert report.events[1][1] == "Data"
    assert '"a": 1' in report.events[1][2]
