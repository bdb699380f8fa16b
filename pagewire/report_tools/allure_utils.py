"""
================================================================================
Allure Report Utilities
================================================================================

This module connects element interactions with the Allure report.

Features:
- Report sink interface (start / stop / status / attach)
- Allure backed sink built on ``allure.step`` and ``allure.attach``
- Order preserving queued sink running on a single worker thread
- ``reported_step`` context manager and ``ui_step`` decorator
- Attachment helpers

================================================================================
"""

import inspect
import json
import uuid
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Iterator, List, Optional

import allure
from allure_commons.model2 import Status
from loguru import logger


# ================================================================================
# Report Sinks
# ================================================================================

class ReportSink:
    """
    Destination of hierarchical report steps.

    Steps nest: ``start_step`` opens a child of the currently open step and
    ``stop_step`` closes the innermost one.
    """

    def start_step(self, step_id: str, name: str) -> None:
        raise NotImplementedError

    def set_step_status(self, status: str, error: Optional[BaseException] = None) -> None:
        raise NotImplementedError

    def stop_step(self) -> None:
        raise NotImplementedError

    def attach(self, artifact: Any, label: str, attachment_type: Any = None) -> None:
        raise NotImplementedError


class AllureReportSink(ReportSink):
    """Writes steps through the Allure lifecycle of the running test."""

    def __init__(self):
        self._open: List[dict] = []

    def start_step(self, step_id: str, name: str) -> None:
        context = allure.step(name)
        context.__enter__()
        self._open.append({"id": step_id, "context": context, "status": None, "error": None})

    def set_step_status(self, status: str, error: Optional[BaseException] = None) -> None:
        if not self._open:
            logger.warning(f"Step status '{status}' set with no open step")
            return
        self._open[-1]["status"] = status
        self._open[-1]["error"] = error

    def stop_step(self) -> None:
        if not self._open:
            logger.warning("stop_step called with no open step")
            return
        step = self._open.pop()
        error = step["error"]
        if step["status"] in (Status.FAILED, Status.BROKEN) and error is None:
            error = AssertionError(f"Step failed: {step['id']}")
        if error is not None:
            step["context"].__exit__(type(error), error, error.__traceback__)
        else:
            step["context"].__exit__(None, None, None)

    def attach(self, artifact: Any, label: str, attachment_type: Any = None) -> None:
        allure.attach(
            artifact,
            name=label,
            attachment_type=attachment_type or allure.attachment_type.TEXT,
        )


class QueuedReportSink(ReportSink):
    """
    Forwards calls to another sink from a single worker thread.

    Calls return immediately and are applied in submission order, so a
    step is always started before it is stopped.
    """

    def __init__(self, delegate: ReportSink):
        self.delegate = delegate
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pagewire-report")
        self._pending = []

    def _submit(self, fn: Callable, *args) -> None:
        self._pending = [pending for pending in self._pending if not pending.done()]
        future = self._executor.submit(fn, *args)
        future.add_done_callback(self._log_failure)
        self._pending.append(future)

    @staticmethod
    def _log_failure(future) -> None:
        error = future.exception()
        if error is not None:
            logger.error(f"Report sink call failed: {error}")

    def start_step(self, step_id: str, name: str) -> None:
        self._submit(self.delegate.start_step, step_id, name)

    def set_step_status(self, status: str, error: Optional[BaseException] = None) -> None:
        self._submit(self.delegate.set_step_status, status, error)

    def stop_step(self) -> None:
        self._submit(self.delegate.stop_step)

    def attach(self, artifact: Any, label: str, attachment_type: Any = None) -> None:
        self._submit(self.delegate.attach, artifact, label, attachment_type)

    def flush(self) -> None:
        """Blocks until every submitted call has been applied."""
        pending, self._pending = self._pending, []
        for future in pending:
            future.exception()

    def shutdown(self) -> None:
        self.flush()
        self._executor.shutdown(wait=True)


_sink: Optional[ReportSink] = None


def get_sink() -> ReportSink:
    """Returns the active sink, creating the Allure one on first use."""
    global _sink
    if _sink is None:
        _sink = AllureReportSink()
    return _sink


def set_sink(sink: Optional[ReportSink]) -> Optional[ReportSink]:
    """
    Replaces the active sink.

    Args:
        sink: New sink, or None to fall back to the Allure sink on next use.

    Returns:
        The previously active sink.
    """
    global _sink
    previous, _sink = _sink, sink
    return previous


# ================================================================================
# Steps
# ================================================================================

@contextmanager
def reported_step(name: str, sink: Optional[ReportSink] = None) -> Iterator[str]:
    """
    Runs the enclosed block as one report step.

    The step is marked failed and the original exception re-raised when the
    block raises; the step is closed exactly once either way.

    Usage:
        >>> with reported_step("Click on button Submit"):
        ...     locator.click()
    """
    sink = sink or get_sink()
    step_id = str(uuid.uuid4())
    sink.start_step(step_id, name)
    try:
        yield step_id
    except Exception as e:
        sink.set_step_status(Status.FAILED, e)
        raise
    else:
        sink.set_step_status(Status.PASSED)
    finally:
        sink.stop_step()


def failed_step(name: str, error: BaseException, sink: Optional[ReportSink] = None) -> None:
    """Records a step that has already failed."""
    sink = sink or get_sink()
    sink.start_step(str(uuid.uuid4()), name)
    sink.set_step_status(Status.FAILED, error)
    sink.stop_step()


def ui_step(step_key: str, **placeholders: str):
    """
    Decorator reporting an element method as a step.

    The step name comes from ``self.step_text(step_key, ...)``. Keyword
    arguments map phrase placeholders to the decorated method's parameters.

    Args:
        step_key: Phrase key in the step table
        **placeholders: placeholder name -> parameter name

    Usage:
        @ui_step("write", text="text")
        def write(self, text): ...
    """
    def decorator(func: Callable):
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            values = {ph: bound.arguments[arg] for ph, arg in placeholders.items()}
            with reported_step(self.step_text(step_key, **values)):
                return func(self, *args, **kwargs)
        return wrapper
    return decorator


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data", sink: Optional[ReportSink] = None):
    """
    Attach JSON data to the report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str, ensure_ascii=False)
    (sink or get_sink()).attach(json_str, name, allure.attachment_type.JSON)


def attach_text(text: str, name: str = "Text", sink: Optional[ReportSink] = None):
    """
    Attach text content to the report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    (sink or get_sink()).attach(text, name, allure.attachment_type.TEXT)


def attach_screenshot(element, name: Optional[str] = None, sink: Optional[ReportSink] = None):
    """
    Attach a PNG screenshot of an element to the report.

    Args:
        element: Any object with a ``root`` handle (elements, widgets)
        name: Attachment name, defaults to the element name
    """
    png = element.root.screenshot()
    label = name or getattr(element, "name", "") or "Screenshot"
    (sink or get_sink()).attach(png, label, allure.attachment_type.PNG)


__all__ = [
    "Status",
    "ReportSink",
    "AllureReportSink",
    "QueuedReportSink",
    "get_sink",
    "set_sink",
    "reported_step",
    "failed_step",
    "ui_step",
    "attach_json",
    "attach_text",
    "attach_screenshot",
]
