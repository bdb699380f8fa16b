"""
Report tools: step sinks, step phrases and attachments.
"""

from .allure_utils import (
    AllureReportSink,
    QueuedReportSink,
    ReportSink,
    Status,
    attach_json,
    attach_screenshot,
    attach_text,
    failed_step,
    get_sink,
    reported_step,
    set_sink,
    ui_step,
)
from .step_text import StepTextProvider, clear_step_text_cache, get_step_text_provider

__all__ = [
    "AllureReportSink",
    "QueuedReportSink",
    "ReportSink",
    "Status",
    "attach_json",
    "attach_screenshot",
    "attach_text",
    "failed_step",
    "get_sink",
    "reported_step",
    "set_sink",
    "ui_step",
    "StepTextProvider",
    "clear_step_text_cache",
    "get_step_text_provider",
]
