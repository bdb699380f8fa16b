"""
================================================================================
Test Suite Pytest Configuration
================================================================================

Registers markers and provides the shared fixtures: an in-memory browser
page, a recording report sink and a fast retry configuration.

================================================================================
"""

import pytest

from pagewire.common.global_config import WiringConfig, reset_config, set_config
from pagewire.framework.session import clear_page, set_page
from pagewire.report_tools.allure_utils import set_sink
from pagewire.report_tools.step_text import clear_step_text_cache
from testsuites.fakes import FakePage, RecordingSink


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for release"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "wiring: Page object and widget wiring"
    )
    config.addinivalue_line(
        "markers", "lists: Homogeneous list container"
    )
    config.addinivalue_line(
        "markers", "reporting: Report steps and phrases"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-add the 'regression' marker to every unit test."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.regression)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "pagewire - declarative page objects for Playwright",
        "=" * 60,
        "",
    ]


@pytest.fixture(autouse=True)
def fast_config():
    """Small retry budget without pauses, restored after each test."""
    config = set_config(WiringConfig(retry_amount=3, retry_interval_ms=0))
    clear_step_text_cache()
    yield config
    reset_config()
    clear_step_text_cache()


@pytest.fixture
def page():
    """Fake browser page registered as the active page."""
    fake = FakePage(url="http://localhost:3000/")
    set_page(fake)
    yield fake
    clear_page()


@pytest.fixture
def report():
    """Recording report sink installed as the active sink."""
    sink = RecordingSink()
    previous = set_sink(sink)
    yield sink
    set_sink(previous)
