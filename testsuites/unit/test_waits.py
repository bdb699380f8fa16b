import pytest

from pagewire.common.global_config import WiringConfig
from pagewire.framework.exceptions import WaitTimeoutError
from pagewire.framework.waits import assert_eventually, poll, wait_until


def _counter(succeed_at):
    calls = []

    def check():
        calls.append(len(calls) + 1)
        return len(calls) >= succeed_at, len(calls)

    return check, calls


def test_poll_stops_on_success():
    check, calls = _counter(2)
    assert poll(check) == (True, 2)
    assert calls == [1, 2]


def test_poll_respects_retry_amount():
    check, calls = _counter(10)
    done, value = poll(check, WiringConfig(retry_amount=4, retry_interval_ms=0))
    assert not done
    assert value == 4
    assert len(calls) == 4


def test_wait_until_raises_after_budget():
    check, _ = _counter(10)
    with pytest.raises(WaitTimeoutError, match="rows loaded"):
        wait_until(check, description="rows loaded")


def test_wait_until_returns_value():
    check, _ = _counter(3)
    assert wait_until(check) == 3


def test_assert_eventually_builds_message_lazily():
    state = {"value": 0}

    def bump():
        state["value"] += 1
        return False

    with pytest.raises(AssertionError, match="value is 3"):
        assert_eventually(bump, lambda: f"value is {state['value']}")
