# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Bounded polling used by element assertions and list lookups.
#
# Every wait makes at most ``retry_amount`` attempts with a fixed pause of
# ``retry_interval_ms`` between them, both taken from WiringConfig.
#
# Usage:
#   ok, text = poll(lambda: (el.text() == "Done", el.text()))
#   wait_until(lambda: (rows.size() > 0, rows.size()), description="rows")
#   assert_eventually(el.is_displayed, "Button 'Save' is not visible")
#
# ================================================================================

import time
from typing import Callable, Optional, Tuple, TypeVar, Union

from loguru import logger

from pagewire.common.global_config import WiringConfig, get_config

from .exceptions import WaitTimeoutError


T = TypeVar('T')


def poll(
    check_fn: Callable[[], Tuple[bool, T]],
    config: Optional[WiringConfig] = None,
    description: str = "condition",
) -> Tuple[bool, T]:
    """
    Calls ``check_fn`` until it reports success or attempts run out.

    Args:
        check_fn: Returns (done, value)
        config: Retry settings, defaults to the global configuration
        description: Used in debug logs

    Returns:
        The last (done, value) pair.
    """
    config = config or get_config()
    attempts = config.retry_amount
    done, value = False, None

    for attempt in range(1, attempts + 1):
        done, value = check_fn()
        if done:
            return done, value
        if attempt < attempts:
            logger.debug(
                f"Waiting for {description}: attempt {attempt}/{attempts}, "
                f"retrying in {config.retry_interval}s"
            )
            time.sleep(config.retry_interval)

    return done, value


def wait_until(
    check_fn: Callable[[], Tuple[bool, T]],
    config: Optional[WiringConfig] = None,
    description: str = "condition",
) -> T:
    """
    Like ``poll`` but raises when the condition never holds.

    Raises:
        WaitTimeoutError: If all attempts fail.
    """
    config = config or get_config()
    done, value = poll(check_fn, config, description)
    if not done:
        logger.warning(f"Wait for {description} gave up after {config.retry_amount} attempts")
        raise WaitTimeoutError(
            f"{description} not met after {config.retry_amount} attempts, last value: {value!r}"
        )
    return value


def assert_eventually(
    predicate: Callable[[], bool],
    message: Union[str, Callable[[], str]],
    config: Optional[WiringConfig] = None,
) -> None:
    """
    Asserts that ``predicate`` becomes true within the retry budget.

    Args:
        predicate: Condition to check
        message: Failure message, or a callable building it after the last attempt
        config: Retry settings, defaults to the global configuration

    Raises:
        AssertionError: If the predicate never holds.
    """
    done, _ = poll(lambda: (bool(predicate()), None), config, "assertion")
    if not done:
        raise AssertionError(message() if callable(message) else message)


__all__ = ["poll", "wait_until", "assert_eventually"]
