"""
pagewire: declarative page objects, widgets and element lists for
Playwright UI tests, reported as Allure steps.
"""

from pagewire.common.global_config import WiringConfig, get_config, init_logger, set_config
from pagewire.framework import *  # noqa: F401,F403
from pagewire.framework import __all__ as _framework_all

__version__ = "0.1.0"

__all__ = ["WiringConfig", "get_config", "init_logger", "set_config", *_framework_all]
