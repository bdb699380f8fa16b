"""
Common utilities shared by the wiring engine and the reporters.
"""

from .global_config import (
    ConfigurationError,
    WiringConfig,
    get_config,
    get_setting,
    init_logger,
    load_config,
    reset_config,
    set_config,
)

__all__ = [
    "ConfigurationError",
    "WiringConfig",
    "get_config",
    "get_setting",
    "init_logger",
    "load_config",
    "reset_config",
    "set_config",
]
