"""
================================================================================
Global Configuration for Page Wiring
================================================================================

This module provides centralized configuration for the wiring engine,
the list container and the step reporter, including logging setup.

Features:
    - Process-wide default configuration with per-call overrides
    - YAML-based configuration loading
    - Environment variable support
    - Centralized Loguru logging configuration

Configuration loading order:
    1. Built-in defaults (WiringConfig field defaults)
    2. YAML file (PAGEWIRE_CONFIG or config/pagewire.yaml), "pagewire" section
    3. Environment variables (override YAML settings)

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path("config") / "pagewire.yaml"

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class ConfigurationError(Exception):
    """Raised when the wiring configuration is invalid or cannot be loaded."""
    pass


@dataclass(frozen=True)
class WiringConfig:
    """
    Settings consumed by the wiring engine, lists and step reporter.

    Attributes:
        retry_amount: Attempts for identity lookups and bounded waits
        retry_interval_ms: Pause between two attempts, in milliseconds
        localization: Locale of report step phrases ("en", "ru")
        step_detailing: 1 for short phrases, 2 to mention the parent
        highlighter_start: Prefix wrapped around element names in steps
        highlighter_end: Suffix wrapped around element names in steps
        page_load_timeout_ms: Navigation timeout used by page objects
        steps_file: Optional YAML file merged over the packaged phrases
    """
    retry_amount: int = 5
    retry_interval_ms: int = 500
    localization: str = "en"
    step_detailing: int = 2
    highlighter_start: str = ""
    highlighter_end: str = ""
    page_load_timeout_ms: int = 30000
    steps_file: Optional[str] = None

    def __post_init__(self):
        if self.retry_amount < 1:
            raise ConfigurationError(f"retry_amount must be >= 1, got {self.retry_amount}")
        if self.retry_interval_ms < 0:
            raise ConfigurationError(
                f"retry_interval_ms must be >= 0, got {self.retry_interval_ms}"
            )
        if self.step_detailing not in (1, 2):
            raise ConfigurationError(
                f"step_detailing must be 1 or 2, got {self.step_detailing}"
            )

    @property
    def retry_interval(self) -> float:
        """Pause between attempts in seconds."""
        return self.retry_interval_ms / 1000.0

    def override(self, **changes) -> "WiringConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


# Environment variable -> (field name, converter)
ENV_MAPPING = {
    "PAGEWIRE_RETRY_AMOUNT": ("retry_amount", int),
    "PAGEWIRE_RETRY_INTERVAL_MS": ("retry_interval_ms", int),
    "PAGEWIRE_LOCALIZATION": ("localization", str),
    "PAGEWIRE_STEP_DETAILING": ("step_detailing", int),
    "PAGEWIRE_HIGHLIGHTER_START": ("highlighter_start", str),
    "PAGEWIRE_HIGHLIGHTER_END": ("highlighter_end", str),
    "PAGEWIRE_PAGE_LOAD_TIMEOUT": ("page_load_timeout_ms", int),
    "PAGEWIRE_STEPS_FILE": ("steps_file", str),
}

# Global configuration storage
_config: Optional[WiringConfig] = None
_raw: Dict[str, Any] = {}
_logger_initialized: bool = False


# ================================================================================
# Loading
# ================================================================================

def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root in {path} must be a mapping")
    return data


def _resolve_path(path: Optional[Union[str, Path]]) -> Optional[Path]:
    if path is not None:
        return Path(path)
    env_path = os.getenv("PAGEWIRE_CONFIG")
    if env_path:
        return Path(env_path)
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def _apply_env_overrides(values: Dict[str, Any]) -> Dict[str, Any]:
    """
    Applies environment variable overrides on top of the YAML values.

    Environment variable naming convention:
        - PAGEWIRE_<SETTING> overrides pagewire.<setting>
        - Example: PAGEWIRE_RETRY_AMOUNT=3 overrides pagewire.retry_amount
    """
    result = dict(values)
    for env_key, (field_name, converter) in ENV_MAPPING.items():
        raw = os.getenv(env_key)
        if raw is None:
            continue
        try:
            result[field_name] = converter(raw)
        except ValueError as e:
            raise ConfigurationError(f"Invalid value for {env_key}: {raw!r}") from e
        logger.debug(f"Config override from {env_key}: {field_name}={result[field_name]!r}")
    return result


def load_config(path: Optional[Union[str, Path]] = None) -> WiringConfig:
    """
    Loads configuration from YAML and environment variables.

    Args:
        path: Explicit YAML file. Defaults to PAGEWIRE_CONFIG or config/pagewire.yaml.

    Returns:
        A new WiringConfig. The global configuration is not modified.

    Raises:
        ConfigurationError: If the file is unreadable or a value is invalid.
    """
    global _raw

    config_path = _resolve_path(path)
    raw: Dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")
        raw = _read_yaml(config_path)
        logger.debug(f"Loaded configuration from {config_path}")
    _raw = raw

    section = raw.get("pagewire") or {}
    known = {f.name for f in fields(WiringConfig)}
    unknown = set(section) - known
    if unknown:
        logger.warning(f"Ignoring unknown pagewire settings: {sorted(unknown)}")
    values = {k: v for k, v in section.items() if k in known}
    values = _apply_env_overrides(values)

    try:
        return WiringConfig(**values)
    except TypeError as e:
        raise ConfigurationError(f"Invalid pagewire configuration: {e}") from e


# ================================================================================
# Global Access
# ================================================================================

def get_config() -> WiringConfig:
    """
    Returns the process-wide configuration, loading it on first use.

    Examples:
        >>> get_config().retry_amount
        5
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[WiringConfig] = None, **changes) -> WiringConfig:
    """
    Replaces the process-wide configuration.

    Args:
        config: New configuration. Defaults to the current one.
        **changes: Fields to override on top of it.

    Returns:
        The configuration now in effect.
    """
    global _config
    base = config if config is not None else get_config()
    _config = base.override(**changes) if changes else base
    return _config


def reset_config() -> None:
    """Forgets the loaded configuration so the next access reloads it."""
    global _config, _raw
    _config = None
    _raw = {}


def get_setting(key: str, default: Any = None) -> Any:
    """
    Retrieves a raw YAML value using a dot-separated key path.

    Args:
        key: Dot-separated key path (e.g., "logging.level").
        default: Default value to return if key is not found.
    """
    get_config()
    value: Any = _raw
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default
    return value


# ================================================================================
# Logging
# ================================================================================

def init_logger(level: str = None, format_str: str = None, force: bool = False) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL or config value.
        format_str: Custom log format string. Defaults to config value.
        force: Reconfigure even if the logger was already initialized.
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    log_level = level or os.getenv("LOG_LEVEL") or get_setting("logging.level", "INFO")
    log_format = format_str or get_setting("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = get_setting("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level.upper(),
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=get_setting("logging.rotation", "10 MB"),
            retention=get_setting("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


__all__ = [
    "ConfigurationError",
    "WiringConfig",
    "ENV_MAPPING",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    "get_setting",
    "init_logger",
]
