"""
Repository-level pytest configuration.

Keeps local runs predictable: the wiring configuration is read only from
what the tests set explicitly, never from a developer's own config files
or environment.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from pagewire.common.global_config import ENV_MAPPING, init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _isolated_environment() -> Generator[None, None, None]:
    """
    Drop PAGEWIRE_* overrides inherited from the shell and set up logging.
    """
    saved = {}
    for key in list(ENV_MAPPING) + ["PAGEWIRE_CONFIG"]:
        if key in os.environ:
            saved[key] = os.environ.pop(key)

    os.environ.setdefault("LOG_LEVEL", "INFO")
    init_logger()

    yield

    os.environ.update(saved)
