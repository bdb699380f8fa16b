"""
================================================================================
Browser Session
================================================================================

Current browser page used by every element query.

The page lifecycle belongs to the test fixtures; this module only keeps a
reference to the page that element handles should query.

Author: Automation Team
License: MIT
================================================================================
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from loguru import logger
from playwright.sync_api import Page

from .exceptions import NoActivePageError


_page: Optional[Page] = None


def set_page(page: Optional[Page]) -> None:
    global _page
    _page = page
    logger.debug(f"Active page set: {page!r}")


def get_page() -> Page:
    if _page is None:
        raise NoActivePageError("No active page. Call pagewire.set_page(page) first.")
    return _page


def clear_page() -> None:
    set_page(None)


@contextmanager
def active_page(page: Page) -> Iterator[Page]:
    """Temporarily makes ``page`` the active page."""
    previous = _page
    set_page(page)
    try:
        yield page
    finally:
        set_page(previous)


__all__ = ["set_page", "get_page", "clear_page", "active_page"]
