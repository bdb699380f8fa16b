"""
================================================================================
Pagewire Exceptions
================================================================================

Exceptions raised by the wiring engine and the list container.

Wiring errors are configuration mistakes in page object declarations. They
are raised while a composite is being constructed, so no partially wired
object ever reaches the caller.

Author: Automation Team
License: MIT
================================================================================
"""

from typing import Iterable, Optional


def _owner_name(owner) -> str:
    if owner is None:
        return "<unknown>"
    if isinstance(owner, str):
        return owner
    if isinstance(owner, type):
        return owner.__name__
    return type(owner).__name__


class PagewireError(Exception):
    """Base class for all pagewire errors."""
    pass


class WiringError(PagewireError):
    """A page object, widget or list declaration is invalid."""
    pass


class ConflictingLocatorStrategyError(WiringError):
    """A field has both a direct and a chained locator."""

    def __init__(self, field: str, owner=None, kind: str = "list"):
        self.field = field
        self.owner = _owner_name(owner)
        if kind == "list":
            detail = "has both 'ListLocator' and 'ListLocatorChain'"
        else:
            detail = "has both 'Locator' and 'LocatorChain'"
        super().__init__(f"Field '{self.field}' of {self.owner} {detail}")


class AmbiguousLocatorError(ConflictingLocatorStrategyError):
    """A single locator declares more than one strategy."""

    def __init__(self, field: str, owner=None, strategies: Iterable[str] = ()):
        self.field = field
        self.owner = _owner_name(owner)
        self.strategies = sorted(strategies)
        WiringError.__init__(
            self,
            f"Field '{self.field}' of {self.owner} declares more than one locator "
            f"strategy ({', '.join(self.strategies)}), exactly one is allowed",
        )


class IllegalNestingError(WiringError):
    """A page object holds another page object."""

    def __init__(self, owner, fields: Iterable[str]):
        self.owner = _owner_name(owner)
        self.fields = list(fields)
        super().__init__(
            f"Page object [{self.owner}] contains other page object(s) within: "
            f"{', '.join(self.fields)}"
        )


class ListElementNotValidError(WiringError):
    """A list item type cannot be built from a single element handle."""

    def __init__(self, item_type, reason: str = ""):
        self.item_type = _owner_name(item_type)
        message = (
            f"There is no constructor accepting a single element handle "
            f"for class - {self.item_type}"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class HierarchyError(WiringError):
    """An element was given a second, different parent."""

    def __init__(self, element: str, current: str, new: str):
        super().__init__(
            f"Element '{element}' already belongs to '{current}' "
            f"and cannot be moved to '{new}'"
        )


class ListComponentTypeError(PagewireError):
    """A list has no usable item type."""

    def __init__(self, name: str, item_type: Optional[object] = None):
        self.list_name = name
        type_name = _owner_name(item_type) if item_type is not None else None
        super().__init__(
            f"Widget list with name='{name}', item type='{type_name}' didn't get a valid item type"
        )


class UnboundListError(PagewireError):
    """A list was read before any source query was bound to it."""

    def __init__(self, name: str):
        super().__init__(f"List '{name}' has no source elements bound")


class UnresolvedElementError(PagewireError):
    """An element was used before a locator was bound to it."""

    def __init__(self, name: str):
        super().__init__(f"Element '{name}' has no locator bound")


class NoActivePageError(PagewireError):
    """No browser page was registered for element queries."""
    pass


class WaitTimeoutError(PagewireError):
    """Raised when a bounded wait runs out of attempts."""
    pass


__all__ = [
    "PagewireError",
    "WiringError",
    "AmbiguousLocatorError",
    "ConflictingLocatorStrategyError",
    "IllegalNestingError",
    "ListElementNotValidError",
    "HierarchyError",
    "ListComponentTypeError",
    "UnboundListError",
    "UnresolvedElementError",
    "NoActivePageError",
    "WaitTimeoutError",
]
