"""
================================================================================
Page Wiring Framework
================================================================================

Declarative page objects for Playwright based UI tests.

Components:
    - handles: lazy element handles and collections
    - locators: locator declarations and resolver
    - fields: field declarations
    - wiring: the wiring engine
    - composites: page objects and widgets
    - elements / primitives / inputs: interactive elements
    - lists: homogeneous list container
    - waits: bounded polling

Author: Automation Team
License: MIT
================================================================================
"""

from .composites import CompositeMeta, PageObject, Widget
from .elements import UIElement
from .exceptions import (
    AmbiguousLocatorError,
    ConflictingLocatorStrategyError,
    HierarchyError,
    IllegalNestingError,
    ListComponentTypeError,
    ListElementNotValidError,
    NoActivePageError,
    PagewireError,
    UnboundListError,
    UnresolvedElementError,
    WaitTimeoutError,
    WiringError,
)
from .fields import Field, ListField
from .handles import By, ElementHandle, ElementsCollection
from .inputs import CheckBox, TextField
from .lists import ListState, ListWC
from .locators import ListLocator, ListLocatorChain, Locator, LocatorChain, LocatorResolver
from .meta import ElementType, WebElementMeta
from .primitives import Button, Icon, Image, Label, Link, Text
from .session import active_page, clear_page, get_page, set_page
from .waits import assert_eventually, poll, wait_until
from .wiring import wire

__all__ = [
    "CompositeMeta",
    "PageObject",
    "Widget",
    "UIElement",
    "AmbiguousLocatorError",
    "ConflictingLocatorStrategyError",
    "HierarchyError",
    "IllegalNestingError",
    "ListComponentTypeError",
    "ListElementNotValidError",
    "NoActivePageError",
    "PagewireError",
    "UnboundListError",
    "UnresolvedElementError",
    "WaitTimeoutError",
    "WiringError",
    "Field",
    "ListField",
    "By",
    "ElementHandle",
    "ElementsCollection",
    "CheckBox",
    "TextField",
    "ListState",
    "ListWC",
    "ListLocator",
    "ListLocatorChain",
    "Locator",
    "LocatorChain",
    "LocatorResolver",
    "ElementType",
    "WebElementMeta",
    "Button",
    "Icon",
    "Image",
    "Label",
    "Link",
    "Text",
    "active_page",
    "clear_page",
    "get_page",
    "set_page",
    "assert_eventually",
    "poll",
    "wait_until",
    "wire",
]
