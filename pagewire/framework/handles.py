"""
================================================================================
Element Handles
================================================================================

Lazy, re-queryable references to locations in the rendered document.

A handle stores *how* to find an element (strategy, value and the parent
handle it is scoped to), never the element itself. Every property access
builds a fresh Playwright locator, so a handle stays valid across page
re-renders.

Strategies:
    - id          -> id=<value>
    - css         -> css=<value>
    - xpath       -> xpath=<value>
    - class_name  -> css=.<value>

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from playwright.sync_api import Locator

from .session import get_page


STRATEGIES = ("id", "css", "xpath", "class_name")


@dataclass(frozen=True)
class By:
    """
    One locator strategy and its value.

    Attributes:
        strategy: One of "id", "css", "xpath", "class_name"
        value: Raw selector value
    """
    strategy: str
    value: str

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown locator strategy '{self.strategy}', expected one of {STRATEGIES}")

    @classmethod
    def id(cls, value: str) -> "By":
        return cls("id", value)

    @classmethod
    def css(cls, value: str) -> "By":
        return cls("css", value)

    @classmethod
    def xpath(cls, value: str) -> "By":
        return cls("xpath", value)

    @classmethod
    def class_name(cls, value: str) -> "By":
        return cls("class_name", value)

    @property
    def selector(self) -> str:
        """Playwright selector string for this strategy."""
        if self.strategy == "id":
            return f"id={self.value}"
        if self.strategy == "class_name":
            return f"css=.{self.value}"
        return f"{self.strategy}={self.value}"

    def __str__(self) -> str:
        return self.selector


BODY = By.css("body")


# ================================================================================
# Single Element
# ================================================================================

class ElementHandle:
    """
    Reference to the first element matched by ``by`` inside ``parent``.

    Args:
        by: Locator strategy and value
        parent: Handle the query is scoped to, None for the document
    """

    def __init__(self, by: By, parent: Optional["ElementHandle"] = None):
        self.by = by
        self.parent = parent

    @property
    def locator(self) -> Locator:
        scope = self.parent.locator if self.parent is not None else get_page()
        return scope.locator(self.by.selector).first

    def describe(self) -> str:
        own = self.by.selector
        return f"{self.parent.describe()} >> {own}" if self.parent is not None else own

    # ---- queries -------------------------------------------------------------

    def find(self, by: By) -> "ElementHandle":
        """Child-scoped query for a single element."""
        return ElementHandle(by, parent=self)

    def find_all(self, by: By) -> "ElementsCollection":
        """Child-scoped query for every matching element."""
        return ElementsCollection(by, parent=self)

    def exists(self) -> bool:
        return self.locator.count() > 0

    def is_displayed(self) -> bool:
        return self.exists() and self.locator.is_visible()

    def text(self) -> str:
        return self.locator.inner_text()

    def attribute(self, name: str) -> Optional[str]:
        return self.locator.get_attribute(name)

    def html(self) -> str:
        return self.locator.inner_html()

    def value(self) -> str:
        return self.locator.input_value()

    def is_checked(self) -> bool:
        return self.locator.is_checked()

    def css_classes(self) -> List[str]:
        return (self.attribute("class") or "").split()

    # ---- actions -------------------------------------------------------------

    def click(self, **kwargs) -> None:
        self.locator.click(**kwargs)

    def double_click(self) -> None:
        self.locator.dblclick()

    def context_click(self) -> None:
        self.locator.click(button="right")

    def hover(self) -> None:
        self.locator.hover()

    def fill(self, text: str) -> None:
        self.locator.fill(text)

    def clear(self) -> None:
        self.locator.fill("")

    def press(self, key: str) -> None:
        self.locator.press(key)

    def check(self) -> None:
        self.locator.check()

    def uncheck(self) -> None:
        self.locator.uncheck()

    def screenshot(self) -> bytes:
        return self.locator.screenshot()

    def __eq__(self, other) -> bool:
        return isinstance(other, ElementHandle) and self.describe() == other.describe()

    def __hash__(self) -> int:
        return hash(self.describe())

    def __repr__(self) -> str:
        return f"ElementHandle({self.describe()})"


class CollectionItemHandle(ElementHandle):
    """The element at ``index`` of a collection."""

    def __init__(self, collection: "ElementsCollection", index: int):
        super().__init__(collection.by, parent=collection.parent)
        self.collection = collection
        self.index = index

    @property
    def locator(self) -> Locator:
        return self.collection.locator.nth(self.index)

    def describe(self) -> str:
        return f"{self.collection.describe()} >> nth={self.index}"


# ================================================================================
# Collections
# ================================================================================

class ElementsCollection:
    """
    Live query for every element matched by ``by`` inside ``parent``.

    ``count`` and ``handles`` re-run the query on each call.
    """

    def __init__(self, by: By, parent: Optional[ElementHandle] = None):
        self.by = by
        self.parent = parent

    @property
    def locator(self) -> Locator:
        scope = self.parent.locator if self.parent is not None else get_page()
        return scope.locator(self.by.selector)

    def describe(self) -> str:
        own = self.by.selector
        return f"{self.parent.describe()} >> {own}" if self.parent is not None else own

    def count(self) -> int:
        return self.locator.count()

    def nth(self, index: int) -> ElementHandle:
        return CollectionItemHandle(self, index)

    def handles(self) -> List[ElementHandle]:
        return [self.nth(i) for i in range(self.count())]

    def filter(self, predicate: Callable[[ElementHandle], bool], label: str = "") -> "FilteredCollection":
        return FilteredCollection(self, predicate, label)

    def __repr__(self) -> str:
        return f"ElementsCollection({self.describe()})"


class FilteredCollection(ElementsCollection):
    """Live view of the elements of ``source`` accepted by ``predicate``."""

    def __init__(self, source: ElementsCollection, predicate: Callable[[ElementHandle], bool], label: str = ""):
        super().__init__(source.by, parent=source.parent)
        self.source = source
        self.predicate = predicate
        self.label = label or getattr(predicate, "__name__", "predicate")

    @property
    def locator(self) -> Locator:
        return self.source.locator

    def describe(self) -> str:
        return f"{self.source.describe()} >> filter({self.label})"

    def handles(self) -> List[ElementHandle]:
        return [handle for handle in self.source.handles() if self.predicate(handle)]

    def count(self) -> int:
        return len(self.handles())

    def nth(self, index: int) -> ElementHandle:
        return self.handles()[index]


__all__ = [
    "By",
    "BODY",
    "STRATEGIES",
    "ElementHandle",
    "CollectionItemHandle",
    "ElementsCollection",
    "FilteredCollection",
]
