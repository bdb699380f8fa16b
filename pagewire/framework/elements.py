"""
================================================================================
UI Element
================================================================================

Base class of every interactive element. An element owns a lazily bound
root handle, its metadata and a set of reported interactions.

Root binding:
    - direct locator: bound while the owner is wired
    - chained locator: bound on first access, relative to the parent's root
    - list item: bound at construction from the source element

Every interaction and assertion is reported as one step whose name comes
from the localized phrase table.

Author: Automation Team
License: MIT
================================================================================
"""

from typing import Optional

from loguru import logger

from pagewire.report_tools.allure_utils import reported_step, ui_step

from .exceptions import UnresolvedElementError
from .handles import By, ElementHandle
from .meta import WebElementMeta
from .waits import assert_eventually


class UIElement(WebElementMeta):
    """
    Generic element.

    Args:
        root: Handle of the element, None when the owner binds it later
        element_id: Explicit identity, overrides the text based one
    """

    def __init__(self, root: Optional[ElementHandle] = None, element_id: str = ""):
        super().__init__()
        self._root = root
        self._chain: Optional[By] = None
        self.element_id = element_id

    # ================================================================================
    # Root Binding
    # ================================================================================

    def bind_root(self, handle: ElementHandle) -> None:
        self._root = handle
        self._chain = None

    def defer_root(self, by: By) -> None:
        """Binds the root relative to the parent's root on first access."""
        self._root = None
        self._chain = by

    @property
    def is_bound(self) -> bool:
        return self._root is not None

    def _default_root(self) -> Optional[ElementHandle]:
        return None

    @property
    def root(self) -> ElementHandle:
        if self._root is None and self._chain is not None:
            parent_root = getattr(self.parent, "root", None)
            self._root = ElementHandle(self._chain, parent=parent_root)
            logger.debug(f"Bound chained element '{self._name}' to {self._root.describe()}")
        if self._root is None:
            default = self._default_root()
            if default is None:
                raise UnresolvedElementError(self._name or type(self).__name__)
            return default
        return self._root

    def _handle_key(self) -> str:
        if self._root is not None:
            return self._root.describe()
        if self._chain is not None:
            return f"chain:{self._chain.selector}"
        return ""

    # ================================================================================
    # Identity and Naming
    # ================================================================================

    def get_id(self) -> str:
        """Identity used by list lookups: the explicit id, else the visible text."""
        if self.element_id:
            return self.element_id
        return self.root.text().strip()

    def _resolve_name(self) -> str:
        if self._root is None and self._chain is None:
            return ""
        if self.name_from == "text":
            return self.root.text().strip()
        if self.name_from == "href":
            return self.root.attribute("href") or ""
        if self.name_from == "id":
            return self.get_id()
        return ""

    # ================================================================================
    # Reads
    # ================================================================================

    def text(self) -> str:
        return self.root.text()

    def is_displayed(self) -> bool:
        return self.root.is_displayed()

    def exists(self) -> bool:
        return self.root.exists()

    def get_attribute(self, name: str) -> Optional[str]:
        return self.root.attribute(name)

    # ================================================================================
    # Interactions
    # ================================================================================

    def click(self, step_text: Optional[str] = None) -> None:
        """
        Clicks the element.

        Args:
            step_text: Custom report step name instead of the phrase table one
        """
        with reported_step(step_text or self.step_text("click")):
            self.root.click()

    @ui_step("double_click")
    def double_click(self) -> None:
        self.root.double_click()

    @ui_step("context_click")
    def context_click(self) -> None:
        self.root.context_click()

    @ui_step("hover")
    def hover(self) -> None:
        self.root.hover()

    # ================================================================================
    # Assertions
    # ================================================================================

    @ui_step("assert_visible")
    def assert_visible(self) -> None:
        assert_eventually(self.is_displayed, f"{self._describe_self()} is not visible")

    @ui_step("assert_not_visible")
    def assert_not_visible(self) -> None:
        assert_eventually(lambda: not self.is_displayed(), f"{self._describe_self()} is visible")

    @ui_step("assert_exists")
    def assert_exists(self) -> None:
        assert_eventually(self.exists, f"{self._describe_self()} does not exist")

    @ui_step("assert_not_exists")
    def assert_not_exists(self) -> None:
        assert_eventually(lambda: not self.exists(), f"{self._describe_self()} exists")

    @ui_step("assert_text", text="expected")
    def assert_text(self, expected: str) -> None:
        assert_eventually(
            lambda: self.text().strip() == expected,
            lambda: f"{self._describe_self()} has text '{self.text().strip()}', expected '{expected}'",
        )

    @ui_step("assert_has_text", text="expected")
    def assert_has_text(self, expected: str) -> None:
        assert_eventually(
            lambda: expected in self.text(),
            lambda: f"{self._describe_self()} text '{self.text().strip()}' does not contain '{expected}'",
        )

    @ui_step("assert_has_css_class", clazz="css_class")
    def assert_has_css_class(self, css_class: str) -> None:
        assert_eventually(
            lambda: css_class in self.root.css_classes(),
            lambda: f"{self._describe_self()} classes {self.root.css_classes()} miss '{css_class}'",
        )

    @ui_step("assert_has_not_css_class", clazz="css_class")
    def assert_has_not_css_class(self, css_class: str) -> None:
        assert_eventually(
            lambda: css_class not in self.root.css_classes(),
            lambda: f"{self._describe_self()} has css class '{css_class}'",
        )

    @ui_step("assert_attribute", attribute="attribute", value="value")
    def assert_attribute(self, attribute: str, value: str) -> None:
        assert_eventually(
            lambda: self.get_attribute(attribute) == value,
            lambda: (
                f"{self._describe_self()} attribute '{attribute}' is "
                f"'{self.get_attribute(attribute)}', expected '{value}'"
            ),
        )

    # ================================================================================
    # Helpers
    # ================================================================================

    def _describe_self(self) -> str:
        label = self.type_label() or type(self).__name__
        return f"{label} '{self.name}'" if self.name else label

    def __eq__(self, other) -> bool:
        if not isinstance(other, UIElement) or type(self) is not type(other):
            return False
        return self._handle_key() == other._handle_key() and self._name == other._name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._handle_key(), self._name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, root={self._handle_key() or None})"


__all__ = ["UIElement"]
