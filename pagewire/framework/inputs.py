"""
================================================================================
Input Elements
================================================================================

Text fields and checkboxes.

Author: Automation Team
License: MIT
================================================================================
"""

from pagewire.report_tools.allure_utils import ui_step

from .elements import UIElement
from .meta import ElementType
from .waits import assert_eventually


class TextField(UIElement):
    """Single line text input."""

    default_type = ElementType.INPUT

    def get_id(self) -> str:
        if self.element_id:
            return self.element_id
        return self.value() or self.root.attribute("placeholder") or self.root.attribute("name") or ""

    def value(self) -> str:
        return self.root.value()

    @ui_step("write", text="text")
    def write(self, text: str) -> None:
        self.root.fill(text)

    @ui_step("clear")
    def clear(self) -> None:
        self.root.clear()

    @ui_step("press_enter")
    def press_enter(self) -> None:
        self.root.press("Enter")

    @ui_step("assert_value", text="expected")
    def assert_value(self, expected: str) -> None:
        assert_eventually(
            lambda: self.value() == expected,
            lambda: f"{self._describe_self()} has value '{self.value()}', expected '{expected}'",
        )

    @ui_step("assert_empty_value")
    def assert_empty(self) -> None:
        assert_eventually(
            lambda: self.value() == "",
            lambda: f"{self._describe_self()} is not empty: '{self.value()}'",
        )


class CheckBox(UIElement):
    """Two state checkbox."""

    default_type = ElementType.CHECKBOX

    def is_checked(self) -> bool:
        return self.root.is_checked()

    @ui_step("check")
    def check(self) -> None:
        self.root.check()

    @ui_step("uncheck")
    def uncheck(self) -> None:
        self.root.uncheck()

    @ui_step("assert_checked")
    def assert_checked(self) -> None:
        assert_eventually(self.is_checked, f"{self._describe_self()} is not checked")

    @ui_step("assert_not_checked")
    def assert_not_checked(self) -> None:
        assert_eventually(lambda: not self.is_checked(), f"{self._describe_self()} is checked")


__all__ = ["TextField", "CheckBox"]
