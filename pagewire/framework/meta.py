"""
================================================================================
Element Metadata
================================================================================

Name, description, type tag and parent shared by elements, widgets,
pages and lists, plus the localized element type tags used in step names.

Author: Automation Team
License: MIT
================================================================================
"""

from enum import Enum
from typing import Optional, Union

from pagewire.common.global_config import get_config
from pagewire.report_tools.step_text import get_step_text_provider

from .exceptions import HierarchyError


class ElementType(Enum):
    """Element type tags with their localized labels."""

    BUTTON = ("button", "кнопка")
    LINK = ("link", "ссылка")
    TEXT = ("text", "текст")
    LABEL = ("label", "метка")
    ICON = ("icon", "иконка")
    IMAGE = ("img", "изображение")
    TAG = ("tag", "тег")
    INPUT = ("input text field", "поле ввода")
    CHECKBOX = ("checkbox", "чекбокс")
    WIDGET = ("widget", "виджет")
    LIST = ("list", "список")
    PAGE = ("page", "страница")

    def label(self, locale: str = "en") -> str:
        en, ru = self.value
        return ru if locale == "ru" else en


NAME_STRATEGIES = ("text", "href", "id")


class WebElementMeta:
    """
    Mutable metadata of one node in the page object tree.

    Attributes:
        name: Display name, resolved lazily through ``name_from`` when empty
        description: Free text description
        element_type: ElementType tag or a custom type word
        name_from: "text", "href" or "id"; source of a missing name
        parent: Enclosing composite, assigned at most once
    """

    default_type: Union[ElementType, str] = ""

    def __init__(self):
        self._name = ""
        self.description = ""
        self.element_type: Union[ElementType, str] = self.default_type
        self.name_from: Optional[str] = None
        self._parent = None

    # ---- name ----------------------------------------------------------------

    @property
    def name(self) -> str:
        if not self._name and self.name_from:
            self._name = self._resolve_name() or ""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value or ""

    def _resolve_name(self) -> str:
        return ""

    def wrapped_name(self) -> str:
        config = get_config()
        return f"{config.highlighter_start}{self.name}{config.highlighter_end}"

    # ---- hierarchy -----------------------------------------------------------

    @property
    def parent(self):
        return self._parent

    @parent.setter
    def parent(self, value) -> None:
        if self._parent is not None and value is not self._parent:
            raise HierarchyError(
                self.name or type(self).__name__,
                getattr(self._parent, "name", "") or type(self._parent).__name__,
                getattr(value, "name", "") or type(value).__name__,
            )
        self._parent = value

    # ---- labels --------------------------------------------------------------

    def type_label(self, locale: Optional[str] = None) -> str:
        locale = locale or get_config().localization
        if isinstance(self.element_type, ElementType):
            return self.element_type.label(locale)
        return self.element_type or ""

    def step_text(self, step_key: str, **extras) -> str:
        """Localized report step name for an action on this node."""
        config = get_config()
        provider = get_step_text_provider(config)
        parent = self.parent
        parent_name = parent.wrapped_name() if parent is not None and parent.name else ""
        return provider.render(
            step_key,
            element=self.type_label(config.localization),
            name=self.wrapped_name(),
            parent=parent_name,
            **extras,
        )

    @property
    def meta_keys(self) -> str:
        return f"{self.type_label() or 'element'}:{self.name}"


__all__ = ["ElementType", "NAME_STRATEGIES", "WebElementMeta"]
