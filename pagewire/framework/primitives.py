"""
================================================================================
Typed Primitive Elements
================================================================================

Simple elements that differ from UIElement only by their type tag.

Author: Automation Team
License: MIT
================================================================================
"""

from .elements import UIElement
from .meta import ElementType


class Button(UIElement):
    default_type = ElementType.BUTTON


class Link(UIElement):
    default_type = ElementType.LINK

    def href(self) -> str:
        return self.get_attribute("href") or ""


class Text(UIElement):
    default_type = ElementType.TEXT


class Label(UIElement):
    default_type = ElementType.LABEL


class Icon(UIElement):
    default_type = ElementType.ICON


class Image(UIElement):
    default_type = ElementType.IMAGE

    def src(self) -> str:
        return self.get_attribute("src") or ""


__all__ = ["Button", "Link", "Text", "Label", "Icon", "Image"]
