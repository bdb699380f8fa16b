"""
================================================================================
Field Declarations
================================================================================

Class-level declarations of the elements a page object or widget owns.

Usage:
    class LoginPage(PageObject):
        email = Field(TextField, name="Email", locator=Locator(css="#email"))
        rows = ListField(Row, name="Rows", list_chain=ListLocatorChain(css=".row"))

A field is a data descriptor: values live in the instance ``__dict__`` under
the attribute name, so fields can also be assigned in ``__init__``.

Author: Automation Team
License: MIT
================================================================================
"""

from typing import Any, Dict, Optional, Type

from .locators import ListLocator, ListLocatorChain, Locator, LocatorChain
from .meta import NAME_STRATEGIES


class Field:
    """
    Declaration of one element owned by a composite.

    Args:
        element_type: Class instantiated when the field is left unset
        name: Display name copied onto the element
        description: Description copied when the name is not blank
        locator: Absolute locator
        chain: Locator relative to the owner's root
        type_tag: Element type tag overriding the class default
        name_from: "text", "href" or "id"; source of the name when none is given
    """

    def __init__(
        self,
        element_type: Optional[Type] = None,
        name: str = "",
        description: str = "",
        locator: Optional[Locator] = None,
        chain: Optional[LocatorChain] = None,
        type_tag: Any = None,
        name_from: Optional[str] = None,
    ):
        if name_from is not None and name_from not in NAME_STRATEGIES:
            raise ValueError(f"name_from must be one of {NAME_STRATEGIES}, got {name_from!r}")
        self.element_type = element_type
        self.name = name
        self.description = description
        self.locator = locator
        self.chain = chain
        self.type_tag = type_tag
        self.name_from = name_from
        self.attr = ""
        self.owner = None

    def __set_name__(self, owner, attr: str):
        self.attr = attr
        self.owner = owner

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.__dict__.get(self.attr)

    def __set__(self, instance, value):
        instance.__dict__[self.attr] = value

    @property
    def located(self) -> bool:
        """True when the field carries a direct or chained locator."""
        return self.locator is not None or self.chain is not None

    def instantiate(self):
        """Builds the default value through the no-argument constructor."""
        if self.element_type is None:
            raise TypeError(f"Field '{self.attr}' has no element type to instantiate")
        return self.element_type()

    def __repr__(self) -> str:
        type_name = getattr(self.element_type, "__name__", self.element_type)
        return f"{type(self).__name__}({self.attr}: {type_name}, name={self.name!r})"


class ListField(Field):
    """
    Declaration of a homogeneous list of components.

    Args:
        item_type: Component class built from each source element
        name: Display name of the list
        description: Description copied when the name is not blank
        list_locator: Absolute list locator
        list_chain: List locator relative to the owner's root
    """

    def __init__(
        self,
        item_type: Optional[Type] = None,
        name: str = "",
        description: str = "",
        list_locator: Optional[ListLocator] = None,
        list_chain: Optional[ListLocatorChain] = None,
    ):
        super().__init__(None, name=name, description=description)
        self.item_type = item_type
        self.list_locator = list_locator
        self.list_chain = list_chain

    @property
    def located(self) -> bool:
        return self.list_locator is not None or self.list_chain is not None

    def instantiate(self):
        from .lists import ListWC
        return ListWC(self.item_type)


def collect_fields(cls) -> Dict[str, Field]:
    """
    Collects the field declarations of a class and its bases.

    Subclass declarations override base declarations with the same name.
    """
    registry: Dict[str, Field] = {}
    for klass in reversed(cls.__mro__):
        for attr, value in vars(klass).items():
            if isinstance(value, Field):
                registry[attr] = value
            elif attr in registry:
                del registry[attr]
    return registry


__all__ = ["Field", "ListField", "collect_fields"]
