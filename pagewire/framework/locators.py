"""
================================================================================
Locator Declarations and Resolver
================================================================================

Declarative locators attached to page object fields, and the resolver
turning a declaration into a live element handle.

    Locator           absolute, single element (id / css / xpath / class_name)
    LocatorChain      same strategies, relative to the parent's root
    ListLocator       absolute, many elements (css / xpath / class_name)
    ListLocatorChain  same strategies, relative to the parent's root

A declaration must carry exactly one non-blank strategy. Two or more is a
declaration error; none means there is nothing to commit.

Author: Automation Team
License: MIT
================================================================================
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional

from loguru import logger

from .exceptions import AmbiguousLocatorError
from .handles import By, ElementHandle, ElementsCollection


@dataclass(frozen=True)
class Locator:
    """Absolute single-element locator."""
    id: str = ""
    css: str = ""
    xpath: str = ""
    class_name: str = ""

    relative: ClassVar[bool] = False

    def strategies(self) -> Dict[str, str]:
        """Non-blank strategies, keyed by strategy name."""
        candidates = {"id": self.id, "css": self.css, "xpath": self.xpath, "class_name": self.class_name}
        return {k: v for k, v in candidates.items() if v and v.strip()}


@dataclass(frozen=True)
class LocatorChain(Locator):
    """Single-element locator relative to the parent's root."""
    relative: ClassVar[bool] = True


@dataclass(frozen=True)
class ListLocator:
    """Absolute locator of a list's source elements."""
    css: str = ""
    xpath: str = ""
    class_name: str = ""

    relative: ClassVar[bool] = False

    def strategies(self) -> Dict[str, str]:
        candidates = {"css": self.css, "xpath": self.xpath, "class_name": self.class_name}
        return {k: v for k, v in candidates.items() if v and v.strip()}


@dataclass(frozen=True)
class ListLocatorChain(ListLocator):
    """List locator relative to the parent's root."""
    relative: ClassVar[bool] = True


class LocatorResolver:
    """Maps locator declarations to element handles and collections."""

    @staticmethod
    def to_by(declaration, field: str = "", owner=None) -> Optional[By]:
        """
        Validates a declaration and returns its single strategy.

        Args:
            declaration: Locator, LocatorChain, ListLocator or ListLocatorChain
            field: Field name, used in error messages
            owner: Declaring class, used in error messages

        Returns:
            The strategy, or None when the declaration is None or blank.

        Raises:
            AmbiguousLocatorError: If more than one strategy is set.
        """
        if declaration is None:
            return None
        strategies = declaration.strategies()
        if len(strategies) > 1:
            logger.error(f"Ambiguous locator on {field}: {strategies}")
            raise AmbiguousLocatorError(field, owner, strategies)
        if not strategies:
            return None
        strategy, value = next(iter(strategies.items()))
        return By(strategy, value.strip())

    @classmethod
    def resolve(cls, declaration, field: str = "", owner=None) -> Optional[ElementHandle]:
        by = cls.to_by(declaration, field, owner)
        return ElementHandle(by) if by else None

    @classmethod
    def resolve_relative(
        cls, declaration, parent: Optional[ElementHandle], field: str = "", owner=None
    ) -> Optional[ElementHandle]:
        """Resolves ``declaration`` inside ``parent``; a None parent means the document."""
        by = cls.to_by(declaration, field, owner)
        return ElementHandle(by, parent=parent) if by else None

    @classmethod
    def resolve_all(cls, declaration, field: str = "", owner=None) -> Optional[ElementsCollection]:
        by = cls.to_by(declaration, field, owner)
        return ElementsCollection(by) if by else None

    @classmethod
    def resolve_all_relative(
        cls, declaration, parent: Optional[ElementHandle], field: str = "", owner=None
    ) -> Optional[ElementsCollection]:
        by = cls.to_by(declaration, field, owner)
        return ElementsCollection(by, parent=parent) if by else None


__all__ = [
    "Locator",
    "LocatorChain",
    "ListLocator",
    "ListLocatorChain",
    "LocatorResolver",
]
