"""
================================================================================
Wiring Engine
================================================================================

Turns declared fields of a page object or widget into live, named and
parented elements. Runs automatically right after a composite is
constructed and can be called again explicitly.

Passes:
    0. Nesting check (pages only): a page must not hold another page
    1. Instantiation: unset located fields are built with their no-argument
       constructor; failures are logged and skipped
    2. Metadata and locators: names, descriptions and type tags are copied,
       locator declarations validated and committed, lists bound to their item type
       and source; any error here aborts construction
    3. Hierarchy: every element held by the composite gets it as parent

Author: Automation Team
License: MIT
================================================================================
"""

import inspect
from typing import Dict, List, Optional

from loguru import logger

from pagewire.common.global_config import WiringConfig

from .exceptions import (
    ConflictingLocatorStrategyError,
    IllegalNestingError,
    ListComponentTypeError,
    ListElementNotValidError,
    WiringError,
)
from .elements import UIElement
from .fields import Field, ListField, collect_fields
from .handles import ElementHandle, ElementsCollection
from .lists import ListWC
from .locators import LocatorResolver
from .meta import WebElementMeta


def _is_page(candidate) -> bool:
    return getattr(candidate, "__composite_kind__", None) == "page"


def _fields_of(composite) -> Dict[str, Field]:
    registry = getattr(type(composite), "_fields", None)
    return registry if registry is not None else collect_fields(type(composite))


def _public_attributes(composite):
    for attr, value in list(vars(composite).items()):
        if not attr.startswith("_") and value is not composite:
            yield attr, value


# ================================================================================
# Pass 0: Nesting
# ================================================================================

def check_nesting(composite, fields: Dict[str, Field]) -> None:
    """
    Rejects a page object holding other page objects.

    Raises:
        IllegalNestingError: Naming the page and the offending fields.
    """
    offenders: List[str] = [
        attr for attr, field in fields.items()
        if isinstance(field.element_type, type) and _is_page(field.element_type)
    ]
    offenders += [
        attr for attr, value in _public_attributes(composite)
        if attr not in offenders and not isinstance(value, type) and _is_page(value)
    ]
    if offenders:
        logger.error(f"Page object {type(composite).__name__} contains page objects: {offenders}")
        raise IllegalNestingError(type(composite), offenders)


# ================================================================================
# Pass 1: Instantiation
# ================================================================================

def instantiate_fields(composite, fields: Dict[str, Field]) -> None:
    owner = type(composite).__name__
    for attr, field in fields.items():
        if field.__get__(composite) is not None:
            continue
        if not field.located:
            logger.warning(f"{owner}.{attr}: found not initialized element without any locator")
            continue
        try:
            field.__set__(composite, field.instantiate())
        except Exception as e:
            logger.warning(f"{owner}.{attr}: could not instantiate {field!r}: {e}")


# ================================================================================
# Pass 2: Metadata, Locators, Lists
# ================================================================================

def apply_metadata(value, field: Field) -> None:
    if not isinstance(value, WebElementMeta):
        return
    if field.name:
        value.name = field.name
    if field.name.strip() and field.description:
        value.description = field.description
    if field.type_tag is not None:
        value.element_type = field.type_tag
    if field.name_from:
        value.name_from = field.name_from


def bind_locator(field: Field, value, composite) -> None:
    owner = type(composite)
    direct = LocatorResolver.to_by(field.locator, field.attr, owner)
    chained = LocatorResolver.to_by(field.chain, field.attr, owner)
    if direct and chained:
        raise ConflictingLocatorStrategyError(field.attr, owner, kind="element")

    if not isinstance(value, UIElement):
        if direct or chained:
            logger.warning(f"{owner.__name__}.{field.attr}: {type(value).__name__} cannot take a locator")
        return
    if direct:
        value.bind_root(ElementHandle(direct))
    elif chained:
        value.defer_root(chained)


def validate_item_type(item_type) -> None:
    """
    Checks that a list item type is built from one element handle and has an identity.

    Raises:
        ListElementNotValidError: If either contract is broken.
    """
    if not isinstance(item_type, type):
        raise ListElementNotValidError(item_type, "not a class")
    try:
        inspect.signature(item_type.__init__).bind(None, None)
    except TypeError as e:
        raise ListElementNotValidError(item_type, str(e)) from e
    except ValueError:
        # builtins without an inspectable signature
        raise ListElementNotValidError(item_type, "constructor signature is not inspectable")
    if not callable(getattr(item_type, "get_id", None)):
        raise ListElementNotValidError(item_type, "no get_id() method")


def bind_list(field: ListField, list_wc, composite) -> None:
    """
    Binds a list field to its item type and source query.

    Raises:
        ListComponentTypeError: If no item type is known.
        ListElementNotValidError: If the item type is not list compatible.
        ConflictingLocatorStrategyError: If both list locator kinds are set.
    """
    owner = type(composite)
    if not isinstance(list_wc, ListWC):
        raise WiringError(
            f"Field '{field.attr}' of {owner.__name__} is a list field but holds {type(list_wc).__name__}"
        )

    item_type = field.item_type or list_wc.item_type
    if item_type is None:
        raise ListComponentTypeError(list_wc.name or field.attr, None)
    validate_item_type(item_type)
    list_wc.item_type = item_type

    literal = LocatorResolver.to_by(field.list_locator, field.attr, owner)
    chained = LocatorResolver.to_by(field.list_chain, field.attr, owner)
    if literal and chained:
        logger.error(f"{owner.__name__}.{field.attr} has both a list locator and a chained list locator")
        raise ConflictingLocatorStrategyError(field.attr, owner, kind="list")

    if literal:
        list_wc.bind(ElementsCollection(literal))
    elif chained:
        list_wc.defer(chained)
    elif not list_wc.has_source:
        logger.warning(f"{owner.__name__}.{field.attr}: list has no source elements")


# ================================================================================
# Pass 3: Hierarchy
# ================================================================================

def assign_parents(composite) -> None:
    for attr, value in _public_attributes(composite):
        if isinstance(value, WebElementMeta):
            value.parent = composite


# ================================================================================
# Entry Point
# ================================================================================

def wire(composite, config: Optional[WiringConfig] = None):
    """
    Wires every declared element of a page object or widget.

    Args:
        composite: Page object or widget instance
        config: Settings passed to the lists of this composite

    Returns:
        The same composite.

    Raises:
        WiringError: On any declaration error; the composite is unusable.
    """
    owner = type(composite).__name__
    fields = _fields_of(composite)
    logger.debug(f"Wiring {owner}: {len(fields)} declared field(s)")

    if _is_page(composite):
        check_nesting(composite, fields)

    instantiate_fields(composite, fields)

    for attr, field in fields.items():
        value = field.__get__(composite)
        if value is None:
            continue
        apply_metadata(value, field)
        if isinstance(field, ListField):
            bind_list(field, value, composite)
            if config is not None:
                value.config_override = config
        else:
            bind_locator(field, value, composite)

    assign_parents(composite)
    logger.debug(f"Wired {owner}")
    return composite


__all__ = [
    "wire",
    "check_nesting",
    "instantiate_fields",
    "apply_metadata",
    "bind_locator",
    "bind_list",
    "validate_item_type",
    "assign_parents",
]
