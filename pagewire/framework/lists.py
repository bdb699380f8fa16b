"""
================================================================================
Homogeneous List Container
================================================================================

``ListWC`` groups repeated elements (rows, cards, menu entries) into typed
components built from a live source collection.

Lifecycle:
    UNBOUND  a chained list locator waits for the parent's root
    BOUND    a source collection is attached; never goes back

Every read rebuilds the component cache from the source, so the list always
reflects the current document. Identity lookups retry within the configured
budget, then record a failed report step and raise AssertionError naming the
list and the identity.

Usage:
    class Catalog(PageObject):
        birds = ListField(Button, name="Birds", list_locator=ListLocator(css=".bird"))

    catalog.birds.get("Eagle").click()
    catalog.birds.assert_size(10)

Author: Automation Team
License: MIT
================================================================================
"""

import time
from enum import Enum
from typing import Callable, Generic, Iterator, List, Optional, Type, TypeVar, Union

from loguru import logger

from pagewire.common.global_config import WiringConfig, get_config
from pagewire.report_tools.allure_utils import failed_step, reported_step

from .exceptions import ListComponentTypeError, UnboundListError
from .handles import By, ElementsCollection
from .meta import ElementType, WebElementMeta
from .waits import assert_eventually


T = TypeVar('T')


def _contains(actual: str, wanted: str) -> bool:
    return wanted in actual


def _equals(actual: str, wanted: str) -> bool:
    return actual == wanted


class ListState(Enum):
    UNBOUND = "unbound"
    BOUND = "bound"


class ListWC(WebElementMeta, Generic[T]):
    """
    Live list of components of one type.

    Args:
        item_type: Component class, constructible from a single element handle
        source: Source elements as a collection, a By, or a CSS selector string
        config: Retry settings, defaults to the global configuration
    """

    default_type = ElementType.LIST

    def __init__(
        self,
        item_type: Optional[Type[T]] = None,
        source: Union[ElementsCollection, By, str, None] = None,
        config: Optional[WiringConfig] = None,
    ):
        super().__init__()
        self.item_type = item_type
        self.config_override = config
        self._source: Optional[ElementsCollection] = None
        self._chain: Optional[By] = None
        self._components: List[T] = []
        if source is not None:
            self.bind(self._as_collection(source))

    @staticmethod
    def _as_collection(source) -> ElementsCollection:
        if isinstance(source, ElementsCollection):
            return source
        if isinstance(source, By):
            return ElementsCollection(source)
        if isinstance(source, str):
            return ElementsCollection(By.css(source))
        raise TypeError(f"Unsupported list source: {source!r}")

    @property
    def config(self) -> WiringConfig:
        return self.config_override or get_config()

    @property
    def generic_type_name(self) -> str:
        return self.item_type.__name__ if self.item_type is not None else ""

    # ================================================================================
    # Binding
    # ================================================================================

    @property
    def state(self) -> ListState:
        return ListState.BOUND if self._source is not None else ListState.UNBOUND

    @property
    def has_source(self) -> bool:
        return self._source is not None or self._chain is not None

    def bind(self, collection: ElementsCollection) -> None:
        self._source = collection
        self._chain = None
        logger.debug(f"List '{self._name}' bound to {collection.describe()}")

    def defer(self, by: By) -> None:
        """Binds the source relative to the parent's root on first access."""
        self._source = None
        self._chain = by

    @property
    def source(self) -> ElementsCollection:
        if self._source is None and self._chain is not None:
            parent_root = getattr(self.parent, "root", None)
            self.bind(ElementsCollection(self._chain, parent=parent_root))
        if self._source is None:
            raise UnboundListError(self._name or self.generic_type_name)
        return self._source

    # ================================================================================
    # Components
    # ================================================================================

    def refresh(self) -> List[T]:
        """Rebuilds the components from the current source elements."""
        if self.item_type is None:
            raise ListComponentTypeError(self._name, None)
        components = []
        for handle in self.source.handles():
            component = self.item_type(handle)
            if isinstance(component, WebElementMeta):
                if not component.name and hasattr(component, "get_id"):
                    component.name = str(component.get_id())
                component.parent = self
            components.append(component)
        self._components = components
        return list(components)

    @property
    def components(self) -> List[T]:
        return self.refresh()

    def get_all(self) -> List[T]:
        return self.refresh()

    def __iter__(self) -> Iterator[T]:
        return iter(self.refresh())

    def size(self) -> int:
        return len(self.refresh())

    def is_displayed(self) -> bool:
        """True when at least one source element is visible."""
        return any(handle.is_displayed() for handle in self.source.handles())

    # ================================================================================
    # Lookups
    # ================================================================================

    def _visible(self, components: List[T]) -> List[T]:
        return [c for c in components if c.root.is_displayed()]

    def _search(self, pick: Callable[[List[T]], Optional[T]], what: str) -> Optional[T]:
        config = self.config
        for attempt in range(1, config.retry_amount + 1):
            found = pick(self.refresh())
            if found is not None:
                return found
            if attempt < config.retry_amount:
                logger.debug(f"List '{self.name}': {what} not found, attempt {attempt}/{config.retry_amount}")
                time.sleep(config.retry_interval)
        return None

    def _fail(self, step_text: str, message: str):
        error = AssertionError(message)
        logger.error(message)
        failed_step(step_text, error)
        raise error

    def _get_matching(
        self, identity: str, match: Callable[[str, str], bool], visible_only: bool = False
    ) -> T:
        def pick(components):
            candidates = self._visible(components) if visible_only else components
            for component in candidates:
                if match(str(component.get_id()), identity):
                    return component
            return None

        found = self._search(pick, f"id={identity}")
        if found is None:
            self._fail(
                self.step_text("list_strict_search_by_element", id=identity),
                f"Element wasn't found in the list '{self.name}' by id='{identity}'",
            )
        return found

    def get(self, key: Union[str, int]) -> T:
        """
        Returns a component by identity substring or by position.

        Args:
            key: Substring of the component id, or a zero based index

        Raises:
            AssertionError: If nothing matches within the retry budget.
        """
        if isinstance(key, int) and not isinstance(key, bool):
            return self._get_by_index(key)
        return self._get_matching(key, _contains)

    def get_exact(self, identity: str) -> T:
        """Returns the first component whose id equals ``identity``."""
        return self._get_matching(identity, _equals)

    def get_ignore_case(self, identity: str) -> T:
        return self._get_matching(identity, lambda actual, wanted: wanted.lower() in actual.lower())

    def get_visible(self, identity: str) -> T:
        """Like ``get`` but skips components whose root is hidden."""
        return self._get_matching(identity, _contains, visible_only=True)

    def get_exact_visible(self, identity: str) -> T:
        return self._get_matching(identity, _equals, visible_only=True)

    def get_nullable(self, identity: str) -> Optional[T]:
        """Single pass lookup by id substring, None when absent."""
        for component in self.refresh():
            if identity in str(component.get_id()):
                return component
        return None

    def get_multiple(self, *identities: str) -> List[T]:
        return [self.get(identity) for identity in identities]

    def get_exact_multiple(self, *identities: str) -> List[T]:
        return [self.get_exact(identity) for identity in identities]

    def _get_by_index(self, index: int) -> T:
        found = self._search(
            lambda components: components[index] if 0 <= index < len(components) else None,
            f"index={index}",
        )
        if found is None:
            self._fail(
                self.step_text("list_search_by_index", index=index),
                f"List '{self.name}' has no element with index={index}, size={len(self._components)}",
            )
        return found

    def _require_items(self) -> List[T]:
        components = []

        def pick(current):
            components[:] = current
            return current or None

        self._search(pick, "any element")
        if not components:
            self._fail(
                self.step_text("assert_size_greater_than", size=0),
                f"List '{self.name}' is empty",
            )
        return components

    def first(self) -> T:
        return self._require_items()[0]

    def last(self) -> T:
        return self._require_items()[-1]

    def has_item(self, identity: str) -> bool:
        return self.get_nullable(identity) is not None

    def has_item_with_text(self, text: str) -> bool:
        return any(text in handle.text() for handle in self.source.handles())

    def _texts(self) -> List[str]:
        return [handle.text() for handle in self.source.handles()]

    # ================================================================================
    # Filtering
    # ================================================================================

    def filter(self, predicate: Callable[[T], bool], condition: str = "") -> "ListWC[T]":
        """
        Returns a live list of the components accepted by ``predicate``.

        The filtered list re-evaluates the predicate on every read.

        Args:
            predicate: Called with a freshly built component
            condition: Human readable condition for the list name
        """
        item_type = self.item_type
        if item_type is None:
            raise ListComponentTypeError(self._name, None)
        condition = condition or getattr(predicate, "__name__", "predicate")
        view = self.source.filter(lambda handle: predicate(item_type(handle)), condition)

        filtered = ListWC(item_type, view, self.config_override)
        filtered.name = f"{self.name}, filtered by: {condition}"
        filtered.description = self.description
        filtered.element_type = self.element_type
        if self.parent is not None:
            filtered.parent = self.parent
        return filtered

    # ================================================================================
    # Assertions
    # ================================================================================

    def assert_size(self, expected: int) -> None:
        """Asserts the list holds exactly ``expected`` components."""
        if expected < 0:
            raise ValueError(f"Expected size must not be negative, got {expected}")
        with reported_step(self.step_text("assert_size", size=expected)):
            assert_eventually(
                lambda: self.size() == expected,
                lambda: f"List '{self.name}' size is {self.size()}, expected {expected}",
                self.config,
            )

    def assert_size_is(self, expected: int) -> None:
        self.assert_size(expected)

    def visible_size(self) -> int:
        return sum(1 for handle in self.source.handles() if handle.is_displayed())

    def assert_visible_size(self, expected: int) -> None:
        """Asserts exactly ``expected`` source elements are visible."""
        if expected < 0:
            raise ValueError(f"Expected size must not be negative, got {expected}")
        with reported_step(self.step_text("assert_visible_size", size=expected)):
            assert_eventually(
                lambda: self.visible_size() == expected,
                lambda: f"List '{self.name}' has {self.visible_size()} visible item(s), expected {expected}",
                self.config,
            )

    def assert_size_greater_than(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"Size must not be negative, got {size}")
        with reported_step(self.step_text("assert_size_greater_than", size=size)):
            assert_eventually(
                lambda: self.size() > size,
                lambda: f"List '{self.name}' size is {self.size()}, expected more than {size}",
                self.config,
            )

    def assert_size_less_than(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"Size must be positive, got {size}")
        with reported_step(self.step_text("assert_size_less_than", size=size)):
            assert_eventually(
                lambda: self.size() < size,
                lambda: f"List '{self.name}' size is {self.size()}, expected less than {size}",
                self.config,
            )

    def assert_empty(self) -> None:
        with reported_step(self.step_text("assert_empty")):
            assert_eventually(
                lambda: self.size() == 0,
                lambda: f"List '{self.name}' is not empty, size is {self.size()}",
                self.config,
            )

    def assert_visible(self) -> None:
        with reported_step(self.step_text("list_assert_visible")):
            assert_eventually(self.is_displayed, f"List '{self.name}' is not visible", self.config)

    def assert_not_visible(self) -> None:
        with reported_step(self.step_text("list_assert_not_visible")):
            assert_eventually(lambda: not self.is_displayed(), f"List '{self.name}' is visible", self.config)

    def assert_has_item(self, identity: str) -> None:
        with reported_step(self.step_text("list_assert_has_item", id=identity)):
            assert_eventually(
                lambda: self.has_item(identity),
                f"List '{self.name}' has no item with id='{identity}'",
                self.config,
            )

    def assert_has_not_item(self, identity: str) -> None:
        with reported_step(self.step_text("list_assert_has_not_item", id=identity)):
            assert_eventually(
                lambda: not self.has_item(identity),
                f"List '{self.name}' has an item with id='{identity}'",
                self.config,
            )

    def assert_has_items_with_text(self, *texts: str) -> None:
        with reported_step(self.step_text("list_assert_has_items_with_text", text=list(texts))):
            assert_eventually(
                lambda: all(self.has_item_with_text(text) for text in texts),
                lambda: (
                    f"List '{self.name}' misses items with text "
                    f"{[t for t in texts if not self.has_item_with_text(t)]}, actual texts: {self._texts()}"
                ),
                self.config,
            )

    def assert_has_no_items_with_text(self, *texts: str) -> None:
        with reported_step(self.step_text("list_assert_has_no_items_with_text", text=list(texts))):
            assert_eventually(
                lambda: not any(self.has_item_with_text(text) for text in texts),
                lambda: (
                    f"List '{self.name}' has items with text "
                    f"{[t for t in texts if self.has_item_with_text(t)]}"
                ),
                self.config,
            )

    # ================================================================================
    # Debugging
    # ================================================================================

    def dump(self) -> str:
        """Logs and returns one line per component."""
        lines = [f"List '{self.name}' [{self.generic_type_name}], {len(self.refresh())} item(s):"]
        for index, component in enumerate(self._components):
            lines.append(f"  [{index}] {component!r}")
        text = "\n".join(lines)
        logger.info(text)
        return text

    def __eq__(self, other) -> bool:
        if not isinstance(other, ListWC):
            return False
        return self.refresh() == other.refresh()

    def __hash__(self) -> int:
        return hash(tuple(self.refresh()))

    def __repr__(self) -> str:
        source = self._source.describe() if self._source is not None else (
            f"chain:{self._chain.selector}" if self._chain is not None else None
        )
        return f"ListWC[{self.generic_type_name}](name={self._name!r}, state={self.state.value}, source={source})"


__all__ = ["ListState", "ListWC"]
