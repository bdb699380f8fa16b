"""
================================================================================
Page Objects and Widgets
================================================================================

Composites own declared fields. Their metaclass collects the field registry
once per class and wires every instance right after its constructor returns,
so construction and wiring happen as one step.

Usage:
    class SearchForm(Widget):
        query = Field(TextField, name="Query", chain=LocatorChain(css="input"))
        submit = Field(Button, name="Search", chain=LocatorChain(css="button"))

    class SearchPage(PageObject):
        PAGE_NAME = "Search"
        URL_PATH = "/search"
        form = Field(SearchForm, name="Search form", locator=Locator(id="search"))

    page = SearchPage()          # already wired
    page.form.query.write("birds")

Author: Automation Team
License: MIT
================================================================================
"""

from typing import Dict, Optional

from loguru import logger

from pagewire.common.global_config import WiringConfig, get_config
from pagewire.report_tools.allure_utils import reported_step, ui_step

from .elements import UIElement
from .fields import Field, collect_fields
from .handles import BODY, ElementHandle
from .meta import ElementType, WebElementMeta
from .session import get_page
from .waits import assert_eventually
from .wiring import wire


class CompositeMeta(type):
    """Builds the field registry and wires instances after construction."""

    def __init__(cls, name, bases, namespace):
        super().__init__(name, bases, namespace)
        cls._fields: Dict[str, Field] = collect_fields(cls)

    def __call__(cls, *args, **kwargs):
        instance = super().__call__(*args, **kwargs)
        if getattr(cls, "__autowire__", True):
            wire(instance)
        return instance


class PageObject(WebElementMeta, metaclass=CompositeMeta):
    """
    Base class for all page objects.

    Class attributes:
        PAGE_NAME: Display name used in report steps
        DESCRIPTION: Free text description
        URL_PATH: Path appended to the base URL by ``open``
        VIEW: Optional view or variant identifier

    A page has no root element: its fields are queried from the document.
    """

    __composite_kind__ = "page"
    default_type = ElementType.PAGE

    PAGE_NAME: str = ""
    DESCRIPTION: str = ""
    URL_PATH: str = ""
    VIEW: str = ""

    def __init__(self):
        super().__init__()
        self.name = self.PAGE_NAME or type(self).__name__
        self.description = self.DESCRIPTION

    @property
    def root(self) -> Optional[ElementHandle]:
        return None

    @property
    def fields(self) -> Dict[str, Field]:
        return type(self)._fields

    def wire(self, config: Optional[WiringConfig] = None) -> "PageObject":
        return wire(self, config)

    def open(self, base_url: str = "") -> "PageObject":
        """
        Navigates the active page to ``base_url + URL_PATH``.

        Args:
            base_url: Scheme and host, e.g. "http://localhost:3000"
        """
        url = f"{base_url.rstrip('/')}{self.URL_PATH}"
        with reported_step(self.step_text("open_page", url=url)):
            logger.info(f"Opening {self.name}: {url}")
            get_page().goto(url, timeout=get_config().page_load_timeout_ms)
        return self

    def is_opened(self) -> bool:
        return self.URL_PATH in get_page().url

    @ui_step("assert_page_opened")
    def assert_opened(self) -> None:
        assert_eventually(
            self.is_opened,
            lambda: f"Page '{self.name}' is not opened: current url {get_page().url}, expected path {self.URL_PATH}",
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, url_path={self.URL_PATH!r})"


class Widget(UIElement, metaclass=CompositeMeta):
    """
    Reusable group of elements under one root.

    A widget without a bound root falls back to the document body.
    """

    __composite_kind__ = "widget"
    default_type = ElementType.WIDGET

    def _default_root(self) -> ElementHandle:
        return ElementHandle(BODY)

    @property
    def fields(self) -> Dict[str, Field]:
        return type(self)._fields

    def wire(self, config: Optional[WiringConfig] = None) -> "Widget":
        return wire(self, config)

    def is_loaded(self) -> bool:
        return self.root.is_displayed()

    @ui_step("assert_loaded")
    def assert_loaded(self) -> None:
        assert_eventually(self.is_loaded, f"{self._describe_self()} is not loaded")


__all__ = ["CompositeMeta", "PageObject", "Widget"]
