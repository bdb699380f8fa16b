"""
================================================================================
Categories Page Object
================================================================================

A folding categories block: a widget whose icon and links are located
relative to the block root.

================================================================================
"""

from pagewire.framework import (
    Field,
    Icon,
    Link,
    ListField,
    ListLocatorChain,
    Locator,
    LocatorChain,
    PageObject,
    Widget,
)


class FoldingCategoriesBlock(Widget):
    """Collapsible block of category links."""

    icon = Field(Icon, name="Folding icon", chain=LocatorChain(css=".fold-icon"))
    links = ListField(Link, name="Category links", list_chain=ListLocatorChain(css="a.category"))

    def toggle(self) -> None:
        self.icon.click()

    def open_category(self, title: str) -> None:
        self.links.get(title).click()


class CategoriesPage(PageObject):
    PAGE_NAME = "Categories"
    URL_PATH = "/categories"

    categories = Field(FoldingCategoriesBlock, name="Categories", locator=Locator(id="categories"))
