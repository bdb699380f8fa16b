"""
================================================================================
Table Page Object
================================================================================

Rows are widgets built from each ``.row`` element of the table widget; the
cells of a row are located relative to that row.

================================================================================
"""

from pagewire.framework import (
    Button,
    Field,
    ListField,
    ListLocatorChain,
    Locator,
    LocatorChain,
    PageObject,
    Text,
    Widget,
)


class Row(Widget):
    title = Field(Text, name="Title", chain=LocatorChain(css=".title"))
    delete = Field(Button, name="Delete", chain=LocatorChain(css=".delete"))

    def get_id(self) -> str:
        return self.title.text().strip()


class Table(Widget):
    rows = ListField(Row, name="Rows", list_chain=ListLocatorChain(css=".row"))


class TablePage(PageObject):
    PAGE_NAME = "Table"
    URL_PATH = "/table"

    table = Field(Table, name="Orders", locator=Locator(css="table.orders"))
