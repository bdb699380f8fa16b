"""
================================================================================
Simple Lists Page Object
================================================================================

Two flat lists declared with absolute list locators.

================================================================================
"""

from pagewire.framework import Button, ListField, ListLocator, PageObject, TextField


class SimpleListsPage(PageObject):
    PAGE_NAME = "Simple lists"
    URL_PATH = "/lists"

    inputs = ListField(
        TextField,
        name="Input field list",
        description="Text inputs of the form",
        list_locator=ListLocator(xpath="//input[contains(@class,'form-control')]"),
    )
    birds = ListField(
        Button,
        name="Bird names button list",
        list_locator=ListLocator(css=".mt-5 .btn-primary"),
    )
