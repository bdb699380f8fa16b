"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures rendering the example pages into the in-memory browser and
building their page objects.

Key Features:
- Demo documents for the login, lists, categories and table pages
- Page Object fixtures wired against those documents

================================================================================
"""

import pytest

from testsuites.fakes import FakeNode, bird_buttons
from testsuites.ui_testing.pages import CategoriesPage, LoginPage, SimpleListsPage, TablePage

BIRDS = ("Sparrow", "Robin", "Eagle", "Owl", "Hawk", "Falcon", "Heron", "Crane", "Swan", "Golden Eagle")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page) -> LoginPage:
    page.add(
        FakeNode(selectors=["css=#email"], attrs={"placeholder": "Email"}),
        FakeNode(selectors=["id=password"]),
        FakeNode(selectors=["css=input[name='remember']"]),
        FakeNode("Sign in", ["xpath=//button[@type='submit']"]),
    )
    return LoginPage()


@pytest.fixture
def simple_lists_page(page) -> SimpleListsPage:
    xpath = "xpath=//input[contains(@class,'form-control')]"
    page.add(
        FakeNode(selectors=[xpath], attrs={"placeholder": "First name"}),
        FakeNode(selectors=[xpath], attrs={"placeholder": "Last name"}),
        *bird_buttons(*BIRDS),
    )
    return SimpleListsPage()


@pytest.fixture
def categories_page(page) -> CategoriesPage:
    page.add(
        FakeNode(
            selectors=["id=categories"],
            children=[
                FakeNode(selectors=["css=.fold-icon"]),
                FakeNode("Birds", ["css=a.category"], attrs={"href": "/c/birds"}),
                FakeNode("Reptiles", ["css=a.category"], attrs={"href": "/c/reptiles"}),
            ],
        )
    )
    return CategoriesPage()


@pytest.fixture
def table_page(page) -> TablePage:
    rows = [
        FakeNode(
            selectors=["css=.row"],
            children=[FakeNode(title, ["css=.title"]), FakeNode("Delete", ["css=.delete"])],
        )
        for title in ("Order 1001", "Order 1002", "Order 1003")
    ]
    page.add(FakeNode(selectors=["css=table.orders"], children=rows))
    return TablePage()
