"""
================================================================================
Page Objects
================================================================================

Example page objects declared with pagewire.

Each page class declares:
    - Elements and widgets with their locators
    - Lists of repeated components
    - Page-specific actions

Author: Automation Team
License: MIT
================================================================================
"""

from .categories_page import CategoriesPage, FoldingCategoriesBlock
from .login_page import LoginPage
from .simple_lists_page import SimpleListsPage
from .table_page import Row, Table, TablePage

__all__ = [
    "CategoriesPage",
    "FoldingCategoriesBlock",
    "LoginPage",
    "SimpleListsPage",
    "Row",
    "Table",
    "TablePage",
]
