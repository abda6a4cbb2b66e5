"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class composes UI components and exposes page-level workflow
steps. Pages return data; correctness checks belong to workflows and tests.

Author: Automation Team
License: MIT
================================================================================
"""

from .filters_page import FiltersPage
from .home_page import HomePage
from .login_page import LoginPage

__all__ = [
    "FiltersPage",
    "HomePage",
    "LoginPage",
]
