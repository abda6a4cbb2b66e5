"""
================================================================================
UI Components
================================================================================

Reusable, stateless wrappers around element locators. Page objects compose
these; they hold no raw selectors of their own.

Components:
    - DropdownComponent: open / select / close state machine
    - CheckboxComponent: check, uncheck, toggle, pre-interaction validation
    - FormInputComponent: writable input fields
    - TextInputComponent: read-only value inspection
    - TableComponent: result rows and fail-fast membership check
    - NavigationComponent: click-and-arrive with optional target

Author: Automation Team
License: MIT
================================================================================
"""

from .base import ElementComponent
from .checkbox import CheckboxComponent
from .dropdown import DropdownComponent
from .form_input import FormInputComponent
from .navigation import NavigationComponent
from .table import TableComponent
from .text_input import TextInputComponent

__all__ = [
    "ElementComponent",
    "CheckboxComponent",
    "DropdownComponent",
    "FormInputComponent",
    "NavigationComponent",
    "TableComponent",
    "TextInputComponent",
]
