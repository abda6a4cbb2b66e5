"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the issue filter workflow.

Components:
    - locator: immutable, validated element descriptors
    - constants: status whitelist, status groups, timeout policy
    - exceptions: framework error taxonomy
    - config_loader: YAML / .env / environment settings
    - browser_manager: browser lifecycle and session restore
    - session_artifact: session file structure checks
    - session_bootstrap: one-time login that writes the session file

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, Settings
from .constants import ALLOWED_STATUSES, CLOSED_STATUSES, OPEN_STATUSES, TIMEOUTS
from .exceptions import (
    ConfigurationError,
    ElementNotFoundError,
    FilterAutomationError,
    StatusValidationError,
    UiTimeoutError,
)
from .locator import ElementLocator, LocatorStrategy

__all__ = [
    "BrowserManager",
    "ConfigLoader",
    "Settings",
    "ALLOWED_STATUSES",
    "CLOSED_STATUSES",
    "OPEN_STATUSES",
    "TIMEOUTS",
    "ConfigurationError",
    "ElementNotFoundError",
    "FilterAutomationError",
    "StatusValidationError",
    "UiTimeoutError",
    "ElementLocator",
    "LocatorStrategy",
]
