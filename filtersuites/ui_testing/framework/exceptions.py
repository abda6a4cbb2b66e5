"""
================================================================================
Framework Exceptions
================================================================================

Error taxonomy for the issue-filter automation framework.

Every failure raised by components, page objects, workflows and the session
bootstrap derives from `FilterAutomationError`, so callers can catch the whole
family or one class precisely. Where a Python built-in carries the same
meaning (ValueError, IndexError, TimeoutError, AssertionError) it is mixed in,
so generic handlers keep working.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence


class FilterAutomationError(Exception):
    """Base class for all framework errors."""
    pass


# =============================================================================
# Configuration
# =============================================================================

class ConfigurationError(FilterAutomationError):
    """
    Raised when required configuration is absent or malformed.

    Attributes:
        missing_keys: Every required key that was absent or blank
    """

    def __init__(self, message: str, missing_keys: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.missing_keys: List[str] = list(missing_keys or [])


class TargetNotConfiguredError(ConfigurationError):
    """Raised when a navigation component needs a target locator it was not given."""
    pass


# =============================================================================
# Validation
# =============================================================================

class InputValidationError(FilterAutomationError, ValueError):
    """Raised when caller-supplied input has the wrong shape."""
    pass


class StatusValidationError(InputValidationError):
    """
    Raised when status values are not part of the whitelist.

    Attributes:
        invalid: Offending values, in the order they were supplied
        allowed: The full whitelist
    """

    def __init__(self, invalid: Sequence[str], allowed: Sequence[str]):
        self.invalid = list(invalid)
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid status values: {', '.join(map(str, self.invalid))}. "
            f"Allowed statuses: {', '.join(self.allowed)}"
        )


class LocatorError(FilterAutomationError, ValueError):
    """Raised when an element locator is constructed with an invalid shape."""
    pass


# =============================================================================
# Element lookup and state
# =============================================================================

class ElementNotFoundError(FilterAutomationError):
    """Raised when a referenced element resolves to zero matches."""
    pass


class OptionNotFoundError(ElementNotFoundError):
    """Raised when a dropdown option cannot be found."""

    def __init__(self, option: str, message: Optional[str] = None):
        self.option = option
        super().__init__(message or f'Option "{option}" not found in dropdown')


class ElementStateError(FilterAutomationError):
    """Raised when an element exists but is not in an interactable state."""
    pass


class UiTimeoutError(FilterAutomationError, TimeoutError):
    """Raised when a bounded wait exceeds its timeout policy entry."""

    def __init__(self, message: str, timeout_ms: Optional[int] = None):
        super().__init__(message)
        self.timeout_ms = timeout_ms


class AuthenticationTimeoutError(UiTimeoutError):
    """Raised when the application never signals a successful login."""
    pass


# =============================================================================
# Result tables
# =============================================================================

class RowIndexError(FilterAutomationError, IndexError):
    """
    Raised when a row index falls outside the table.

    Attributes:
        index: The requested index
        row_count: Number of rows present at query time
    """

    def __init__(self, index: int, row_count: int):
        self.index = index
        self.row_count = row_count
        super().__init__(f"Row index {index} out of bounds. Total rows: {row_count}")


class UnexpectedCellValueError(FilterAutomationError, AssertionError):
    """
    Raised on the first table cell whose value is outside the expected set.

    Attributes:
        value: The offending cell text
        expected: The full expected set
    """

    def __init__(self, value: str, expected: Sequence[str], label: str = "value"):
        self.value = value
        self.expected = list(expected)
        super().__init__(
            f'Unexpected {label} found: "{value}". '
            f"Expected one of: {', '.join(self.expected)}"
        )


# =============================================================================
# Session artifact
# =============================================================================

class SessionPersistenceError(FilterAutomationError):
    """Raised when authentication succeeded but the session file was not written."""
    pass


class SessionArtifactError(FilterAutomationError):
    """Raised when a session file cannot be read or has the wrong structure."""
    pass


__all__ = [
    "FilterAutomationError",
    "ConfigurationError",
    "TargetNotConfiguredError",
    "InputValidationError",
    "StatusValidationError",
    "LocatorError",
    "ElementNotFoundError",
    "OptionNotFoundError",
    "ElementStateError",
    "UiTimeoutError",
    "AuthenticationTimeoutError",
    "RowIndexError",
    "UnexpectedCellValueError",
    "SessionPersistenceError",
    "SessionArtifactError",
]
