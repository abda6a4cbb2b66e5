"""
================================================================================
Element Locator
================================================================================

Immutable element descriptors resolved against the live page on every use.

A locator is a small tagged variant over the selection strategies the
application needs:

    - TEXT       visible text, exact or substring
    - ATTRIBUTE  attribute equality, optionally restricted to a tag
    - ROLE       ARIA role, optionally with an accessible name
    - CSS        raw CSS selector (escape hatch)

Shape is validated at construction, so a malformed selector fails when a page
object is built rather than half way through a flow.

Usage:
    >>> status_cell = ElementLocator.by_attribute("data-testid", "issue.status")
    >>> status_cell.selector
    '[data-testid="issue.status"]'
    >>> cells = status_cell.resolve(page)   # fresh Playwright Locator

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from playwright.async_api import Locator, Page

from .exceptions import LocatorError

# HTML tag names, custom elements included (e.g. "my-widget")
TAG_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*(?:-[A-Za-z0-9]+)*")


class LocatorStrategy(str, Enum):
    """Supported selection strategies."""
    TEXT = "text"
    ATTRIBUTE = "attribute"
    ROLE = "role"
    CSS = "css"


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass(frozen=True)
class ElementLocator:
    """
    Pure descriptor identifying zero or more elements.

    Attributes:
        strategy: Selection strategy tag
        value: Text, attribute value, role or CSS selector depending on strategy
        name: Attribute name (ATTRIBUTE) or accessible name (ROLE)
        tag: Optional tag restriction (ATTRIBUTE)
        exact: Exact text match (TEXT)
    """
    strategy: LocatorStrategy
    value: str
    name: Optional[str] = None
    tag: str = ""
    exact: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.strategy, LocatorStrategy):
            raise LocatorError(f"Unknown locator strategy: {self.strategy!r}")
        if not isinstance(self.value, str) or not self.value.strip():
            raise LocatorError(
                f"{self.strategy.value} locator requires a non-empty value"
            )
        if self.strategy is LocatorStrategy.ATTRIBUTE and not (self.name or "").strip():
            raise LocatorError("attribute locator requires an attribute name")
        if self.tag and not TAG_NAME_PATTERN.fullmatch(self.tag):
            raise LocatorError(f"Invalid tag restriction: {self.tag!r}")

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def by_text(cls, text: str, exact: bool = True) -> "ElementLocator":
        """Match elements by visible text."""
        return cls(LocatorStrategy.TEXT, text, exact=exact)

    @classmethod
    def by_attribute(cls, name: str, value: str, tag: str = "") -> "ElementLocator":
        """Match elements whose attribute `name` equals `value`."""
        return cls(LocatorStrategy.ATTRIBUTE, value, name=name, tag=tag)

    @classmethod
    def by_role(cls, role: str, name: Optional[str] = None) -> "ElementLocator":
        """Match elements by ARIA role and optional accessible name."""
        return cls(LocatorStrategy.ROLE, role, name=name)

    @classmethod
    def by_css(cls, selector: str) -> "ElementLocator":
        """Match elements by raw CSS selector."""
        return cls(LocatorStrategy.CSS, selector)

    # =========================================================================
    # Rendering and resolution
    # =========================================================================

    @property
    def selector(self) -> str:
        """Playwright selector-engine string for this locator."""
        if self.strategy is LocatorStrategy.TEXT:
            return f"text={_quote(self.value)}" if self.exact else f"text={self.value}"
        if self.strategy is LocatorStrategy.ATTRIBUTE:
            return f"{self.tag}[{self.name}={_quote(self.value)}]"
        if self.strategy is LocatorStrategy.ROLE:
            if self.name:
                return f"role={self.value}[name={_quote(self.name)}]"
            return f"role={self.value}"
        return self.value

    def resolve(self, scope: Union[Page, Locator]) -> Locator:
        """
        Build a fresh Playwright Locator.

        Args:
            scope: Page, or a parent Locator to search within

        Returns:
            Locator matching 0..N elements at query time
        """
        return scope.locator(self.selector)

    def __str__(self) -> str:
        return self.selector


__all__ = [
    "ElementLocator",
    "LocatorStrategy",
]
