"""
Shared element probes for UI components.

A component holds one primary locator and resolves it against the live page on
every call. Nothing about the element is cached between calls.
"""

from __future__ import annotations

from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from filtersuites.ui_testing.framework.constants import TIMEOUTS
from filtersuites.ui_testing.framework.exceptions import UiTimeoutError
from filtersuites.ui_testing.framework.locator import ElementLocator


async def wait_visible(
    target: Locator,
    description: str,
    timeout: str = "QUICK_ACTION",
) -> None:
    """
    Wait until the first match of `target` is visible.

    Args:
        target: Playwright locator to wait on
        description: Used in the error message
        timeout: Name of the TIMEOUTS entry bounding the wait

    Raises:
        UiTimeoutError: When the element never becomes visible in time
    """
    timeout_ms = TIMEOUTS[timeout]
    try:
        await target.first.wait_for(state="visible", timeout=timeout_ms)
    except PlaywrightTimeoutError as exc:
        raise UiTimeoutError(
            f"{description} did not become visible within {timeout_ms} ms ({timeout})",
            timeout_ms=timeout_ms,
        ) from exc


class ElementComponent:
    """Base for components wrapping a single primary locator."""

    def __init__(self, page: Page, locator: ElementLocator):
        self.page = page
        self.locator = locator

    def element(self) -> Locator:
        """Fresh Playwright locator for the primary element (all matches)."""
        return self.locator.resolve(self.page)

    def first_match(self) -> Locator:
        """First match of the primary locator; actions and state reads go here."""
        return self.element().first

    async def exists(self) -> bool:
        return await self.element().count() > 0

    async def is_visible(self) -> bool:
        return await self.first_match().is_visible()

    async def is_enabled(self) -> bool:
        return await self.first_match().is_enabled(timeout=TIMEOUTS["QUICK_ACTION"])

    async def wait_until_visible(self, timeout: str = "QUICK_ACTION") -> None:
        """Block until the element is visible, bounded by a TIMEOUTS entry."""
        logger.debug(f"Waiting for {self.locator} ({timeout})")
        await wait_visible(self.element(), f"Element {self.locator}", timeout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.locator.selector!r})"


__all__ = [
    "ElementComponent",
    "wait_visible",
]
