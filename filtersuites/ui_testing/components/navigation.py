"""
Navigation component.

Wraps a clickable element (button, tab, link, menu entry) and an optional
target locator that appears once navigation completes.
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from filtersuites.ui_testing.framework.constants import TIMEOUTS
from filtersuites.ui_testing.framework.exceptions import (
    ElementNotFoundError,
    ElementStateError,
    TargetNotConfiguredError,
)
from filtersuites.ui_testing.framework.locator import ElementLocator

from .base import ElementComponent, wait_visible


class NavigationComponent(ElementComponent):
    """
    Navigation trigger with optional arrival target.

    Attributes:
        locator: Element that is clicked
        target_locator: Element that confirms arrival (optional)
    """

    def __init__(
        self,
        page: Page,
        locator: ElementLocator,
        target_locator: Optional[ElementLocator] = None,
    ):
        super().__init__(page, locator)
        self.target_locator = target_locator

    def _require_target(self) -> ElementLocator:
        if self.target_locator is None:
            raise TargetNotConfiguredError(
                f"Target element locator not set for {self.locator}. Cannot wait for target."
            )
        return self.target_locator

    async def click(self) -> None:
        await self.first_match().click(timeout=TIMEOUTS["QUICK_ACTION"])
        logger.debug(f"Clicked: {self.locator}")

    async def click_and_wait_for_target(self) -> None:
        """
        Click, then wait for the target to become visible within QUICK_ACTION.

        Raises:
            TargetNotConfiguredError: No target locator was given
            UiTimeoutError: Target did not appear in time
        """
        target = self._require_target()
        with allure.step(f"Click {self.locator} and wait for {target}"):
            await self.click()
            await wait_visible(target.resolve(self.page), f"Navigation target {target}", "QUICK_ACTION")

    async def is_target_visible(self) -> bool:
        """Short probe; False when the target is not visible within PROBE."""
        target = self._require_target()
        try:
            await target.resolve(self.page).first.wait_for(state="visible", timeout=TIMEOUTS["PROBE"])
            return True
        except PlaywrightTimeoutError:
            return False

    async def wait_for_clickable(self) -> None:
        await self.wait_until_visible("PAGE_LOAD")

    async def click_with_validation(self) -> None:
        if not await self.exists():
            raise ElementNotFoundError(f"Navigation element not found: {self.locator}")
        if not await self.is_visible():
            raise ElementStateError(f"Navigation element not visible: {self.locator}")
        await self.click()

    async def get_text(self) -> str:
        return await self.first_match().inner_text(timeout=TIMEOUTS["QUICK_ACTION"])

    async def get_class(self) -> Optional[str]:
        return await self.first_match().get_attribute("class", timeout=TIMEOUTS["QUICK_ACTION"])

    async def has_class(self, class_name: str) -> bool:
        """Whole-token match against the class attribute."""
        classes = await self.get_class()
        return bool(classes) and class_name in classes.split()

    async def is_active(self, active_class: str = "active") -> bool:
        return await self.has_class(active_class)


__all__ = ["NavigationComponent"]
