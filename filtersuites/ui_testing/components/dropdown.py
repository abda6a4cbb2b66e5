"""
================================================================================
Dropdown Component
================================================================================

Dropdown menu interactions.

State machine:
    Closed --open()--> Open --select_option() / close()--> Closed

`open()` waits for the options container within DROPDOWN_OPEN and surfaces a
timeout to the caller; it is never retried here. `close()` only sends Escape;
callers that need confirmation ask `is_open()`, a short probe that returns
False instead of raising.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from filtersuites.ui_testing.framework.constants import TIMEOUTS
from filtersuites.ui_testing.framework.exceptions import OptionNotFoundError
from filtersuites.ui_testing.framework.locator import ElementLocator

from .base import ElementComponent, wait_visible


DEFAULT_OPTIONS_CONTAINER = ElementLocator.by_css('[role="listbox"]')
OPTION_ITEM = ElementLocator.by_role("option")


class DropdownComponent(ElementComponent):
    """
    Dropdown wrapper.

    Attributes:
        locator: Trigger element that opens the dropdown
        options_locator: Container that appears once the dropdown is open
    """

    def __init__(
        self,
        page: Page,
        trigger: ElementLocator,
        options_locator: Optional[ElementLocator] = None,
    ):
        super().__init__(page, trigger)
        self.options_locator = options_locator or DEFAULT_OPTIONS_CONTAINER

    def container(self) -> Locator:
        return self.options_locator.resolve(self.page)

    async def open(self) -> None:
        """
        Click the trigger and wait for the options container.

        Raises:
            UiTimeoutError: Container did not appear within DROPDOWN_OPEN
        """
        with allure.step(f"Open dropdown: {self.locator}"):
            await self.first_match().click(timeout=TIMEOUTS["QUICK_ACTION"])
            await wait_visible(
                self.container(),
                f"Dropdown options {self.options_locator}",
                "DROPDOWN_OPEN",
            )
            logger.debug(f"Dropdown opened: {self.locator}")

    async def close(self) -> None:
        """Send Escape. Does not confirm the dropdown actually closed."""
        await self.page.keyboard.press("Escape")
        logger.debug(f"Dropdown close requested: {self.locator}")

    async def select_option(self, option_text: str) -> None:
        """
        Open the dropdown and click the option whose text matches exactly.

        Raises:
            OptionNotFoundError: No option with that text
        """
        with allure.step(f"Select option: {option_text}"):
            await self.open()
            option = ElementLocator.by_text(option_text).resolve(self.container())
            if await option.count() == 0:
                raise OptionNotFoundError(option_text)
            await option.first.click(timeout=TIMEOUTS["QUICK_ACTION"])

    async def select_option_by_value(self, option_value: str) -> None:
        """Open the dropdown and click the option whose value attribute matches."""
        with allure.step(f"Select option by value: {option_value}"):
            await self.open()
            option = ElementLocator.by_attribute("value", option_value).resolve(self.container())
            if await option.count() == 0:
                raise OptionNotFoundError(
                    option_value,
                    f'Option with value "{option_value}" not found in dropdown',
                )
            await option.first.click(timeout=TIMEOUTS["QUICK_ACTION"])

    async def option_exists(self, option_text: str) -> bool:
        await self.open()
        exists = await ElementLocator.by_text(option_text).resolve(self.container()).count() > 0
        await self.close()
        return exists

    async def get_all_options(self) -> List[str]:
        """Texts of every option item, in document order."""
        await self.open()
        options = await OPTION_ITEM.resolve(self.container()).all_inner_texts()
        await self.close()
        return options

    async def get_option_count(self) -> int:
        await self.open()
        count = await OPTION_ITEM.resolve(self.container()).count()
        await self.close()
        return count

    async def is_open(self) -> bool:
        """Short probe; False when the container is not visible within PROBE."""
        try:
            await self.container().first.wait_for(state="visible", timeout=TIMEOUTS["PROBE"])
            return True
        except PlaywrightTimeoutError:
            return False


__all__ = [
    "DropdownComponent",
    "DEFAULT_OPTIONS_CONTAINER",
]
