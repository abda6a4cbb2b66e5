"""
Checkbox component.

`toggle()` reads the current state and then flips it. The two steps are not
atomic; each test drives its page alone, so nothing else changes the box
between the read and the write.
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from filtersuites.ui_testing.framework.constants import TIMEOUTS
from filtersuites.ui_testing.framework.exceptions import (
    ElementNotFoundError,
    ElementStateError,
)

from .base import ElementComponent


class CheckboxComponent(ElementComponent):
    """Checkbox wrapper."""

    async def check(self) -> None:
        await self.first_match().check(timeout=TIMEOUTS["QUICK_ACTION"])
        logger.debug(f"Checked: {self.locator}")

    async def uncheck(self) -> None:
        await self.first_match().uncheck(timeout=TIMEOUTS["QUICK_ACTION"])
        logger.debug(f"Unchecked: {self.locator}")

    async def toggle(self) -> None:
        if await self.is_checked():
            await self.uncheck()
        else:
            await self.check()

    async def is_checked(self) -> bool:
        return await self.first_match().is_checked(timeout=TIMEOUTS["QUICK_ACTION"])

    async def get_value(self) -> Optional[str]:
        return await self.first_match().get_attribute("value", timeout=TIMEOUTS["QUICK_ACTION"])

    async def get_name(self) -> Optional[str]:
        return await self.first_match().get_attribute("name", timeout=TIMEOUTS["QUICK_ACTION"])

    async def validate_before_interaction(self) -> None:
        """
        Check existence, then visibility, then enabled state.

        Stops at the first failing check.

        Raises:
            ElementNotFoundError: Locator matches nothing
            ElementStateError: Checkbox hidden or disabled
        """
        if not await self.exists():
            raise ElementNotFoundError(f"Checkbox not found with locator: {self.locator}")
        if not await self.is_visible():
            raise ElementStateError(f"Checkbox is not visible: {self.locator}")
        if not await self.is_enabled():
            raise ElementStateError(f"Checkbox is not enabled: {self.locator}")

    async def check_with_validation(self) -> None:
        with allure.step(f"Check checkbox: {self.locator}"):
            await self.validate_before_interaction()
            await self.check()

    async def uncheck_with_validation(self) -> None:
        with allure.step(f"Uncheck checkbox: {self.locator}"):
            await self.validate_before_interaction()
            await self.uncheck()


__all__ = ["CheckboxComponent"]
