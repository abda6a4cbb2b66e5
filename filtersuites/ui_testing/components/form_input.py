"""Writable form input component."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from filtersuites.ui_testing.framework.constants import TIMEOUTS
from filtersuites.ui_testing.framework.exceptions import InputValidationError

from .base import ElementComponent


class FormInputComponent(ElementComponent):
    """Input field that the flow types into."""

    async def fill(self, value: str) -> None:
        """
        Fill the input, replacing existing content.

        Raises:
            InputValidationError: Empty value
        """
        if not value:
            raise InputValidationError("Input value cannot be empty")
        await self.first_match().fill(value, timeout=TIMEOUTS["QUICK_ACTION"])
        logger.debug(f"Filled input: {self.locator}")

    async def get_value(self) -> str:
        return await self.first_match().input_value(timeout=TIMEOUTS["QUICK_ACTION"])

    async def clear(self) -> None:
        await self.first_match().fill("", timeout=TIMEOUTS["QUICK_ACTION"])

    async def clear_and_fill(self, value: str) -> None:
        await self.clear()
        await self.fill(value)

    async def get_placeholder(self) -> Optional[str]:
        return await self.first_match().get_attribute("placeholder", timeout=TIMEOUTS["QUICK_ACTION"])

    async def type(self, value: str) -> None:
        """Type key by key, firing per-character input events."""
        await self.first_match().press_sequentially(value, timeout=TIMEOUTS["QUICK_ACTION"])

    async def focus(self) -> None:
        await self.first_match().focus(timeout=TIMEOUTS["QUICK_ACTION"])

    async def blur(self) -> None:
        await self.first_match().blur(timeout=TIMEOUTS["QUICK_ACTION"])


__all__ = ["FormInputComponent"]
