"""
Read-only text input component.

Used for fields the flow only inspects, such as the generated JQL query.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern, Union

from filtersuites.ui_testing.framework.constants import TIMEOUTS

from .base import ElementComponent


class TextInputComponent(ElementComponent):
    """Input field whose value is read and checked."""

    async def get_value(self) -> str:
        return await self.first_match().input_value(timeout=TIMEOUTS["QUICK_ACTION"])

    async def contains_value(self, expected_value: str) -> bool:
        return expected_value in await self.get_value()

    async def equals_value(self, expected_value: str) -> bool:
        return await self.get_value() == expected_value

    async def get_text_content(self) -> str:
        return await self.first_match().inner_text(timeout=TIMEOUTS["QUICK_ACTION"])

    async def is_empty(self) -> bool:
        """True when the value is empty or whitespace only."""
        return not (await self.get_value()).strip()

    async def get_value_length(self) -> int:
        return len(await self.get_value())

    async def starts_with_value(self, prefix: str) -> bool:
        return (await self.get_value()).startswith(prefix)

    async def ends_with_value(self, suffix: str) -> bool:
        return (await self.get_value()).endswith(suffix)

    async def get_type(self) -> Optional[str]:
        return await self.first_match().get_attribute("type", timeout=TIMEOUTS["QUICK_ACTION"])

    async def is_read_only(self) -> bool:
        readonly = await self.first_match().get_attribute("readonly", timeout=TIMEOUTS["QUICK_ACTION"])
        return readonly is not None

    async def get_placeholder(self) -> Optional[str]:
        return await self.first_match().get_attribute("placeholder", timeout=TIMEOUTS["QUICK_ACTION"])

    async def matches_pattern(self, pattern: Union[str, Pattern[str]]) -> bool:
        """Search the value with a regex (string patterns are compiled as-is)."""
        return re.search(pattern, await self.get_value()) is not None


__all__ = ["TextInputComponent"]
