"""
================================================================================
Table (Results) Component
================================================================================

Reads result rows located by a per-row cell locator
(e.g. `[data-testid="issue.status"]`).

Every read re-queries the live DOM. `get_all_row_texts()` returns a plain
list; calling it again produces a fresh snapshot.

An empty result set is valid: `validate_all_cells_contain_expected_values`
logs a warning and returns.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Collection, List

import allure
from loguru import logger

from filtersuites.ui_testing.framework.constants import TIMEOUTS
from filtersuites.ui_testing.framework.exceptions import (
    RowIndexError,
    UnexpectedCellValueError,
)

from .base import ElementComponent


class TableComponent(ElementComponent):
    """Result table where each match of `locator` is one row's cell."""

    async def get_row_count(self) -> int:
        return await self.element().count()

    async def get_row_text(self, index: int) -> str:
        """
        Text of the row at `index` (0-based).

        Raises:
            RowIndexError: index < 0 or index >= row count
        """
        count = await self.get_row_count()
        if index < 0 or index >= count:
            raise RowIndexError(index, count)
        return await self.element().nth(index).inner_text(timeout=TIMEOUTS["QUICK_ACTION"])

    async def get_all_row_texts(self) -> List[str]:
        """All row texts in document order."""
        count = await self.get_row_count()
        cells = self.element()
        return [
            await cells.nth(i).inner_text(timeout=TIMEOUTS["QUICK_ACTION"])
            for i in range(count)
        ]

    async def validate_all_cells_contain_expected_values(
        self,
        expected_values: Collection[str],
        label: str = "value",
    ) -> None:
        """
        Fail on the first row whose text is not in `expected_values`.

        Args:
            expected_values: Allowed cell texts
            label: Noun used in the error message (e.g. "status")

        Raises:
            UnexpectedCellValueError: First offending row, naming the full expected set
        """
        with allure.step(f"Validate results contain only: {', '.join(expected_values)}"):
            count = await self.get_row_count()
            if count == 0:
                logger.warning(f"No rows found in table: {self.locator}")
                return

            cells = self.element()
            for i in range(count):
                cell_text = await cells.nth(i).inner_text(timeout=TIMEOUTS["QUICK_ACTION"])
                if cell_text not in expected_values:
                    raise UnexpectedCellValueError(cell_text, list(expected_values), label=label)

            logger.debug(f"All {count} rows matched expected values")

    async def is_empty(self) -> bool:
        return await self.get_row_count() == 0

    async def find_row_by_text(self, search_text: str) -> int:
        """Index of the first row with exactly `search_text`, or -1."""
        texts = await self.get_all_row_texts()
        return texts.index(search_text) if search_text in texts else -1

    async def value_exists(self, search_value: str) -> bool:
        return search_value in await self.get_all_row_texts()

    async def get_first_row_text(self) -> str:
        return await self.get_row_text(0)

    async def get_last_row_text(self) -> str:
        count = await self.get_row_count()
        if count == 0:
            raise RowIndexError(-1, 0)
        return await self.get_row_text(count - 1)


__all__ = ["TableComponent"]
