"""
================================================================================
Filters Page Object (Async / Playwright)
================================================================================

Filter builder: status dropdown, results table, JQL/basic mode switch.

This page only drives the UI and returns data. Whitelist validation of the
requested statuses and checks on the returned results live in
`filtersuites.ui_testing.workflows`.

================================================================================
"""

from __future__ import annotations

from typing import Iterable, List

import allure
from loguru import logger
from playwright.async_api import Page

from filtersuites.ui_testing.components import (
    CheckboxComponent,
    DropdownComponent,
    NavigationComponent,
    TableComponent,
    TextInputComponent,
)
from filtersuites.ui_testing.framework.config_loader import Settings
from filtersuites.ui_testing.framework.constants import TIMEOUTS
from filtersuites.ui_testing.framework.locator import ElementLocator


class FiltersPage:
    """Filters page object (async)."""

    PAGE_HEADER = ElementLocator.by_text("Filters")
    STATUS_DROPDOWN = ElementLocator.by_attribute("data-testid", "status.ui.filter.dropdown")
    STATUS_OPTIONS = ElementLocator.by_role("listbox")
    STATUS_CELL = ElementLocator.by_attribute("data-testid", "issue.status")
    CREATE_FILTER = ElementLocator.by_text("Create filter")
    CLEAR_FILTERS = ElementLocator.by_text("Clear")
    SWITCH_TO_JQL = ElementLocator.by_text("Switch to JQL")
    SWITCH_TO_BASIC = ElementLocator.by_text("Switch to basic")
    JQL_INPUT = ElementLocator.by_attribute("data-testid", "jql.input", tag="input")

    def __init__(self, page: Page, settings: Settings):
        self.page = page
        self.settings = settings

        self.page_header = NavigationComponent(page, self.PAGE_HEADER)
        self.status_dropdown = DropdownComponent(page, self.STATUS_DROPDOWN, self.STATUS_OPTIONS)
        self.status_table = TableComponent(page, self.STATUS_CELL)
        self.create_filter_button = NavigationComponent(page, self.CREATE_FILTER)
        self.clear_filters_button = NavigationComponent(page, self.CLEAR_FILTERS)
        self.switch_to_jql_button = NavigationComponent(page, self.SWITCH_TO_JQL, self.JQL_INPUT)
        self.switch_to_basic_button = NavigationComponent(page, self.SWITCH_TO_BASIC, self.PAGE_HEADER)
        self.jql_input = TextInputComponent(page, self.JQL_INPUT)

    def status_checkbox(self, status: str) -> CheckboxComponent:
        """Checkbox for one status inside the open status dropdown."""
        return CheckboxComponent(self.page, ElementLocator.by_attribute("value", status, tag="input"))

    @allure.step("Wait for Filters page")
    async def wait_for_filters_page_to_load(self) -> None:
        await self.page_header.wait_until_visible("PAGE_LOAD")

    @allure.step("Click Create filter")
    async def click_create_filter(self) -> None:
        await self.create_filter_button.click()

    async def select_status_checkboxes(self, statuses: Iterable[str]) -> None:
        """
        Open the status dropdown, tick each status, close the dropdown.

        No whitelist check happens here; see
        `workflows.status_filters.select_status_filters`.
        """
        statuses = list(statuses)
        with allure.step(f"Select statuses: {', '.join(statuses)}"):
            await self.status_dropdown.open()
            for status in statuses:
                await self.status_checkbox(status).check_with_validation()
            await self.status_dropdown.close()
            logger.info(f"Selected status filters: {statuses}")

    async def get_result_statuses(self) -> List[str]:
        return await self.status_table.get_all_row_texts()

    @allure.step("Clear all filters")
    async def clear_all_filters(self) -> None:
        await self.clear_filters_button.click()
        # The results table re-renders without a reliable completion signal
        await self.page.wait_for_timeout(TIMEOUTS["FILTER_CLEAR"])

    @allure.step("Switch to JQL")
    async def switch_to_jql(self) -> None:
        await self.switch_to_jql_button.click_and_wait_for_target()

    async def get_jql_query_text(self) -> str:
        return await self.jql_input.get_value()

    @allure.step("Switch to basic")
    async def switch_to_basic(self) -> None:
        await self.switch_to_basic_button.click_and_wait_for_target()
