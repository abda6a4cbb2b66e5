"""
================================================================================
Home Page Object (Async / Playwright)
================================================================================

Landing page after login. Confirms the session is live and leads to the
filters directory through the top navigation.

================================================================================
"""

from __future__ import annotations

import allure
from playwright.async_api import Page

from filtersuites.ui_testing.components import NavigationComponent
from filtersuites.ui_testing.framework.config_loader import Settings
from filtersuites.ui_testing.framework.constants import TIMEOUTS
from filtersuites.ui_testing.framework.locator import ElementLocator


class HomePage:
    """Home page object (async)."""

    YOUR_WORK_TAB = ElementLocator.by_text("Your work")
    FILTERS_MENU = ElementLocator.by_text("Filters")
    VIEW_ALL_FILTERS = ElementLocator.by_text("View all filters")

    def __init__(self, page: Page, settings: Settings):
        self.page = page
        self.settings = settings

        self.your_work_tab = NavigationComponent(page, self.YOUR_WORK_TAB)
        self.filters_menu = NavigationComponent(page, self.FILTERS_MENU, self.VIEW_ALL_FILTERS)
        self.view_all_filters_option = NavigationComponent(page, self.VIEW_ALL_FILTERS)

    @allure.step("Open home page")
    async def open(self) -> "HomePage":
        await self.page.goto(self.settings.base_url, timeout=TIMEOUTS["PAGE_LOAD"])
        return self

    @allure.step("Wait for home page")
    async def wait_for_home_page_to_load(self) -> None:
        """The 'Your work' tab is visible only to a logged-in user."""
        await self.your_work_tab.wait_until_visible("PAGE_LOAD")

    @allure.step("Navigate to Filters page")
    async def navigate_to_filters_page(self) -> None:
        await self.filters_menu.click_and_wait_for_target()
        await self.view_all_filters_option.click()
