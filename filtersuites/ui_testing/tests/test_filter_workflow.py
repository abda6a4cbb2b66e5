"""
================================================================================
Issue Filter Workflow UI Tests
================================================================================

End-to-end status filter scenario against the live application, starting
from the saved session.

Test Coverage:
- Home page reachable without a login form (session restored)
- Open statuses round: create filter, select, verify results, clear
- Closed statuses round in the same page
- Generated JQL reflects the selected status group

================================================================================
"""

import allure
import pytest

from filtersuites.ui_testing.framework.constants import CLOSED_STATUSES, OPEN_STATUSES
from filtersuites.ui_testing.workflows import (
    run_status_filter_check,
    select_status_filters,
    verify_jql_reflects_statuses,
)


@allure.epic("UI Testing")
@allure.feature("Issue Filters")
@pytest.mark.e2e
@pytest.mark.filters
class TestStatusFilterWorkflow:
    """Status filter scenario tests."""

    @allure.story("Open and Closed Rounds")
    @allure.title("Results only contain the selected open, then closed, statuses")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_open_then_closed_status_filters(self, home_page, filters_page):
        """
        Test both filter rounds in one page.

        Steps:
        1. Open the home page (already authenticated)
        2. Navigate to Filters
        3. Filter by open statuses and verify every result row
        4. Filter by closed statuses and verify every result row
        """
        with allure.step("Open home page and go to Filters"):
            await home_page.open()
            await home_page.wait_for_home_page_to_load()
            await home_page.navigate_to_filters_page()
            await filters_page.wait_for_filters_page_to_load()

        with allure.step("Open statuses round"):
            await run_status_filter_check(filters_page, OPEN_STATUSES)

        with allure.step("Closed statuses round"):
            await run_status_filter_check(filters_page, CLOSED_STATUSES)

    @allure.story("JQL")
    @allure.title("JQL query reflects the selected {group} statuses")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.parametrize(
        "group, statuses",
        [("open", OPEN_STATUSES), ("closed", CLOSED_STATUSES)],
    )
    @pytest.mark.asyncio
    async def test_jql_reflects_selected_statuses(self, home_page, filters_page, group, statuses):
        """
        Test the JQL view of a basic-mode selection.

        Steps:
        1. Navigate to Filters and create a filter
        2. Select the status group
        3. Switch to JQL and check the status clause, then switch back
        """
        with allure.step("Open Filters"):
            await home_page.open()
            await home_page.wait_for_home_page_to_load()
            await home_page.navigate_to_filters_page()
            await filters_page.wait_for_filters_page_to_load()
            await filters_page.click_create_filter()

        await select_status_filters(filters_page, statuses)

        jql = await verify_jql_reflects_statuses(filters_page, group)
        allure.attach(jql, name="JQL", attachment_type=allure.attachment_type.TEXT)

        await filters_page.clear_all_filters()
