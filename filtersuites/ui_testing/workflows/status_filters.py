"""
================================================================================
Status Filter Workflows
================================================================================

Caller-side workflow steps for the status filter scenario.

Validation happens here, ahead of the UI: the requested statuses are checked
for shape (a non-empty sequence) and then against the status whitelist. Only
when both checks pass does control reach the Filters page and its dropdown /
checkbox components. Pages and components stay free of whitelist rules.

Usage:
    await select_status_filters(filters_page, OPEN_STATUSES)
    await validate_statuses_in_results(filters_page, OPEN_STATUSES)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, List

import allure
from loguru import logger

from filtersuites.ui_testing.framework.constants import (
    ALLOWED_STATUSES,
    JQL_PATTERNS,
    STATUS_GROUPS,
)
from filtersuites.ui_testing.framework.exceptions import (
    InputValidationError,
    StatusValidationError,
    UnexpectedCellValueError,
)
from filtersuites.ui_testing.pages.filters_page import FiltersPage


def validate_status_selection(statuses: Any) -> List[str]:
    """
    Shape check, then whitelist check.

    Args:
        statuses: Requested statuses

    Returns:
        The statuses as a list, in the given order

    Raises:
        InputValidationError: Not a non-empty sequence of statuses
        StatusValidationError: One or more values outside ALLOWED_STATUSES
    """
    if isinstance(statuses, (str, bytes)) or not isinstance(statuses, Sequence) or not statuses:
        raise InputValidationError(
            "At least one status must be provided as a list, "
            f"got: {statuses!r}"
        )

    invalid = [s for s in statuses if s not in ALLOWED_STATUSES]
    if invalid:
        raise StatusValidationError(invalid, ALLOWED_STATUSES)

    return list(statuses)


async def select_status_filters(filters_page: FiltersPage, statuses: Any) -> List[str]:
    """
    Validate `statuses`, then tick them in the status dropdown.

    Nothing on the page is touched when validation fails.
    """
    selected = validate_status_selection(statuses)
    await filters_page.select_status_checkboxes(selected)
    return selected


async def validate_statuses_in_results(
    filters_page: FiltersPage,
    expected_statuses: Sequence[str],
) -> None:
    """
    Fail on the first result row whose status is not expected.

    An empty result set passes (a warning is logged).

    Raises:
        UnexpectedCellValueError: Names the offending status and the expected set
    """
    await filters_page.status_table.validate_all_cells_contain_expected_values(
        expected_statuses, label="status"
    )


def jql_matches_status_group(jql_text: str, group: str) -> bool:
    """
    True when `jql_text` contains a status clause of `group`
    ('open' or 'closed').
    """
    try:
        pattern = JQL_PATTERNS[group]
    except KeyError:
        raise InputValidationError(
            f"Unknown status group {group!r}. Expected one of: {', '.join(JQL_PATTERNS)}"
        ) from None
    return pattern.search(jql_text) is not None


async def verify_jql_reflects_statuses(filters_page: FiltersPage, group: str) -> str:
    """
    Switch to JQL, check the generated query against `group`, switch back.

    Returns:
        The JQL query text

    Raises:
        UnexpectedCellValueError: Query has no status clause for the group
    """
    with allure.step(f"Verify JQL reflects {group} statuses"):
        await filters_page.switch_to_jql()
        jql_text = await filters_page.get_jql_query_text()
        await filters_page.switch_to_basic()

        logger.info(f"JQL query: {jql_text}")
        if not jql_matches_status_group(jql_text, group):
            raise UnexpectedCellValueError(jql_text, STATUS_GROUPS[group], label="JQL query")
        return jql_text


async def run_status_filter_check(
    filters_page: FiltersPage,
    statuses: Any,
) -> List[str]:
    """
    One round of the filter scenario: create a filter, select `statuses`,
    check the results, clear the filters.

    Returns:
        Result statuses observed before clearing
    """
    selected = validate_status_selection(statuses)
    with allure.step(f"Status filter round: {', '.join(selected)}"):
        await filters_page.click_create_filter()
        await select_status_filters(filters_page, selected)
        await validate_statuses_in_results(filters_page, selected)
        observed = await filters_page.get_result_statuses()
        logger.info(f"{len(observed)} results matched {selected}")
        await filters_page.clear_all_filters()
        return observed


__all__ = [
    "validate_status_selection",
    "select_status_filters",
    "validate_statuses_in_results",
    "jql_matches_status_group",
    "verify_jql_reflects_statuses",
    "run_status_filter_check",
]
