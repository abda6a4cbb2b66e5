"""
Workflow steps that sit between tests and page objects: input validation
before the UI is touched, and result checks after it returns data.
"""

from .status_filters import (
    jql_matches_status_group,
    run_status_filter_check,
    select_status_filters,
    validate_status_selection,
    validate_statuses_in_results,
    verify_jql_reflects_statuses,
)

__all__ = [
    "jql_matches_status_group",
    "run_status_filter_check",
    "select_status_filters",
    "validate_status_selection",
    "validate_statuses_in_results",
    "verify_jql_reflects_statuses",
]
