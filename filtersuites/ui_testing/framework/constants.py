"""
================================================================================
Framework Constants
================================================================================

Status whitelist, status groups and the timeout policy.

Every waiting operation references one named `TIMEOUTS` entry, so tuning a
wait happens here and nowhere else.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Pattern, Tuple


# =============================================================================
# Issue statuses
# =============================================================================

OPEN_STATUSES: Tuple[str, ...] = ("Open", "To Do", "In Progress")
CLOSED_STATUSES: Tuple[str, ...] = ("Done", "Closed")

ALLOWED_STATUSES: Tuple[str, ...] = OPEN_STATUSES + CLOSED_STATUSES

STATUS_GROUPS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "open": OPEN_STATUSES,
    "closed": CLOSED_STATUSES,
})


def _status_clause_pattern(statuses: Tuple[str, ...]) -> Pattern[str]:
    alternatives = "|".join(re.escape(s) for s in statuses)
    return re.compile(rf'status\s*=\s*"?(?:{alternatives})"?', re.IGNORECASE)


# JQL clauses such as: status = "In Progress"
OPEN_STATUSES_JQL_PATTERN: Pattern[str] = _status_clause_pattern(OPEN_STATUSES)
CLOSED_STATUSES_JQL_PATTERN: Pattern[str] = _status_clause_pattern(CLOSED_STATUSES)

JQL_PATTERNS: Mapping[str, Pattern[str]] = MappingProxyType({
    "open": OPEN_STATUSES_JQL_PATTERN,
    "closed": CLOSED_STATUSES_JQL_PATTERN,
})


# =============================================================================
# Timeout policy (milliseconds)
# =============================================================================

TIMEOUTS: Mapping[str, int] = MappingProxyType({
    "PAGE_LOAD": 30000,
    "DROPDOWN_OPEN": 10000,
    "QUICK_ACTION": 5000,
    "FILTER_CLEAR": 1000,
    # Short probes (is_open, is_target_visible) must never stall a flow
    "PROBE": 1000,
    "AUTHENTICATION": 10000,
})


__all__ = [
    "OPEN_STATUSES",
    "CLOSED_STATUSES",
    "ALLOWED_STATUSES",
    "STATUS_GROUPS",
    "OPEN_STATUSES_JQL_PATTERN",
    "CLOSED_STATUSES_JQL_PATTERN",
    "JQL_PATTERNS",
    "TIMEOUTS",
]
