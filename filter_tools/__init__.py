"""
================================================================================
Filter Tools
================================================================================

Supporting utilities for the issue filter automation suites.

Modules:
    - common: Shared configuration and logging utilities
    - report_tools: Allure attachment helpers

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
