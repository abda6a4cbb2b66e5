"""
================================================================================
Filter Suites
================================================================================

Test suites and UI automation framework for the issue filter workflow.

Packages:
    - ui_testing: locators, components, page objects, workflows and the
      live end-to-end suite
    - unit: offline tests driven by an in-memory page double

================================================================================
"""

__version__ = "1.0.0"
