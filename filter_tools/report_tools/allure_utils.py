"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used by the UI suites.

Features:
- JSON / text attachments
- Page screenshots
- Session artifact summary (cookie names and origins, never values)

================================================================================
"""

import json
from pathlib import Path
from typing import Any

import allure
from loguru import logger
from playwright.async_api import Page

from filtersuites.ui_testing.framework.exceptions import SessionArtifactError
from filtersuites.ui_testing.framework.session_artifact import (
    load_session_artifact,
    summarize_session_artifact,
)


def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


async def attach_screenshot(page: Page, name: str = "screenshot", full_page: bool = True) -> bytes:
    """
    Capture and attach a PNG screenshot of `page`.

    Returns:
        The PNG bytes
    """
    png = await page.screenshot(full_page=full_page)
    allure.attach(
        png,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )
    return png


def attach_session_summary(path: Path, name: str = "Session artifact") -> bool:
    """
    Attach a value-free summary of the session artifact.

    Returns:
        False when the artifact could not be read (logged, not raised)
    """
    try:
        data = load_session_artifact(path)
    except SessionArtifactError as e:
        logger.warning(f"Session artifact not attached: {e}")
        return False

    attach_json(summarize_session_artifact(data), name=name)
    return True


__all__ = [
    "attach_json",
    "attach_text",
    "attach_screenshot",
    "attach_session_summary",
]
