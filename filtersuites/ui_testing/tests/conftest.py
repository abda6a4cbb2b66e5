"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for the live end-to-end suite.

Key Features:
- Settings resolved once per session
- Every test starts from the saved session artifact (already logged in)
- Page Object fixtures for all pages
- Screenshot capture on failure

The suite is skipped, not failed, when configuration or the session artifact
is missing. Produce the artifact with:
    pytest --bootstrap-session ...   or   python run_tests.py --suite ui

================================================================================
"""

from pathlib import Path
from typing import AsyncGenerator

import allure
import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import Page

from filter_tools.report_tools import attach_screenshot
from filtersuites.ui_testing.framework.browser_manager import BrowserManager
from filtersuites.ui_testing.framework.config_loader import Settings
from filtersuites.ui_testing.framework.exceptions import ConfigurationError
from filtersuites.ui_testing.pages import FiltersPage, HomePage


# ================================================================================
# Settings and Session Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_settings() -> Settings:
    """Resolved run settings; skips the UI suite when they are incomplete."""
    try:
        return Settings.load()
    except ConfigurationError as e:
        pytest.skip(f"UI settings unavailable: {e}")


@pytest.fixture(scope="session")
def session_artifact(ui_settings: Settings) -> Path:
    """Path of the saved session; skips when the bootstrap has not run."""
    path = Path(ui_settings.storage_state_path)
    if not path.exists():
        pytest.skip(
            f"Session artifact not found at {path}. "
            f"Run with --bootstrap-session first."
        )
    return path


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture
async def browser_manager(
    ui_settings: Settings,
    session_artifact: Path,
) -> AsyncGenerator[BrowserManager, None]:
    """
    Function-scoped browser manager restoring the saved session.

    Each test gets its own browser and event loop, so tests never share
    cookies or page state.
    """
    async with BrowserManager(ui_settings, restore_auth=True) as manager:
        yield manager


@pytest_asyncio.fixture
async def page(
    browser_manager: BrowserManager,
    request: pytest.FixtureRequest,
) -> AsyncGenerator[Page, None]:
    """
    Fresh authenticated page.

    Attaches a full-page screenshot to the Allure report when the test body
    failed.
    """
    page = await browser_manager.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        logger.warning(f"Test failed, capturing screenshot: {request.node.nodeid}")
        await attach_screenshot(page, name="failure_screenshot")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def home_page(page: Page, ui_settings: Settings) -> HomePage:
    """Provides HomePage instance."""
    return HomePage(page, ui_settings)


@pytest.fixture
def filters_page(page: Page, ui_settings: Settings) -> FiltersPage:
    """Provides FiltersPage instance."""
    return FiltersPage(page, ui_settings)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report as `item.rep_<phase>` for fixture teardown."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(autouse=True)
def _allure_environment(ui_settings: Settings):
    """Label every UI test with the browser it ran in."""
    allure.dynamic.parameter("browser", ui_settings.browser_type)
