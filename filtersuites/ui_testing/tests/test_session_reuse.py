"""
Checks on the saved session itself: the artifact is well formed and a fresh
browser restored from it lands on the home page without a login form.
"""

import allure
import pytest

from filter_tools.report_tools import attach_session_summary
from filtersuites.ui_testing.framework.session_artifact import load_session_artifact


@allure.epic("UI Testing")
@allure.feature("Authentication")
@pytest.mark.auth
class TestSessionReuse:

    @allure.story("Session Artifact")
    @allure.title("Session artifact holds cookies and origin storage")
    @pytest.mark.P0
    @pytest.mark.smoke
    def test_session_artifact_structure(self, session_artifact):
        data = load_session_artifact(session_artifact, require_non_empty=True)

        assert all(cookie["name"] for cookie in data["cookies"])
        assert all(origin["origin"].startswith("http") for origin in data["origins"])
        assert attach_session_summary(session_artifact)

    @allure.story("Session Restore")
    @allure.title("Restored session opens the home page without logging in")
    @pytest.mark.P0
    @pytest.mark.asyncio
    async def test_restored_session_skips_login(self, home_page, page):
        await home_page.open()
        await home_page.wait_for_home_page_to_load()

        assert await page.locator("#password").count() == 0
