"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Two-stage login form: the username is submitted first, then the password is
submitted against the same button.

The page is composed of components only; it exposes no click/fill helpers of
its own.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from filtersuites.ui_testing.components import FormInputComponent, NavigationComponent
from filtersuites.ui_testing.framework.config_loader import Settings
from filtersuites.ui_testing.framework.constants import TIMEOUTS
from filtersuites.ui_testing.framework.exceptions import AuthenticationTimeoutError
from filtersuites.ui_testing.framework.locator import ElementLocator


class LoginPage:
    """Login page object (async)."""

    USERNAME_INPUT = ElementLocator.by_css("#username")
    PASSWORD_INPUT = ElementLocator.by_css("#password")
    SUBMIT_BUTTON = ElementLocator.by_css("#login-submit")

    def __init__(self, page: Page, settings: Settings):
        self.page = page
        self.settings = settings

        self.username_input = FormInputComponent(page, self.USERNAME_INPUT)
        self.password_input = FormInputComponent(page, self.PASSWORD_INPUT)
        self.login_button = NavigationComponent(page, self.SUBMIT_BUTTON)

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login surface."""
        await self.page.goto(self.settings.base_url, timeout=TIMEOUTS["PAGE_LOAD"])
        return self

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        """
        Submit credentials through the two-step form.

        Args:
            username: Account name, submitted first
            password: Account password, submitted second
        """
        await self.open()

        await self.username_input.fill(username)
        await self.login_button.click()

        # The password field is rendered only after the first submit
        await self.password_input.wait_until_visible("PAGE_LOAD")
        await self.password_input.fill(password)
        await self.login_button.click()
        logger.info(f"Credentials submitted for: {username}")

    @allure.step("Wait for authenticated landing page")
    async def wait_for_authenticated(self) -> None:
        """
        Block until the URL matches `settings.auth_url_pattern`.

        Raises:
            AuthenticationTimeoutError: Pattern not matched within AUTHENTICATION
        """
        timeout_ms = TIMEOUTS["AUTHENTICATION"]
        try:
            await self.page.wait_for_url(self.settings.auth_url_pattern, timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise AuthenticationTimeoutError(
                f"Login did not reach '{self.settings.auth_url_pattern}' within "
                f"{timeout_ms} ms. Check the credentials and BASE_URL.",
                timeout_ms=timeout_ms,
            ) from exc
        logger.info(f"Authenticated, landed on: {self.page.url}")
