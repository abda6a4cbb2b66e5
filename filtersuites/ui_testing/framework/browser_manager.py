"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Context isolation (separate cookies / storage per context)
    - Session artifact save (bootstrap) and restore (test workers)
    - Browser configuration presets

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
)

from .config_loader import Settings


class BrowserManager:
    """
    Manages a browser instance and its contexts.

    Usage:
        async with BrowserManager(settings) as manager:
            page = await manager.new_page()
            await page.goto(settings.base_url)

        # Restore a saved session (already logged in)
        async with BrowserManager(settings, restore_auth=True) as manager:
            page = await manager.new_page()
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        settings: Settings,
        restore_auth: bool = False,
    ):
        """
        Initialize browser manager.

        Args:
            settings: Resolved run settings (browser type, headless, artifact path)
            restore_auth: Start every new context from the saved session artifact
        """
        self.settings = settings
        self.restore_auth = restore_auth

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()

        browser_launcher = getattr(self._playwright, self.settings.browser_type)
        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.settings.headless,
        }

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.settings.browser_type} "
            f"(headless={self.settings.headless})"
        )

    async def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        for context in self._contexts:
            try:
                await context.close()
            except PlaywrightError as e:
                # Already closed together with its browser
                logger.debug(f"Context close skipped: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}

        if self.restore_auth:
            context_options["storage_state"] = str(self.settings.storage_state_path)
            logger.debug(f"Restoring session from: {self.settings.storage_state_path}")

        context = await self._browser.new_context(**context_options)
        self._contexts.append(context)

        return context

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context

        Returns:
            New Page
        """
        if context is None:
            context = await self.new_context(**context_options)

        return await context.new_page()

    async def save_auth_state(
        self,
        context: BrowserContext,
        path: Optional[Path] = None,
    ) -> Path:
        """
        Save cookies and per-origin storage of `context` to the session artifact.

        Overwrites any existing file; the result is never merged.

        Args:
            context: Authenticated context
            path: Target file (settings.storage_state_path by default)

        Returns:
            Path written
        """
        path = Path(path or self.settings.storage_state_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        await context.storage_state(path=str(path))
        logger.info(f"Authentication state saved to: {path}")
        return path

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


__all__ = [
    "BrowserManager",
]
