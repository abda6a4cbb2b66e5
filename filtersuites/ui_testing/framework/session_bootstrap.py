"""
================================================================================
Session Bootstrap (Global Setup)
================================================================================

Logs in once and persists the authenticated session so every later test
process starts pre-authenticated.

Protocol:
    1. Resolve BASE_URL / USERNAME / PASSWORD (all missing keys reported
       together, before any browser is launched)
    2. Launch a fresh, isolated browser context
    3. Two-step login (username submit, then password submit)
    4. Wait for the authenticated URL pattern (AUTHENTICATION timeout)
    5. Save cookies + per-origin storage to the session artifact
    6. Release all browser resources
    7. Verify the artifact exists on disk

Re-running overwrites the artifact. The previous file is removed before the
browser starts, so a stale artifact never satisfies step 7.

Usage:
    python -m filtersuites.ui_testing.framework.session_bootstrap

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Callable, Optional

from filelock import FileLock, Timeout
from loguru import logger

from filter_tools.common import init_logger
from filtersuites.ui_testing.pages.login_page import LoginPage

from .browser_manager import BrowserManager
from .config_loader import Settings
from .exceptions import SessionArtifactError, SessionPersistenceError
from .session_artifact import load_session_artifact, summarize_session_artifact


# Seconds to wait for another bootstrap on this host to finish
BOOTSTRAP_LOCK_TIMEOUT = 120


class SessionBootstrap:
    """
    One-time authentication flow producing the session artifact.

    Usage:
        >>> settings = Settings.load()
        >>> artifact = asyncio.run(SessionBootstrap(settings).run())
    """

    def __init__(
        self,
        settings: Settings,
        browser_manager_factory: Callable[[Settings], BrowserManager] = BrowserManager,
    ):
        """
        Args:
            settings: Resolved settings (credentials already validated)
            browser_manager_factory: Builds the BrowserManager for the login run
        """
        self.settings = settings
        self._browser_manager_factory = browser_manager_factory

    @property
    def artifact_path(self) -> Path:
        return Path(self.settings.storage_state_path)

    @property
    def lock_path(self) -> Path:
        return self.artifact_path.with_name(self.artifact_path.name + ".lock")

    async def run(self) -> Path:
        """
        Execute the bootstrap protocol.

        Returns:
            Path of the written session artifact

        Raises:
            AuthenticationTimeoutError: Login never reached the authenticated URL
            SessionPersistenceError: Login succeeded but no usable artifact was written
        """
        artifact = self.artifact_path
        artifact.parent.mkdir(parents=True, exist_ok=True)

        try:
            with FileLock(str(self.lock_path), timeout=BOOTSTRAP_LOCK_TIMEOUT):
                self._discard_previous(artifact)
                await self._authenticate_and_save(artifact)
                self._verify_persisted(artifact)
        except Timeout as e:
            raise SessionPersistenceError(
                f"Another session bootstrap holds {self.lock_path}; "
                f"gave up after {BOOTSTRAP_LOCK_TIMEOUT}s"
            ) from e

        logger.info(f"✅ Authentication successful - session saved to {artifact}")
        return artifact

    def _discard_previous(self, artifact: Path) -> None:
        if artifact.exists():
            artifact.unlink()
            logger.debug(f"Removed previous session artifact: {artifact}")

    async def _authenticate_and_save(self, artifact: Path) -> None:
        async with self._browser_manager_factory(self.settings) as manager:
            context = await manager.new_context()
            page = await context.new_page()

            login_page = LoginPage(page, self.settings)
            await login_page.login(self.settings.username, self.settings.password)
            await login_page.wait_for_authenticated()

            await manager.save_auth_state(context, artifact)

    def _verify_persisted(self, artifact: Path) -> None:
        if not artifact.exists():
            raise SessionPersistenceError(
                f"Failed to save authentication session ({artifact}). "
                f"Login succeeded but the session file was not written."
            )
        try:
            data = load_session_artifact(artifact)
        except SessionArtifactError as e:
            raise SessionPersistenceError(f"Session artifact is unusable: {e}") from e

        summary = summarize_session_artifact(data)
        logger.info(
            f"Session artifact holds {len(summary['cookies'])} cookies "
            f"for {len(summary['origins'])} origins"
        )


def run_global_setup(settings: Optional[Settings] = None) -> Path:
    """
    Synchronous entry point for runners and pytest hooks.

    Configuration is resolved here, so a missing key fails before any
    browser is launched.
    """
    settings = settings or Settings.load()
    return asyncio.run(SessionBootstrap(settings).run())


def main() -> int:
    init_logger()
    run_global_setup()
    return 0


__all__ = [
    "SessionBootstrap",
    "run_global_setup",
    "BOOTSTRAP_LOCK_TIMEOUT",
]


if __name__ == "__main__":
    sys.exit(main())
