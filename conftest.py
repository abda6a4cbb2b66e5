"""
Repository-level pytest configuration.

Why this exists:
  - Expose the repo root to fixtures
  - Route loguru output through one configured sink for every run
  - Offer `--bootstrap-session`, which logs in once before any test is
    collected and writes the session artifact the UI suite restores

Important:
  No credentials are defaulted here. BASE_URL / USERNAME / PASSWORD come from
  the environment or a local `.env` file (see `.env.example`).
"""

from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from filter_tools.common import init_logger


def pytest_addoption(parser):
    group = parser.getgroup("filtersuites")
    group.addoption(
        "--bootstrap-session",
        action="store_true",
        default=False,
        help="Log in once and write the session artifact before the run",
    )


def pytest_sessionstart(session):
    init_logger()

    # xdist workers carry `workerinput`; only the controller logs in
    if not session.config.getoption("--bootstrap-session"):
        return
    if hasattr(session.config, "workerinput"):
        return

    from filtersuites.ui_testing.framework.session_bootstrap import run_global_setup

    artifact = run_global_setup()
    logger.info(f"Session bootstrap finished: {artifact}")


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
