"""
Unit test fixtures: an empty FakePage and settings pointing at tmp_path.
"""

from pathlib import Path

import pytest

from filtersuites.ui_testing.framework.config_loader import Settings
from filtersuites.unit.fakes import FakeBrowserManager, FakePage


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        base_url="https://example.atlassian.net",
        username="qa@example.com",
        password="s3cret",
        storage_state_path=tmp_path / "auth" / "storageState.json",
    )


@pytest.fixture(autouse=True)
def _reset_fake_browsers():
    FakeBrowserManager.instances.clear()
    yield
    FakeBrowserManager.instances.clear()
