"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test from an empty directory so a developer's .env is never read."""
    monkeypatch.chdir(tmp_path)
