"""Shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no config file selected."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TERMCLOCK_CONFIG", raising=False)
    return tmp_path
