"""Tests for logging setup."""

import logging

import pytest

from termclock.shared.logging import QUIET_LOGGERS, setup_logging


@pytest.fixture
def restore_levels():
    saved = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_library_loggers_quieted(monkeypatch: pytest.MonkeyPatch, restore_levels):
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG)

    setup_logging("DEBUG")

    assert logging.getLogger("aiohttp").level == logging.WARNING
    assert logging.getLogger("asyncio").level == logging.WARNING


def test_log_file_target(monkeypatch: pytest.MonkeyPatch, restore_levels):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging("warning", "termclock.log")
    setup_logging("nonsense")

    assert calls[0]["filename"] == "termclock.log"
    assert calls[0]["level"] == logging.WARNING
    assert calls[1]["filename"] is None
    assert calls[1]["level"] == logging.INFO
