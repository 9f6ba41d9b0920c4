"""Tests for process logging configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from src.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_level() -> Iterator[None]:
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_explicit_level_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    assert configure_logging("debug") == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")

    assert configure_logging() == logging.WARNING


def test_unknown_level_falls_back_to_info() -> None:
    assert configure_logging("chatty") == logging.INFO
    assert configure_logging(logging.ERROR) == logging.ERROR


def test_aiogram_event_logs_are_quieted() -> None:
    configure_logging("DEBUG")

    assert logging.getLogger("aiogram.event").level == logging.WARNING
