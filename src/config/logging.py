"""Logging configuration for the CLI and the bot service."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _coerce_level(level: str | int | None) -> int:
    """Return a numeric level from an explicit value, `LOG_LEVEL` or `INFO` (in that order).

    Unknown level names fall back to `INFO` instead of failing startup.
    """

    candidate = level if level is not None else os.getenv("LOG_LEVEL") or "INFO"
    if isinstance(candidate, int):
        return candidate

    numeric = logging.getLevelName(candidate.strip().upper())
    if isinstance(numeric, int):
        return numeric
    return logging.INFO


def configure_logging(level: str | int | None = None) -> int:
    """Configure Python logging for the process and return the effective level.

    Logs are for internal diagnostics only; generated queries are never written to them.
    """

    log_level = _coerce_level(level)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level)

    # Reduce noisy third-party logs by default.
    logging.getLogger("aiogram.event").setLevel(logging.WARNING)
    return log_level
