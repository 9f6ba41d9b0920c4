"""Pytest configuration.

The repository uses a flat `src/` layout. This conftest ensures tests can import from the `src.*`
namespace when running `pytest` locally without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a developer's `.env` and environment out of settings-driven tests."""

    monkeypatch.chdir(tmp_path)
    for name in ("TELEGRAM_BOT_TOKEN", "DEFAULT_CORPUS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
