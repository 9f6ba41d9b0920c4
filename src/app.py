"""Application composition root.

This module wires configuration into the container shared by the bot handlers.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.config.settings import Settings


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings

    @property
    def default_corpus(self) -> str:
        return self.settings.default_corpus


def create_app(settings: Settings) -> App:
    """Create the application container."""

    return App(settings=settings)
