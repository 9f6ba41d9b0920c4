"""Bot router composition.

A single catch-all message handler: the handler itself decides between report, error and usage
replies, so no aiogram filters are applied here.
"""

from __future__ import annotations

from aiogram import Router

from src.bot.handlers import handle_message


def create_router() -> Router:
    """Create the root router with the anchor leak handler registered."""

    root = Router(name="anchor_leak")
    root.message.register(handle_message)
    return root


router = create_router()
