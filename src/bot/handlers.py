"""aiogram message handlers.

Hard contract: every incoming message produces exactly one reply. Valid arguments get the query
report, rejected arguments get the validation message verbatim, anything unparseable gets the usage
text and internal failures get a generic message (details are only logged).
"""

from __future__ import annotations

import logging
from time import monotonic

from aiogram.types import Message

from src.anchors.errors import OperationError
from src.app import App
from src.operation import extract_anchor_leak_info

logger = logging.getLogger(__name__)

USAGE_TEXT = (
    "Send: ECN ANCHOR_ID SOURCE_URL [CORPUS]\n"
    "ECN: 24 characters\n"
    "ANCHOR_ID: 12 characters once escapes such as \\x00 are resolved (write spaces as \\x20)\n"
    "CORPUS: ramsey (mobile) / web (desktop)"
)
INTERNAL_ERROR_TEXT = "Internal error"


def _is_command_text(text: str) -> bool:
    return text.lstrip().startswith("/")


def parse_arguments(text: str, default_corpus: str) -> tuple[str, str, str, str] | None:
    """Split message text into the four operation arguments.

    Returns:
        The arguments, or `None` if the message does not hold three or four fields.
    """

    fields = text.split()
    if len(fields) == 3:
        return fields[0], fields[1], fields[2], default_corpus
    if len(fields) == 4:
        return fields[0], fields[1], fields[2], fields[3]
    return None


async def handle_message(message: Message, app: App) -> None:
    """Handle any incoming Telegram message and reply exactly once."""

    started = monotonic()
    reply = USAGE_TEXT

    # noinspection PyBroadException
    try:
        raw_text = message.text or message.caption or ""
        arguments = None
        if raw_text.strip() and not _is_command_text(raw_text):
            arguments = parse_arguments(raw_text, app.default_corpus)

        if arguments is not None:
            report = extract_anchor_leak_info(*arguments)
            reply = report.render()

            latency_ms = int((monotonic() - started) * 1000)
            logger.info("handled selector=%s latency_ms=%d", arguments[3], latency_ms)
    except OperationError as exc:
        # Rejected input: the message is meant for the user.
        reply = str(exc)
        latency_ms = int((monotonic() - started) * 1000)
        logger.info("rejected reason=%s latency_ms=%d", exc, latency_ms)
    except Exception:
        logger.exception("handler failed")
        reply = INTERNAL_ERROR_TEXT

    await message.answer(reply)
