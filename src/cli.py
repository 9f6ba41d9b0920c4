"""Command-line entry point for generating anchor leak queries.

Example:
    python -m src.cli --ecn 123456789012345678901234 --anchor-id abcdefghijkl --url http://example.com
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from src.anchors.errors import OperationError
from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.operation import DESCRIPTOR, extract_anchor_leak_info

logger = logging.getLogger(__name__)


def _build_parser(default_corpus: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=DESCRIPTOR.description)
    parser.add_argument("--ecn", required=True, help="ECN (exactly 24 characters).")
    parser.add_argument(
        "--anchor-id",
        required=True,
        help="Anchor identifier; may contain escapes such as \\x00 (12 characters once resolved).",
    )
    parser.add_argument("--url", required=True, help="Source URL, used verbatim.")
    parser.add_argument(
        "--corpus",
        default=default_corpus,
        help=f"Corpus: ramsey (mobile) / web (desktop). Default: {default_corpus}.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO).")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the report for the given arguments.

    Returns:
        Process exit code: 0 on success, 1 if the arguments are rejected.
    """

    load_dotenv(".env")
    settings = load_settings()

    args = _build_parser(settings.default_corpus).parse_args(argv)
    configure_logging(args.log_level or settings.log_level)

    try:
        report = extract_anchor_leak_info(args.ecn, args.anchor_id, args.url, args.corpus)
    except OperationError as exc:
        logger.info("rejected reason=%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.info("handled selector=%s", args.corpus)
    print(report.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
