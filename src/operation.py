"""Extract Anchor Leak Info operation.

This module is the composition point of the core: validator -> shard resolver -> query builder. It
also exposes the static descriptor a host uses to render the operation's arguments.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from src.anchors.errors import OperationError
from src.anchors.validator import validate
from src.raffia.builder import QueryReport, build_report
from src.raffia.shard import outlinks_info_shard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArgumentDescriptor:
    """One host-rendered operation argument."""

    name: str
    type: str = "string"
    value: str = ""


@dataclass(frozen=True)
class OperationDescriptor:
    """Static metadata describing the operation to a host."""

    name: str
    module: str
    description: str
    info_url: str
    input_type: str
    output_type: str
    args: tuple[ArgumentDescriptor, ...]


DEFAULT_CORPUS_SELECTOR = "ramsey"

DESCRIPTOR = OperationDescriptor(
    name="Extract Anchor Leak Info",
    module="Default",
    description=(
        "Convert Anchor Leak Info (desktop_doc_info / mobile_doc_info / sherlog log) to spanner queries."
    ),
    info_url="",
    input_type="string",
    output_type="string",
    args=(
        ArgumentDescriptor(name="ECN"),
        ArgumentDescriptor(name="Anchor Identifier"),
        ArgumentDescriptor(name="Source URL"),
        ArgumentDescriptor(name="Corpus: ramsey (mobile) / web (desktop)", value=DEFAULT_CORPUS_SELECTOR),
    ),
)


def extract_anchor_leak_info(
        ecn: str,
        anchor_identifier: str,
        source_url: str,
        corpus_selector: str = DEFAULT_CORPUS_SELECTOR,
) -> QueryReport:
    """Validate the arguments and build the three Raffia queries.

    Raises:
        OperationError: If any argument fails validation. No queries are built in that case.
    """

    normalized = validate(ecn, anchor_identifier, source_url, corpus_selector)
    shard = outlinks_info_shard(normalized.source_url, normalized.shard_count)
    return build_report(normalized, shard)


def run_operation(args: Sequence[str]) -> str:
    """Run the operation the way a host does: positional string arguments in, report text out."""

    if len(args) != len(DESCRIPTOR.args):
        raise OperationError(
            f"{DESCRIPTOR.name} expects {len(DESCRIPTOR.args)} arguments, got {len(args)}"
        )

    ecn, anchor_identifier, source_url, corpus_selector = args
    return extract_anchor_leak_info(ecn, anchor_identifier, source_url, corpus_selector).render()
