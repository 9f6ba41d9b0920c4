"""Deterministic Raffia query builder.

The builder converts a validated `NormalizedInput` into the three lookup queries used to chase an
anchor leak: a Sherlog data-id URL, the `anchorData` Spanner query and the partitioned
`outlinksInfo` Spanner query.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.anchors.encoding import str_to_byte_array, to_hex
from src.anchors.schema import NormalizedInput
from src.raffia.templates import (
    ANCHOR_DATA_RECIPE,
    ANCHOR_DATA_SQL_TEMPLATE,
    OUTLINK_SECONDARY_KEY_SEPARATOR,
    OUTLINKS_INFO_SQL_TEMPLATE,
    REPORT_SEPARATOR,
    REPORT_TEMPLATE,
    SHERLOG_URL_TEMPLATE,
)


@dataclass(frozen=True)
class QueryReport:
    """The three generated queries."""

    sherlog_query: str
    anchor_data_query: str
    outlinks_info_query: str

    def render(self) -> str:
        """Render the queries as one human-readable block (no trailing newline)."""

        return REPORT_TEMPLATE.format(
            separator=REPORT_SEPARATOR,
            sherlog=self.sherlog_query,
            anchor_data=self.anchor_data_query,
            outlinks_info=self.outlinks_info_query,
        )


def outlinks_secondary_key(ecn: str, anchor_identifier_unescaped: str) -> str:
    """Return the hex-encoded `outlinksInfo` secondary key for an ECN and anchor identifier."""

    return to_hex(
        str_to_byte_array(f"{ecn}{OUTLINK_SECONDARY_KEY_SEPARATOR}{anchor_identifier_unescaped}")
    )


def build_sherlog_query(source_url: str) -> str:
    return SHERLOG_URL_TEMPLATE.format(source_url=source_url)


def build_anchor_data_query(ecn: str, anchor_identifier: str) -> str:
    # The raw (still escaped) identifier goes into the byte literal; span sql resolves the escapes.
    return ANCHOR_DATA_SQL_TEMPLATE.format(
        recipe=ANCHOR_DATA_RECIPE,
        ecn=ecn,
        anchor_identifier=anchor_identifier,
    )


def build_outlinks_info_query(corpus: str, source_url: str, secondary_key: str, split: int) -> str:
    return OUTLINKS_INFO_SQL_TEMPLATE.format(
        corpus=corpus,
        source_url=source_url,
        secondary_key=secondary_key,
        split=split,
    )


def build_report(normalized: NormalizedInput, shard: int) -> QueryReport:
    """Build all three queries for a validated input and its resolved `outlinksInfo` shard."""

    if not 0 <= shard < normalized.shard_count:
        raise ValueError(f"shard must be in [0, {normalized.shard_count}), got {shard}")

    secondary_key = outlinks_secondary_key(normalized.ecn, normalized.anchor_identifier_unescaped)
    return QueryReport(
        sherlog_query=build_sherlog_query(normalized.source_url),
        anchor_data_query=build_anchor_data_query(normalized.ecn, normalized.anchor_identifier),
        outlinks_info_query=build_outlinks_info_query(
            normalized.corpus.value,
            normalized.source_url,
            secondary_key,
            shard,
        ),
    )
