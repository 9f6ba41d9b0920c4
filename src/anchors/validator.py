"""Structural validation of raw operation arguments.

Checks run in a fixed order and stop at the first violation:
    1) anchor identifier length (after escape resolution),
    2) ECN length (raw, never unescaped),
    3) corpus selector (exact match, case-sensitive).
"""

from __future__ import annotations

import logging

from src.anchors.errors import AnchorIdentifierLengthError, EcnLengthError, UnknownCorpusError
from src.anchors.escapes import parse_escaped_chars
from src.anchors.schema import (
    ACCEPTED_SELECTORS,
    CORPUS_SHARD_COUNTS,
    EXPECTED_ANCHOR_ID_LENGTH,
    EXPECTED_ECN_LENGTH,
    SELECTOR_TO_CORPUS,
    Corpus,
    CorpusSelector,
    NormalizedInput,
    RawInput,
)

logger = logging.getLogger(__name__)


def resolve_corpus(selector: str) -> tuple[Corpus, int]:
    """Map a corpus selector token to its corpus and shard count.

    Raises:
        UnknownCorpusError: If `selector` is not exactly one of the accepted tokens.
    """

    if selector not in ACCEPTED_SELECTORS:
        raise UnknownCorpusError(selector, ACCEPTED_SELECTORS)

    corpus = SELECTOR_TO_CORPUS[CorpusSelector(selector)]
    return corpus, CORPUS_SHARD_COUNTS[corpus]


def validate(
        ecn: str,
        anchor_identifier: str,
        source_url: str,
        corpus_selector: str,
) -> NormalizedInput:
    """Validate raw arguments and return a `NormalizedInput`.

    Raises:
        EscapeSequenceError: If the anchor identifier contains a malformed escape.
        AnchorIdentifierLengthError: If the unescaped anchor identifier is not 12 characters.
        EcnLengthError: If the ECN is not 24 characters.
        UnknownCorpusError: If the corpus selector is not accepted.
    """

    anchor_identifier_unescaped = parse_escaped_chars(anchor_identifier)
    if len(anchor_identifier_unescaped) != EXPECTED_ANCHOR_ID_LENGTH:
        raise AnchorIdentifierLengthError(len(anchor_identifier_unescaped), EXPECTED_ANCHOR_ID_LENGTH)

    if len(ecn) != EXPECTED_ECN_LENGTH:
        raise EcnLengthError(len(ecn), EXPECTED_ECN_LENGTH)

    corpus, shard_count = resolve_corpus(corpus_selector)
    logger.debug("resolved selector=%s corpus=%s shards=%d", corpus_selector, corpus, shard_count)

    return NormalizedInput(
        ecn=ecn,
        anchor_identifier=anchor_identifier,
        anchor_identifier_unescaped=anchor_identifier_unescaped,
        source_url=source_url,
        corpus=corpus,
        shard_count=shard_count,
    )


def validate_raw(raw: RawInput) -> NormalizedInput:
    """Validate a `RawInput` (convenience wrapper)."""

    return validate(raw.ecn, raw.anchor_identifier, raw.source_url, raw.corpus_selector)
