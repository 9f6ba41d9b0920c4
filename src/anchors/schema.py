"""Anchor leak input models (Pydantic).

`RawInput` mirrors the four operation arguments exactly as the host supplies them. `NormalizedInput`
is the contract between the validator and the Raffia query builder: once one exists, every
structural constraint has been checked.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator

EXPECTED_ECN_LENGTH = 24
EXPECTED_ANCHOR_ID_LENGTH = 12


class Corpus(StrEnum):
    """Raffia corpora that hold outlinks info."""

    websearch = "websearch"
    ramsey = "ramsey"


class CorpusSelector(StrEnum):
    """Tokens accepted for the corpus argument."""

    ramsey = "ramsey"
    mobile = "mobile"
    web = "web"
    desktop = "desktop"


# Order matters: it is the order listed in error messages.
ACCEPTED_SELECTORS: tuple[str, ...] = tuple(s.value for s in CorpusSelector)

SELECTOR_TO_CORPUS: dict[CorpusSelector, Corpus] = {
    CorpusSelector.desktop: Corpus.websearch,
    CorpusSelector.web: Corpus.websearch,
    CorpusSelector.mobile: Corpus.ramsey,
    CorpusSelector.ramsey: Corpus.ramsey,
}

CORPUS_SHARD_COUNTS: dict[Corpus, int] = {
    Corpus.websearch: 256,
    Corpus.ramsey: 128,
}


class RawInput(BaseModel):
    """The four operation arguments, unmodified."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ecn: str
    anchor_identifier: str
    source_url: str
    corpus_selector: str


class NormalizedInput(BaseModel):
    """Validated input ready for query construction."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ecn: str
    anchor_identifier: str
    anchor_identifier_unescaped: str
    source_url: str
    corpus: Corpus
    shard_count: int

    @model_validator(mode="after")
    def validate_invariants(self) -> NormalizedInput:
        """Re-check the length and corpus invariants established by the validator."""

        if len(self.ecn) != EXPECTED_ECN_LENGTH:
            raise ValueError(f"ecn must be exactly {EXPECTED_ECN_LENGTH} characters")
        if len(self.anchor_identifier_unescaped) != EXPECTED_ANCHOR_ID_LENGTH:
            raise ValueError(
                f"anchor_identifier_unescaped must be exactly {EXPECTED_ANCHOR_ID_LENGTH} characters"
            )
        if self.shard_count != CORPUS_SHARD_COUNTS[self.corpus]:
            raise ValueError(f"corpus={self.corpus} requires shard_count={CORPUS_SHARD_COUNTS[self.corpus]}")
        return self
