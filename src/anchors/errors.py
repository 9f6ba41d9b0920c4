"""Error taxonomy for the anchor leak operation.

Every error message is plain text meant to be shown to the end user as-is.
"""

from __future__ import annotations

from collections.abc import Sequence


class OperationError(ValueError):
    """Base class for all user-facing operation failures."""


class ValidationError(OperationError):
    """Raised when raw input violates a structural constraint."""


class EscapeSequenceError(ValidationError):
    """Raised when an escaped string contains a malformed escape sequence."""

    def __init__(self, position: int, detail: str) -> None:
        self.position = position
        self.detail = detail
        super().__init__(f"Invalid escape sequence at position {position}: {detail}")


class AnchorIdentifierLengthError(ValidationError):
    """Raised when the unescaped anchor identifier has the wrong length."""

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"length(Anchor Identifier)={actual}, but it must be {expected}")


class EcnLengthError(ValidationError):
    """Raised when the ECN has the wrong length."""

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"length(ECN)={actual}, but it must be {expected}")


class UnknownCorpusError(ValidationError):
    """Raised when the corpus selector is not one of the accepted tokens."""

    def __init__(self, value: str, accepted: Sequence[str]) -> None:
        self.value = value
        self.accepted = tuple(accepted)
        super().__init__(f"Corpus={value}, but it must be one of {{{', '.join(self.accepted)}}}")
