"""Tests for strict backslash escape resolution."""

from __future__ import annotations

import pytest

from src.anchors.errors import EscapeSequenceError, OperationError
from src.anchors.escapes import parse_escaped_chars


def test_plain_text_is_unchanged() -> None:
    assert parse_escaped_chars("abcdefghijkl") == "abcdefghijkl"
    assert parse_escaped_chars("") == ""


def test_hex_escapes_resolve_to_single_characters() -> None:
    assert parse_escaped_chars("\\x41\\x42") == "AB"
    assert parse_escaped_chars("\\x00\\xff") == "\x00\xff"
    assert parse_escaped_chars("\\xAb") == "\xab"


def test_simple_and_control_escapes() -> None:
    assert parse_escaped_chars("a\\\\b") == "a\\b"
    assert parse_escaped_chars("\\'\\\"") == "'\""
    assert parse_escaped_chars("\\n\\r\\t\\b\\f\\v\\a") == "\n\r\t\b\f\v\a"


def test_octal_escapes() -> None:
    assert parse_escaped_chars("\\0") == "\x00"
    assert parse_escaped_chars("\\101") == "A"
    assert parse_escaped_chars("\\377") == "\xff"
    # A leading 4-7 digit only takes one more digit: \477 is \47 followed by "7".
    assert parse_escaped_chars("\\477") == "'7"


def test_unicode_escapes() -> None:
    assert parse_escaped_chars("\\u00e9") == "é"
    assert parse_escaped_chars("\\u{1F600}") == "\U0001F600"


@pytest.mark.parametrize(
    ("text", "position", "detail"),
    [
        ("abc\\", 3, "trailing backslash"),
        ("\\x4", 0, "\\x must be followed by exactly two hex digits"),
        ("ab\\xzz", 2, "\\x must be followed by exactly two hex digits"),
        ("\\u12", 0, "\\u must be followed by four hex digits or {1-6 hex digits}"),
        ("\\q", 0, "unknown escape '\\q'"),
    ],
)
def test_malformed_escapes_are_rejected(text: str, position: int, detail: str) -> None:
    with pytest.raises(EscapeSequenceError) as exc_info:
        parse_escaped_chars(text)

    assert exc_info.value.position == position
    assert exc_info.value.detail == detail
    assert str(exc_info.value) == f"Invalid escape sequence at position {position}: {detail}"


def test_out_of_range_code_point_is_rejected() -> None:
    with pytest.raises(EscapeSequenceError, match="U\\+110000 is out of range"):
        parse_escaped_chars("\\u{110000}")


def test_escape_errors_are_operation_errors() -> None:
    with pytest.raises(OperationError):
        parse_escaped_chars("\\")
