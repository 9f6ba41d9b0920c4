r"""Backslash escape resolution for anchor identifiers.

Anchor identifiers are usually copied out of logs where non-printable bytes are written as `\xNN`.
Resolution is strict: anything that looks like an escape but is not a recognized one is rejected
instead of being passed through, so the length check that follows always measures real content.
"""

from __future__ import annotations

import re

from src.anchors.errors import EscapeSequenceError

_ESCAPE_RE = re.compile(
    r"\\(?:"
    r"(?P<simple>[\\'\"abtnvfr])"
    r"|(?P<octal>[0-3][0-7]{0,2}|[4-7][0-7]?)"
    r"|x(?P<hex>[0-9a-fA-F]{2})"
    r"|u\{(?P<braced>[0-9a-fA-F]{1,6})\}"
    r"|u(?P<unicode>[0-9a-fA-F]{4})"
    r")"
)

_SIMPLE_ESCAPES: dict[str, str] = {
    "\\": "\\",
    "'": "'",
    '"': '"',
    "a": "\a",
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "v": "\v",
    "f": "\f",
    "r": "\r",
}

_MAX_CODE_POINT = 0x10FFFF


def _describe_malformed(text: str, index: int) -> str:
    if index + 1 >= len(text):
        return "trailing backslash"

    marker = text[index + 1]
    if marker == "x":
        return "\\x must be followed by exactly two hex digits"
    if marker == "u":
        return "\\u must be followed by four hex digits or {1-6 hex digits}"
    return f"unknown escape '\\{marker}'"


def _resolve(match: re.Match[str], index: int) -> str:
    if match.group("simple") is not None:
        return _SIMPLE_ESCAPES[match.group("simple")]
    if match.group("octal") is not None:
        return chr(int(match.group("octal"), 8))
    if match.group("hex") is not None:
        return chr(int(match.group("hex"), 16))
    if match.group("unicode") is not None:
        return chr(int(match.group("unicode"), 16))

    code_point = int(match.group("braced"), 16)
    if code_point > _MAX_CODE_POINT:
        raise EscapeSequenceError(index, f"code point U+{code_point:X} is out of range")
    return chr(code_point)


def parse_escaped_chars(text: str) -> str:
    """Resolve backslash escape sequences in `text`.

    Supported escapes:
        - `\\\\`, `\\'`, `\\"` and the C control escapes `\\a \\b \\t \\n \\v \\f \\r`.
        - Octal `\\0` to `\\377` (one to three digits).
        - `\\xHH`, `\\uHHHH` and `\\u{H...}` (up to six hex digits).

    Raises:
        EscapeSequenceError: On a trailing backslash, an incomplete `\\x`/`\\u` escape, an
            out-of-range code point or an unknown escape letter.
    """

    parts: list[str] = []
    pos = 0
    while True:
        index = text.find("\\", pos)
        if index < 0:
            parts.append(text[pos:])
            return "".join(parts)

        parts.append(text[pos:index])
        match = _ESCAPE_RE.match(text, index)
        if match is None:
            raise EscapeSequenceError(index, _describe_malformed(text, index))

        parts.append(_resolve(match, index))
        pos = match.end()
