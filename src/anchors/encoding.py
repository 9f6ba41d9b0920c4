"""Legacy byte conversions shared by the shard resolver and the query builder."""

from __future__ import annotations

from collections.abc import Iterable


def str_to_byte_array(text: str) -> bytes:
    """Convert text to bytes using one byte per character.

    Each character is truncated to its low 8 bits. This is not a text encoding: it reproduces the
    byte layout the Raffia tooling uses for row and secondary keys. For ASCII input it is identical
    to `text.encode("ascii")`.
    """

    return bytes(ord(ch) & 0xFF for ch in text)


def to_hex(data: bytes | bytearray | memoryview | Iterable[int]) -> str:
    """Return lowercase hex digit pairs for `data`, without separators or prefix."""

    if not isinstance(data, (bytes, bytearray, memoryview)):
        data = bytes(data)
    return bytes(data).hex()
