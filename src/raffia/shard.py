"""Raffia directory number (shard) resolution.

Raffia spreads a recipe's rows over a fixed number of directories. The directory for a row is the
Adler-32 checksum of `<recipe prefix><row key>` modulo the corpus shard count.

The modulo-65521 reduction is applied on every byte. An older variant of this routine accumulated
without reducing and relied on 32-bit truncation; it agrees only while both accumulators stay below
65521 and is not reproduced here. The per-byte form is exactly what `zlib.adler32` computes.
"""

from __future__ import annotations

import logging
import zlib
from collections.abc import Iterable

from src.anchors.encoding import str_to_byte_array

logger = logging.getLogger(__name__)

MOD_ADLER = 65521
OUTLINKS_INFO_PREFIX = "outlinksInfo"
DEFAULT_SHARDS = 256

BytesLike = bytes | bytearray | memoryview


class RollingChecksum:
    """Streaming Adler-32 over successive chunks.

    Feeding chunks one by one yields the same value as a single pass over their concatenation. An
    empty stream has the value `1` (`a=1, b=0`).
    """

    def __init__(self) -> None:
        self._value = zlib.adler32(b"")

    def update(self, chunk: BytesLike) -> RollingChecksum:
        self._value = zlib.adler32(chunk, self._value)
        return self

    @property
    def a(self) -> int:
        return self._value & 0xFFFF

    @property
    def b(self) -> int:
        return (self._value >> 16) & 0xFFFF

    @property
    def value(self) -> int:
        """The checksum as an unsigned 32-bit integer (`(b << 16) | a`)."""

        return self._value & 0xFFFFFFFF


def _as_bytes(data: BytesLike | Iterable[int]) -> BytesLike:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return data
    return bytes(data)


def resolve_shard(byte_sequence: BytesLike | Iterable[int], shard_count: int) -> int:
    """Return the shard for `byte_sequence` in `[0, shard_count)`.

    Raises:
        ValueError: If `shard_count` is not a positive integer or the sequence holds values outside
            `0..255`.
    """

    if isinstance(shard_count, bool) or not isinstance(shard_count, int) or shard_count <= 0:
        raise ValueError(f"shard_count must be a positive integer, got {shard_count!r}")

    checksum = RollingChecksum().update(_as_bytes(byte_sequence)).value
    return checksum % shard_count


def raffia_directory_num(data: BytesLike | Iterable[int], shards: int = DEFAULT_SHARDS) -> int:
    """Convert data (usually a recipe prefix followed by a row key) to a Raffia directory number."""

    return resolve_shard(data, shards)


def outlinks_info_shard(source_url: str, shard_count: int) -> int:
    """Return the `outlinksInfo` split for `source_url`.

    Depends only on the source URL and the shard count.
    """

    shard = resolve_shard(str_to_byte_array(f"{OUTLINKS_INFO_PREFIX}{source_url}"), shard_count)
    logger.debug("outlinksInfo split=%d shards=%d", shard, shard_count)
    return shard
