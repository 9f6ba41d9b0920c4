"""Tests for Raffia directory number (shard) resolution."""

from __future__ import annotations

import pytest

from src.raffia.shard import (
    MOD_ADLER,
    RollingChecksum,
    outlinks_info_shard,
    raffia_directory_num,
    resolve_shard,
)


def _reference_checksum(data: bytes) -> int:
    a, b = 1, 0
    for x in data:
        a = (a + x) % MOD_ADLER
        b = (b + a) % MOD_ADLER
    return (b << 16) | a


def _unreduced_checksum(data: bytes) -> int:
    a, b = 1, 0
    for x in data:
        a += x
        b += a
    return ((b << 16) | a) & 0xFFFFFFFF


def test_known_checksums() -> None:
    assert RollingChecksum().update(b"abc").value == 0x024D0127
    assert RollingChecksum().update(b"outlinksInfohttp://example.com").value == 3135703991


def test_checksum_matches_per_byte_reduction() -> None:
    data = bytes(range(256)) * 40
    assert RollingChecksum().update(data).value == _reference_checksum(data)


def test_long_input_differs_from_unreduced_variant() -> None:
    data = b"z" * 1000
    checksum = RollingChecksum().update(data).value

    assert checksum == 4059946144
    assert _unreduced_checksum(data) == 3144801425
    assert checksum != _unreduced_checksum(data)


def test_streaming_matches_single_pass() -> None:
    data = b"outlinksInfo" + b"https://www.example.org/some/long/path?q=1" * 50
    rolling = RollingChecksum()
    for start in range(0, len(data), 7):
        rolling.update(data[start:start + 7])

    assert rolling.value == RollingChecksum().update(data).value
    assert rolling.value == (rolling.b << 16) | rolling.a


def test_empty_input_has_checksum_one() -> None:
    assert RollingChecksum().value == 1
    assert resolve_shard(b"", 128) == 1
    assert resolve_shard(b"", 256) == 1


@pytest.mark.parametrize("shard_count", [128, 256])
def test_shard_is_within_range(shard_count: int) -> None:
    for i in range(300):
        shard = resolve_shard(f"outlinksInfohttp://example.com/{i}".encode(), shard_count)
        assert 0 <= shard < shard_count


def test_outlinks_info_shard_uses_prefix() -> None:
    assert outlinks_info_shard("http://example.com", 128) == 55
    assert outlinks_info_shard("http://example.com", 256) == 183
    assert outlinks_info_shard("", 128) == resolve_shard(b"outlinksInfo", 128) == 6


def test_directory_num_accepts_byte_like_inputs() -> None:
    data = b"outlinksInfohttp://example.com"
    expected = 3135703991 % 256

    assert raffia_directory_num(data) == expected
    assert raffia_directory_num(bytearray(data)) == expected
    assert raffia_directory_num(memoryview(data)) == expected
    assert raffia_directory_num(list(data)) == expected


@pytest.mark.parametrize("shard_count", [0, -1, True, 1.5])
def test_invalid_shard_count_is_rejected(shard_count: object) -> None:
    with pytest.raises(ValueError):
        resolve_shard(b"abc", shard_count)  # type: ignore[arg-type]
