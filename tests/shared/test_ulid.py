"""Tests for shared ULID conversion and ordering semantics."""

from __future__ import annotations

import pytest

from packages.errcode.ids import (
    generate_ulid_bytes,
    generate_ulid_str,
    is_ulid_str,
    ulid_bytes_to_str,
    ulid_str_to_bytes,
    ulid_timestamp_ms,
)


def test_ulid_round_trip_string_bytes_string() -> None:
    """ULID string/bytes conversion must be lossless."""
    ulid_value = generate_ulid_str()
    encoded = ulid_str_to_bytes(ulid_value)
    decoded = ulid_bytes_to_str(encoded)
    assert decoded == ulid_value


def test_ulid_lexicographic_order_matches_big_endian_binary() -> None:
    """Sorting canonical strings must match sorting binary big-endian ULIDs."""
    # Fix timestamp to remove time-based drift and compare entropy ordering only.
    values = [generate_ulid_bytes(timestamp_ms=1_700_000_000_000) for _ in range(300)]

    sorted_by_binary = sorted(values)
    sorted_by_string = sorted(values, key=ulid_bytes_to_str)

    assert sorted_by_binary == sorted_by_string


def test_ulid_embeds_generation_timestamp() -> None:
    """The timestamp prefix is recoverable and orders ids by time."""
    earlier = generate_ulid_str(timestamp_ms=1_700_000_000_000)
    later = generate_ulid_str(timestamp_ms=1_700_000_000_001)

    assert ulid_timestamp_ms(earlier) == 1_700_000_000_000
    assert earlier < later


def test_generated_ulids_do_not_collide() -> None:
    """Independent generations yield distinct identifiers."""
    values = {generate_ulid_str() for _ in range(5000)}

    assert len(values) == 5000


@pytest.mark.parametrize(
    "value",
    ["", "short", "0" * 27, "I" * 26, "8" + "0" * 25, 123],
)
def test_is_ulid_str_rejects_invalid_values(value: object) -> None:
    """Wrong length, invalid characters, overflow, and non-strings are rejected."""
    assert is_ulid_str(value) is False


def test_ulid_helpers_reject_bad_lengths() -> None:
    with pytest.raises(ValueError):
        ulid_bytes_to_str(b"\x00" * 15)
    with pytest.raises(ValueError):
        generate_ulid_bytes(timestamp_ms=-1)
