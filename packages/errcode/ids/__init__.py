"""Shared ULID primitives for error identifiers."""

from packages.errcode.ids.ulid import (
    ULID_STR_LENGTH,
    generate_ulid_bytes,
    generate_ulid_str,
    is_ulid_str,
    ulid_bytes_to_str,
    ulid_str_to_bytes,
    ulid_timestamp_ms,
)

__all__ = [
    "ULID_STR_LENGTH",
    "generate_ulid_bytes",
    "generate_ulid_str",
    "is_ulid_str",
    "ulid_bytes_to_str",
    "ulid_str_to_bytes",
    "ulid_timestamp_ms",
]
