"""Encoding and hashing utilities for HD key derivation."""

import hashlib
import hmac

from ..exceptions import ValidationError

__all__ = [
    "int_to_bytes",
    "bytes_to_int",
    "ser32",
    "ser256",
    "hmac_sha512",
]


def int_to_bytes(value: int, length: int, byteorder: str = "big") -> bytes:
    """
    Convert non-negative integer to fixed-width bytes.

    Leading zero bytes are kept, so the result is always ``length`` long.

    Raises:
        ValidationError: If value is negative or does not fit
    """
    try:
        return value.to_bytes(length, byteorder=byteorder)
    except OverflowError as e:
        raise ValidationError(f"Integer does not fit in {length} bytes: {value}") from e


def bytes_to_int(data: bytes, byteorder: str = "big") -> int:
    """Convert bytes to unsigned integer."""
    return int.from_bytes(data, byteorder=byteorder)


def ser32(value: int) -> bytes:
    """Serialize a child index as 4 big-endian bytes."""
    return int_to_bytes(value, 4)


def ser256(value: int) -> bytes:
    """Serialize a scalar as 32 big-endian bytes."""
    return int_to_bytes(value, 32)


def hmac_sha512(key: bytes, data: bytes) -> bytes:
    """Compute HMAC-SHA512 of data under key (64 bytes)."""
    return hmac.new(key, data, hashlib.sha512).digest()
