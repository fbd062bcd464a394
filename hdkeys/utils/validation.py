"""Validation utilities for HD key derivation."""

import re
from typing import Union

from ..constants import (
    CHAIN_CODE_SIZE,
    HARDENED_KEY_START,
    MAX_CHILD_INDEX,
    MAX_SEED_BYTES,
    MIN_SEED_BYTES,
    PRIVATE_KEY_SIZE,
    SECP256K1_ORDER,
)
from ..exceptions import InvalidSeedLengthError, ValidationError
from ..types.common import ChainCode, ChildIndex, PrivateKeyBytes

__all__ = [
    "validate_seed",
    "validate_private_key",
    "validate_key_bytes",
    "validate_chain_code",
    "is_valid_child_index",
    "validate_child_index",
    "validate_normal_index",
]

HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")


def _to_bytes(value: Union[str, bytes], what: str) -> bytes:
    if isinstance(value, str):
        if value.startswith("0x"):
            value = value[2:]
        if not HEX_PATTERN.fullmatch(value):
            raise ValidationError(f"{what} must be hexadecimal")
        try:
            return bytes.fromhex(value)
        except ValueError as e:
            raise ValidationError(f"Invalid hex {what.lower()}: {e}") from e
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise ValidationError(f"{what} must be bytes or hex string, got {type(value).__name__}")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_seed(seed: Union[str, bytes]) -> bytes:
    """
    Validate root seed and return as bytes.

    Args:
        seed: Seed as bytes or hex string

    Returns:
        Seed bytes (16 to 64 bytes)

    Raises:
        InvalidSeedLengthError: If seed length is out of range
        ValidationError: If seed is not bytes or hex
    """
    seed = _to_bytes(seed, "Seed")
    if len(seed) < MIN_SEED_BYTES or len(seed) > MAX_SEED_BYTES:
        raise InvalidSeedLengthError(
            len(seed),
            f"Seed must be between {MIN_SEED_BYTES} and {MAX_SEED_BYTES} bytes, got {len(seed)}"
        )
    return seed


def validate_private_key(key: Union[str, bytes]) -> PrivateKeyBytes:
    """
    Validate secp256k1 private key and return as bytes.

    Args:
        key: Private key as hex string or bytes

    Returns:
        Private key as 32 bytes, within 1 to n-1

    Raises:
        ValidationError: If private key is invalid
    """
    key = validate_key_bytes(key)

    key_int = int.from_bytes(key, "big")
    if key_int == 0:
        raise ValidationError("Private key cannot be zero")
    if key_int >= SECP256K1_ORDER:
        raise ValidationError("Private key exceeds curve order")

    return key


def validate_key_bytes(key: Union[str, bytes]) -> PrivateKeyBytes:
    """Validate 32 bytes of private key material without a range check."""
    key = _to_bytes(key, "Private key")
    if len(key) != PRIVATE_KEY_SIZE:
        raise ValidationError(f"Private key must be {PRIVATE_KEY_SIZE} bytes, got {len(key)}")
    return PrivateKeyBytes(key)


def validate_chain_code(chain_code: Union[str, bytes]) -> ChainCode:
    """Validate chain code and return as bytes."""
    chain_code = _to_bytes(chain_code, "Chain code")
    if len(chain_code) != CHAIN_CODE_SIZE:
        raise ValidationError(f"Chain code must be {CHAIN_CODE_SIZE} bytes, got {len(chain_code)}")
    return ChainCode(chain_code)


def is_valid_child_index(index: int) -> bool:
    """Check if index fits in an unsigned 32-bit integer."""
    return _is_int(index) and 0 <= index <= MAX_CHILD_INDEX


def validate_child_index(index: int) -> ChildIndex:
    """
    Validate child index.

    Raises:
        ValidationError: If index is not an unsigned 32-bit integer
    """
    if not is_valid_child_index(index):
        raise ValidationError(f"Child index must be an integer in [0, {MAX_CHILD_INDEX}], got {index!r}")
    return ChildIndex(index)


def validate_normal_index(index: int) -> int:
    """
    Validate index below the hardened range.

    Raises:
        ValidationError: If index is not an integer in [0, 2^31 - 1]
    """
    if not _is_int(index) or not 0 <= index < HARDENED_KEY_START:
        raise ValidationError(f"Index must be in [0, {HARDENED_KEY_START - 1}], got {index!r}")
    return index
