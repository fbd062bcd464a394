"""secp256k1 point arithmetic backed by libsecp256k1 (coincurve)."""

from typing import Tuple

from coincurve import PublicKey as SecpPublicKey

from ..constants import COMPRESSED_PUBLIC_KEY_SIZE, SECP256K1_ORDER
from ..exceptions import CryptoError, ValidationError
from ..types.common import PublicKeyBytes
from ..utils.encoding import bytes_to_int, int_to_bytes, ser256

__all__ = [
    "CURVE_ORDER",
    "scalar_base_multiply",
    "compress_point",
    "decompress_point",
    "public_key_from_scalar",
]

CURVE_ORDER = SECP256K1_ORDER


def scalar_base_multiply(k: int) -> Tuple[int, int]:
    """
    Multiply the secp256k1 generator by scalar k.

    Scalars at or above the curve order are reduced first, since
    kG == (k mod n)G.

    Args:
        k: Non-negative integer scalar

    Returns:
        Affine (x, y) coordinates of kG

    Raises:
        CryptoError: If k is congruent to zero (point at infinity)
    """
    if k < 0:
        raise ValidationError("Scalar must be non-negative")
    k %= CURVE_ORDER
    if k == 0:
        raise CryptoError("Scalar is congruent to zero modulo the curve order")

    try:
        return SecpPublicKey.from_valid_secret(ser256(k)).point()
    except ValueError as e:
        raise CryptoError(f"Scalar multiplication failed: {e}") from e


def compress_point(x: int, y: int) -> PublicKeyBytes:
    """
    Encode affine point in 33-byte compressed form.

    The prefix is 0x02 for even y and 0x03 for odd y, followed by x
    left-padded to 32 bytes.
    """
    prefix = 0x02 + (y & 1)
    return PublicKeyBytes(bytes([prefix]) + int_to_bytes(x, COMPRESSED_PUBLIC_KEY_SIZE - 1))


def decompress_point(data: bytes) -> Tuple[int, int]:
    """
    Decode a compressed point back to affine coordinates.

    Raises:
        CryptoError: If data is not a point on the curve
    """
    if len(data) != COMPRESSED_PUBLIC_KEY_SIZE or data[0] not in (0x02, 0x03):
        raise CryptoError(f"Not a compressed public key: {bytes(data).hex()}")
    try:
        return SecpPublicKey(bytes(data)).point()
    except ValueError as e:
        raise CryptoError(f"Invalid public key: {e}") from e


def public_key_from_scalar(key: bytes) -> PublicKeyBytes:
    """Compressed public key for a 32-byte big-endian scalar."""
    return compress_point(*scalar_base_multiply(bytes_to_int(key)))
