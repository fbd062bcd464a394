"""Cryptographic primitives and key derivation."""

from ..crypto.curve import (
    CURVE_ORDER,
    scalar_base_multiply,
    compress_point,
    decompress_point,
    public_key_from_scalar,
)
from ..crypto.keys import EcBranch, EdBranch
from ..crypto.hd import (
    ExtendedKey,
    initialize,
    derive_child,
    derive_path,
    derive_indices,
    parse_path,
    format_path,
    hardened,
)

__all__ = [
    # Curve
    "CURVE_ORDER",
    "scalar_base_multiply",
    "compress_point",
    "decompress_point",
    "public_key_from_scalar",

    # Keys
    "EcBranch",
    "EdBranch",
    "ExtendedKey",

    # Derivation
    "initialize",
    "derive_child",
    "derive_path",
    "derive_indices",
    "parse_path",
    "format_path",
    "hardened",
]
