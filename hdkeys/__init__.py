"""
HD Keys

Deterministic derivation of secp256k1 (BIP32) and Ed25519 (SLIP-0010)
key trees from a single seed, addressed by derivation paths.
"""

from .constants import Curve, HARDENED_KEY_START
from .exceptions import (
    HDKeyError,
    ValidationError,
    InvalidSeedLengthError,
    InvalidPathError,
    CryptoError,
    InvalidChildError,
)
from .crypto import (
    EcBranch,
    EdBranch,
    ExtendedKey,
    initialize,
    derive_child,
    derive_path,
    derive_indices,
    parse_path,
    format_path,
    hardened,
)

__version__ = "1.0.0"
__author__ = "HD Keys Python Library"

__all__ = [
    # Keys
    "ExtendedKey",
    "EcBranch",
    "EdBranch",

    # Derivation
    "initialize",
    "derive_child",
    "derive_path",
    "derive_indices",
    "parse_path",
    "format_path",
    "hardened",

    # Config
    "Curve",
    "HARDENED_KEY_START",

    # Exceptions
    "HDKeyError",
    "ValidationError",
    "InvalidSeedLengthError",
    "InvalidPathError",
    "CryptoError",
    "InvalidChildError",
]
