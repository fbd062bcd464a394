"""Constants for hierarchical deterministic key derivation."""

from enum import Enum

__all__ = [
    "Curve",
    "SECP256K1_ORDER",
    "HARDENED_KEY_START",
    "MAX_CHILD_INDEX",
    "MIN_SEED_BYTES",
    "MAX_SEED_BYTES",
    "PRIVATE_KEY_SIZE",
    "CHAIN_CODE_SIZE",
    "COMPRESSED_PUBLIC_KEY_SIZE",
    "ED25519_PUBLIC_KEY_SIZE",
    "ED25519_EXPANDED_KEY_SIZE",
    "EC_SEED_KEY",
    "ED_SEED_KEY",
    "PATH_ROOT",
    "PATH_SEPARATOR",
    "HARDENED_MARKER",
]


class Curve(str, Enum):
    """Curve families derived side by side from one seed."""

    SECP256K1 = "secp256k1"  # ECDSA branch
    ED25519 = "ed25519"      # EdDSA branch


# secp256k1 group order n
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# Child indices
HARDENED_KEY_START = 0x80000000  # 2^31
MAX_CHILD_INDEX = 0xFFFFFFFF     # 2^32 - 1

# Seed lengths (bytes)
MIN_SEED_BYTES = 16   # 128 bits
MAX_SEED_BYTES = 64   # 512 bits

# Key material sizes (bytes)
PRIVATE_KEY_SIZE = 32
CHAIN_CODE_SIZE = 32
COMPRESSED_PUBLIC_KEY_SIZE = 33
ED25519_PUBLIC_KEY_SIZE = 32
ED25519_EXPANDED_KEY_SIZE = 64

# Master key HMAC keys, one per curve family
EC_SEED_KEY = b"Bitcoin seed"
ED_SEED_KEY = b"ed25519 seed"

# Path syntax
PATH_ROOT = "m"
PATH_SEPARATOR = "/"
HARDENED_MARKER = "'"
