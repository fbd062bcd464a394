"""Common type definitions for HD key derivation."""

from typing import List, NewType, Sequence

__all__ = [
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "ChainCode",
    "ChildIndex",
    "DerivationPath",
    "IndexSequence",
]

# Crypto types
PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte secp256k1 scalar or Ed25519 seed."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""33-byte compressed secp256k1 point or 32-byte Ed25519 public key."""

ChainCode = NewType("ChainCode", bytes)
"""32-byte chain code."""

ChildIndex = NewType("ChildIndex", int)
"""Unsigned 32-bit child index; top bit set means hardened."""

# Type aliases
DerivationPath = List[ChildIndex]
"""Ordered child indices produced by parsing a path string."""

IndexSequence = Sequence[int]
"""Any sequence of child indices accepted by the path walker."""
