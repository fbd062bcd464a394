"""Type definitions for HD key derivation."""

from .common import (
    PrivateKeyBytes,
    PublicKeyBytes,
    ChainCode,
    ChildIndex,
    DerivationPath,
    IndexSequence,
)

__all__ = [
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "ChainCode",
    "ChildIndex",
    "DerivationPath",
    "IndexSequence",
]
