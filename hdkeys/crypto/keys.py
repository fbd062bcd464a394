"""Per-curve key material held by an extended key."""

from dataclasses import dataclass

import nacl.bindings
from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey
from nacl.signing import SigningKey, VerifyKey

from ..constants import (
    CHAIN_CODE_SIZE,
    COMPRESSED_PUBLIC_KEY_SIZE,
    ED25519_EXPANDED_KEY_SIZE,
    ED25519_PUBLIC_KEY_SIZE,
    PRIVATE_KEY_SIZE,
)
from ..exceptions import CryptoError, ValidationError
from ..types.common import ChainCode, PrivateKeyBytes, PublicKeyBytes
from ..utils.encoding import bytes_to_int
from ..utils.validation import validate_chain_code, validate_key_bytes
from .curve import public_key_from_scalar

__all__ = ["EcBranch", "EdBranch"]


def _mask(data: bytes) -> str:
    hex_str = data.hex()
    return f"{hex_str[:4]}...{hex_str[-4:]}"


def _check_size(name: str, value: bytes, size: int) -> None:
    if not isinstance(value, bytes) or len(value) != size:
        raise ValidationError(f"{name} must be {size} bytes")


@dataclass(frozen=True)
class EcBranch:
    """
    secp256k1 (ECDSA) half of an extended key.

    Attributes:
        private_key: 32-byte big-endian scalar
        chain_code: 32-byte chain code
        public_key: 33-byte compressed public point
    """

    private_key: PrivateKeyBytes
    chain_code: ChainCode
    public_key: PublicKeyBytes

    def __post_init__(self) -> None:
        _check_size("Private key", self.private_key, PRIVATE_KEY_SIZE)
        _check_size("Chain code", self.chain_code, CHAIN_CODE_SIZE)
        _check_size("Public key", self.public_key, COMPRESSED_PUBLIC_KEY_SIZE)

    @classmethod
    def from_private_key(cls, private_key: bytes, chain_code: bytes) -> "EcBranch":
        """
        Build branch from scalar bytes, computing the public point.

        The scalar is not range-checked here; master keys are accepted as
        produced by the seed HMAC.
        """
        private_key = validate_key_bytes(private_key)
        chain_code = validate_chain_code(chain_code)
        return cls(
            private_key=private_key,
            chain_code=chain_code,
            public_key=public_key_from_scalar(private_key),
        )

    @property
    def scalar(self) -> int:
        """Private key as integer."""
        return bytes_to_int(self.private_key)

    def signing_key(self) -> SecpPrivateKey:
        """Private key as a coincurve object."""
        try:
            return SecpPrivateKey(self.private_key)
        except ValueError as e:
            raise CryptoError(f"Invalid secp256k1 private key: {e}") from e

    def verifying_key(self) -> SecpPublicKey:
        """Public key as a coincurve object."""
        return SecpPublicKey(self.public_key)

    def __repr__(self) -> str:
        return f"EcBranch(private_key={_mask(self.private_key)}, public_key={self.public_key.hex()})"


@dataclass(frozen=True)
class EdBranch:
    """
    Ed25519 (EdDSA) half of an extended key.

    The 32-byte seed is the Ed25519 private seed itself; the signing scalar
    is obtained by the usual SHA-512 expansion inside libsodium.
    """

    seed: PrivateKeyBytes
    chain_code: ChainCode
    public_key: PublicKeyBytes

    def __post_init__(self) -> None:
        _check_size("Seed", self.seed, PRIVATE_KEY_SIZE)
        _check_size("Chain code", self.chain_code, CHAIN_CODE_SIZE)
        _check_size("Public key", self.public_key, ED25519_PUBLIC_KEY_SIZE)

    @classmethod
    def from_seed(cls, seed: bytes, chain_code: bytes) -> "EdBranch":
        """Build branch from a 32-byte Ed25519 seed."""
        seed = validate_key_bytes(seed)
        chain_code = validate_chain_code(chain_code)
        public_key, _ = nacl.bindings.crypto_sign_seed_keypair(seed)
        return cls(seed=seed, chain_code=chain_code, public_key=PublicKeyBytes(public_key))

    @property
    def expanded_private_key(self) -> bytes:
        """64-byte Ed25519 private key (seed || public key), as libsodium stores it."""
        _, secret_key = nacl.bindings.crypto_sign_seed_keypair(self.seed)
        if len(secret_key) != ED25519_EXPANDED_KEY_SIZE:
            raise CryptoError(f"Unexpected Ed25519 secret key length: {len(secret_key)}")
        return secret_key

    def signing_key(self) -> SigningKey:
        return SigningKey(self.seed)

    def verify_key(self) -> VerifyKey:
        return VerifyKey(self.public_key)

    def __repr__(self) -> str:
        return f"EdBranch(seed={_mask(self.seed)}, public_key={self.public_key.hex()})"
