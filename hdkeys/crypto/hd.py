"""
Hierarchical Deterministic key derivation over secp256k1 and Ed25519.

One seed drives two independent key trees that walk the same path:

* secp256k1 follows BIP32 (hardened and normal children).
* Ed25519 follows SLIP-0010, where every step is hardened-style regardless
  of the index's top bit.

Example:
    >>> key = initialize(seed)
    >>> child = derive_path(key, "m/44'/0'/0'/0/0")
    >>> child.ec_public_key_bytes.hex()
"""

import logging
import re
from dataclasses import dataclass
from typing import Union

from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey
from nacl.signing import SigningKey, VerifyKey

from ..constants import (
    EC_SEED_KEY,
    ED_SEED_KEY,
    HARDENED_KEY_START,
    HARDENED_MARKER,
    PATH_ROOT,
    PATH_SEPARATOR,
    Curve,
)
from ..exceptions import InvalidChildError, InvalidPathError, ValidationError
from ..types.common import (
    ChainCode,
    ChildIndex,
    DerivationPath,
    IndexSequence,
    PrivateKeyBytes,
    PublicKeyBytes,
)
from ..utils.encoding import bytes_to_int, hmac_sha512, ser256, ser32
from ..utils.validation import (
    validate_child_index,
    validate_normal_index,
    validate_private_key,
    validate_seed,
)
from .curve import CURVE_ORDER
from .keys import EcBranch, EdBranch

__all__ = [
    "ExtendedKey",
    "initialize",
    "derive_child",
    "derive_path",
    "derive_indices",
    "parse_path",
    "format_path",
    "hardened",
]

logger = logging.getLogger(__name__)

# 2^31 - 1 has ten digits
SEGMENT_PATTERN = re.compile(r"[0-9]{1,10}")


@dataclass(frozen=True)
class ExtendedKey:
    """
    Node in the derivation tree holding both curve branches.

    Instances are immutable; derivation always returns a new key.

    Attributes:
        ec: secp256k1 branch
        ed: Ed25519 branch
        depth: 0 for the master key, parent depth + 1 otherwise
        child_index: Index used to reach this node (0 at the root)
    """

    ec: EcBranch
    ed: EdBranch
    depth: int = 0
    child_index: ChildIndex = ChildIndex(0)

    @classmethod
    def from_seed(cls, seed: Union[str, bytes]) -> "ExtendedKey":
        """Create master key from seed."""
        return initialize(seed)

    def derive(self, index: int) -> "ExtendedKey":
        """Derive child key at index."""
        return derive_child(self, index)

    def derive_path(self, path: str) -> "ExtendedKey":
        """Derive using path like m/44'/0'/0'/0/0."""
        return derive_path(self, path)

    def derive_indices(self, indices: IndexSequence) -> "ExtendedKey":
        """Derive along already parsed child indices."""
        return derive_indices(self, indices)

    @property
    def is_master(self) -> bool:
        return self.depth == 0

    @property
    def is_hardened(self) -> bool:
        """Whether this node was reached through a hardened index."""
        return self.child_index >= HARDENED_KEY_START

    # Branch selection

    def branch(self, curve: Union[Curve, str]) -> Union[EcBranch, EdBranch]:
        """Return the branch for a curve family."""
        try:
            curve = Curve(curve)
        except ValueError as e:
            raise ValidationError(f"Unknown curve: {curve!r}") from e
        if curve is Curve.SECP256K1:
            return self.ec
        return self.ed

    def private_key_bytes(self, curve: Union[Curve, str]) -> PrivateKeyBytes:
        """Raw 32-byte scalar (secp256k1) or seed (Ed25519)."""
        branch = self.branch(curve)
        if isinstance(branch, EcBranch):
            return branch.private_key
        return branch.seed

    def chain_code(self, curve: Union[Curve, str]) -> ChainCode:
        return self.branch(curve).chain_code

    def public_key(self, curve: Union[Curve, str]) -> PublicKeyBytes:
        return self.branch(curve).public_key

    # secp256k1 accessors

    @property
    def ec_private_key_bytes(self) -> PrivateKeyBytes:
        return self.ec.private_key

    @property
    def ec_chain_code(self) -> ChainCode:
        return self.ec.chain_code

    @property
    def ec_public_key_bytes(self) -> PublicKeyBytes:
        """33-byte compressed public key."""
        return self.ec.public_key

    def ec_private_key(self) -> SecpPrivateKey:
        return self.ec.signing_key()

    def ec_public_key(self) -> SecpPublicKey:
        return self.ec.verifying_key()

    # Ed25519 accessors

    @property
    def ed_private_key_bytes(self) -> PrivateKeyBytes:
        """32-byte Ed25519 seed."""
        return self.ed.seed

    @property
    def ed_chain_code(self) -> ChainCode:
        return self.ed.chain_code

    @property
    def ed_public_key_bytes(self) -> PublicKeyBytes:
        return self.ed.public_key

    @property
    def ed_expanded_private_key(self) -> bytes:
        """64-byte Ed25519 private key (seed || public key)."""
        return self.ed.expanded_private_key

    def ed_signing_key(self) -> SigningKey:
        return self.ed.signing_key()

    def ed_verify_key(self) -> VerifyKey:
        return self.ed.verify_key()

    def __repr__(self) -> str:
        return (
            f"ExtendedKey(depth={self.depth}, child_index={_format_index(self.child_index)}, "
            f"ec={self.ec!r}, ed={self.ed!r})"
        )


def initialize(seed: Union[str, bytes]) -> ExtendedKey:
    """
    Create master extended key from a root seed.

    Each curve family gets its own HMAC-SHA512 key, so the two branches are
    independent even though they share the seed.

    Args:
        seed: 16 to 64 bytes (or hex string)

    Returns:
        Master ExtendedKey at depth 0

    Raises:
        InvalidSeedLengthError: If seed length is out of range
    """
    seed = validate_seed(seed)

    # The secp256k1 scalar is taken as-is; only child derivation rejects
    # out-of-range values.
    h = hmac_sha512(EC_SEED_KEY, seed)
    ec = EcBranch.from_private_key(h[:32], h[32:])

    h = hmac_sha512(ED_SEED_KEY, seed)
    ed = EdBranch.from_seed(h[:32], h[32:])

    logger.debug(f"Created master key from {len(seed)}-byte seed")
    return ExtendedKey(ec=ec, ed=ed)


def _derive_ec_child(parent: EcBranch, index: int) -> EcBranch:
    if index >= HARDENED_KEY_START:
        # 0x00 || ser256(k_par) || ser32(i)
        data = b"\x00" + ser256(parent.scalar) + ser32(index)
    else:
        # serP(point(k_par)) || ser32(i)
        data = parent.public_key + ser32(index)

    h = hmac_sha512(parent.chain_code, data)
    il, ir = h[:32], h[32:]

    il_int = bytes_to_int(il)
    if il_int >= CURVE_ORDER or il_int == 0:
        logger.warning(f"Rejected child {_format_index(index)}: IL outside curve order")
        raise InvalidChildError(index)

    child_int = (il_int + parent.scalar) % CURVE_ORDER
    try:
        child_key = validate_private_key(ser256(child_int))
    except ValidationError as e:
        logger.warning(f"Rejected child {_format_index(index)}: {e}")
        raise InvalidChildError(index) from e

    return EcBranch.from_private_key(child_key, ir)


def _derive_ed_child(parent: EdBranch, index: int) -> EdBranch:
    # Always hardened-style: 0x00 || seed || ser32(i)
    data = b"\x00" + parent.seed + ser32(index)
    h = hmac_sha512(parent.chain_code, data)
    return EdBranch.from_seed(h[:32], h[32:])


def derive_child(key: ExtendedKey, index: int) -> ExtendedKey:
    """
    Derive child key at index for both curve branches.

    Both branches succeed together or the call fails; a rejected secp256k1
    child aborts the whole step so the two trees stay on the same path.

    Args:
        key: Parent extended key
        index: Child index in [0, 2^32 - 1]; >= 2^31 is hardened

    Returns:
        Child ExtendedKey

    Raises:
        ValidationError: If index is not a uint32
        InvalidChildError: If the secp256k1 child is invalid at this index
    """
    index = validate_child_index(index)
    logger.debug(f"Deriving child {_format_index(index)} at depth {key.depth + 1}")

    ec = _derive_ec_child(key.ec, index)
    ed = _derive_ed_child(key.ed, index)

    return ExtendedKey(ec=ec, ed=ed, depth=key.depth + 1, child_index=index)


def derive_indices(key: ExtendedKey, indices: IndexSequence) -> ExtendedKey:
    """
    Derive along a sequence of child indices.

    Example:
        >>> derive_indices(key, [hardened(44), hardened(0), hardened(0), 0, 0])
    """
    for index in indices:
        key = derive_child(key, index)
    return key


def derive_path(key: ExtendedKey, path: str) -> ExtendedKey:
    """
    Derive using a path string like m/44'/0'/0'/0/0.

    Raises:
        InvalidPathError: If path cannot be parsed
        InvalidChildError: If any step yields an invalid child
    """
    return derive_indices(key, parse_path(path))


def parse_path(path: str) -> DerivationPath:
    """
    Parse derivation path into child indices.

    A trailing apostrophe marks a hardened segment and adds 2^31.

    Example:
        >>> parse_path("m/44'/0'/0'/0/0")
        [2147483692, 2147483648, 2147483648, 0, 0]

    Raises:
        InvalidPathError: If the root is not "m" or a segment is malformed
    """
    if not isinstance(path, str):
        raise InvalidPathError(repr(path), "Derivation path must be a string")

    parts = path.split(PATH_SEPARATOR)
    if parts[0] != PATH_ROOT:
        raise InvalidPathError(path, f"Derivation path must start with {PATH_ROOT!r}: {path!r}")

    indices: DerivationPath = []
    for part in parts[1:]:
        offset = 0
        if part.endswith(HARDENED_MARKER):
            offset = HARDENED_KEY_START
            part = part[:-len(HARDENED_MARKER)]

        if not SEGMENT_PATTERN.fullmatch(part):
            raise InvalidPathError(path, f"Invalid path segment {part!r} in {path!r}")

        value = int(part)
        if value >= HARDENED_KEY_START:
            raise InvalidPathError(path, f"Path segment {part} out of range in {path!r}")

        indices.append(ChildIndex(offset + value))

    return indices


def format_path(indices: IndexSequence) -> str:
    """Render child indices as a path string (inverse of parse_path)."""
    segments = [PATH_ROOT]
    for index in indices:
        segments.append(_format_index(validate_child_index(index)))
    return PATH_SEPARATOR.join(segments)


def hardened(index: int) -> ChildIndex:
    """Return the hardened form of a normal index."""
    return ChildIndex(validate_normal_index(index) + HARDENED_KEY_START)


def _format_index(index: int) -> str:
    if index >= HARDENED_KEY_START:
        return f"{index - HARDENED_KEY_START}{HARDENED_MARKER}"
    return str(index)
