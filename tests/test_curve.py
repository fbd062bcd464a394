import pytest
from coincurve import PrivateKey as SecpPrivateKey

from hdkeys.crypto.curve import (
    CURVE_ORDER,
    compress_point,
    decompress_point,
    public_key_from_scalar,
    scalar_base_multiply,
)
from hdkeys.exceptions import CryptoError, ValidationError

GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
FIELD_PRIME = 2**256 - 2**32 - 977


def test_generator():
    assert scalar_base_multiply(1) == (GX, GY)


def test_scalar_reduced_modulo_order():
    assert scalar_base_multiply(CURVE_ORDER + 1) == (GX, GY)
    assert scalar_base_multiply(CURVE_ORDER - 1) == (GX, FIELD_PRIME - GY)


def test_point_at_infinity_rejected():
    with pytest.raises(CryptoError):
        scalar_base_multiply(0)
    with pytest.raises(CryptoError):
        scalar_base_multiply(CURVE_ORDER)
    with pytest.raises(ValidationError):
        scalar_base_multiply(-1)


def test_compress_prefix_and_padding():
    assert compress_point(1, 2) == b"\x02" + b"\x00" * 31 + b"\x01"
    assert compress_point(1, 3) == b"\x03" + b"\x00" * 31 + b"\x01"
    assert compress_point(GX, GY).hex() == "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"


@pytest.mark.parametrize("k", [1, 2, 3, 0xDEADBEEF, CURVE_ORDER - 1, 2**255 + 19])
def test_compression_round_trip(k):
    point = scalar_base_multiply(k)
    encoded = compress_point(*point)
    assert len(encoded) == 33
    assert decompress_point(encoded) == point


@pytest.mark.parametrize("k", [1, 7, 0x1234567890ABCDEF, CURVE_ORDER - 2])
def test_public_key_matches_libsecp256k1(k):
    secret = k.to_bytes(32, "big")
    assert public_key_from_scalar(secret) == SecpPrivateKey(secret).public_key.format(compressed=True)


def test_decompress_invalid():
    with pytest.raises(CryptoError):
        decompress_point(b"\x04" + b"\x00" * 32)
    with pytest.raises(CryptoError):
        decompress_point(b"\x02" + b"\x00" * 31)
