import pytest

from hdkeys.constants import SECP256K1_ORDER
from hdkeys.exceptions import InvalidSeedLengthError, ValidationError
from hdkeys.utils import validation as v


def test_seed_validation():
    assert v.validate_seed(b"\x00" * 16) == b"\x00" * 16
    assert v.validate_seed("00" * 64) == b"\x00" * 64
    assert v.validate_seed(bytearray(32)) == b"\x00" * 32
    with pytest.raises(InvalidSeedLengthError):
        v.validate_seed(b"\x00" * 15)
    with pytest.raises(ValidationError):
        v.validate_seed("xyz")
    with pytest.raises(ValidationError):
        v.validate_seed(12345)


@pytest.mark.parametrize("text", [
    "00" * 16 + "\n",
    "00" * 16 + " ",
    " " + "00" * 16,
    "00 " * 16,
])
def test_seed_hex_rejects_whitespace(text):
    with pytest.raises(ValidationError):
        v.validate_seed(text)


def test_private_key_validation():
    assert v.validate_private_key(b"\x00" * 31 + b"\x01") == b"\x00" * 31 + b"\x01"
    assert v.validate_private_key("0x" + "11" * 32) == b"\x11" * 32
    with pytest.raises(ValidationError):
        v.validate_private_key(b"\x00" * 32)
    with pytest.raises(ValidationError):
        v.validate_private_key(SECP256K1_ORDER.to_bytes(32, "big"))
    with pytest.raises(ValidationError):
        v.validate_private_key(b"\x01" * 31)


def test_key_bytes_and_chain_code():
    assert v.validate_key_bytes(b"\xff" * 32) == b"\xff" * 32
    assert v.validate_chain_code(b"\x01" * 32) == b"\x01" * 32
    with pytest.raises(ValidationError):
        v.validate_chain_code(b"\x01" * 33)


def test_child_index_validation():
    assert v.validate_child_index(0) == 0
    assert v.validate_child_index(0xFFFFFFFF) == 0xFFFFFFFF
    assert not v.is_valid_child_index(True)
    with pytest.raises(ValidationError):
        v.validate_child_index(2**32)


@pytest.mark.parametrize("index", [True, False, -1, 0x80000000, 1.0, "1"])
def test_normal_index_rejected(index):
    with pytest.raises(ValidationError):
        v.validate_normal_index(index)


def test_normal_index_accepted():
    assert v.validate_normal_index(0) == 0
    assert v.validate_normal_index(0x7FFFFFFF) == 0x7FFFFFFF
