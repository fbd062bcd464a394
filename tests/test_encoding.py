import hashlib
import hmac

import pytest

from hdkeys.exceptions import ValidationError
from hdkeys.utils.encoding import (
    bytes_to_int,
    hmac_sha512,
    int_to_bytes,
    ser256,
    ser32,
)


def test_fixed_width_serialization_keeps_leading_zeros():
    assert ser32(0) == b"\x00\x00\x00\x00"
    assert ser32(0x8000002C) == bytes.fromhex("8000002c")
    assert ser256(1) == b"\x00" * 31 + b"\x01"
    assert len(ser256(2**200)) == 32
    assert bytes_to_int(ser256(12345)) == 12345


def test_int_to_bytes_overflow():
    with pytest.raises(ValidationError):
        ser32(2**32)
    with pytest.raises(ValidationError):
        int_to_bytes(-1, 4)


def test_hmac_sha512():
    # RFC 4231 test case 2
    digest = hmac_sha512(b"Jefe", b"what do ya want for nothing?")
    assert digest.hex() == (
        "164b7a7bfcf819e2e395fbe73b56e0a387bd64222e831fd610270cd7ea250554"
        "9758bf75c05a994a6d034f65f8f0e6fdcaeab1a34d4a6b4b636e070a38bce737"
    )
    assert digest == hmac.new(b"Jefe", b"what do ya want for nothing?", hashlib.sha512).digest()
