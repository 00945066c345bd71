import pytest

from amasign.constants import Network
from amasign.exceptions import (
    CryptoError, DecodeError, InvalidPayloadLength, InvalidSeedEncoding, ProtocolViolation,
    UsageError,
)
from amasign.utils import validation as v


def test_seed_validation():
    assert v.validate_seed(b"\x01\x02") == b"\x01\x02"
    assert v.validate_seed("2") == b"\x01"
    with pytest.raises(InvalidSeedEncoding):
        v.validate_seed("not-base58!")
    with pytest.raises(InvalidSeedEncoding):
        v.validate_seed("")
    with pytest.raises(DecodeError):
        v.validate_seed(b"")


def test_signing_payload_validation():
    payload = "ab" * 32
    assert v.validate_signing_payload(payload) == bytes.fromhex(payload)
    assert v.validate_signing_payload("0x" + payload) == bytes.fromhex(payload)
    assert v.validate_signing_payload(b"\x00" * 32) == b"\x00" * 32

    with pytest.raises(InvalidPayloadLength) as info:
        v.validate_signing_payload("ab" * 31)
    assert info.value.actual == 31
    assert isinstance(info.value, ProtocolViolation)

    with pytest.raises(DecodeError):
        v.validate_signing_payload("zz" * 32)


def test_private_key_range():
    with pytest.raises(CryptoError):
        v.validate_private_key(b"\x00" * 32)
    with pytest.raises(CryptoError):
        v.validate_private_key(b"\xff" * 32)
    assert v.validate_private_key(b"\x00" * 31 + b"\x01") == b"\x00" * 31 + b"\x01"


def test_public_key_shape():
    assert not v.is_valid_public_key(b"\x80" * 47)
    assert not v.is_valid_public_key(b"\x00" * 48)
    assert v.is_valid_public_key(b"\xc0" + b"\x00" * 47)


def test_identifier_and_network():
    assert v.validate_identifier(" Coin ", "contract") == "Coin"
    with pytest.raises(UsageError):
        v.validate_identifier("", "contract")
    assert v.validate_network(Network.TESTNET) == "testnet"
    assert v.validate_network("devnet") == "devnet"
