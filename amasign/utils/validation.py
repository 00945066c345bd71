"""Validation utilities for the Amadeus signing client."""

import re
from typing import Union

from ..constants import (
    CURVE_ORDER,
    PRIVATE_KEY_LENGTH,
    PUBLIC_KEY_LENGTH,
    SIGNATURE_LENGTH,
    SIGNING_PAYLOAD_LENGTH,
    Network,
)
from ..exceptions import (
    CryptoError,
    DecodeError,
    InvalidPayloadLength,
    InvalidSeedEncoding,
    UsageError,
)
from ..types.common import SigningPayload
from ..utils.encoding import decode_base58, hex_to_bytes

__all__ = [
    "validate_seed",
    "validate_private_key",
    "is_valid_public_key",
    "validate_public_key",
    "validate_signature",
    "validate_signing_payload",
    "validate_identifier",
    "validate_network",
]

HEX_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]*$")


def validate_seed(seed: Union[bytes, str]) -> bytes:
    """
    Validate and normalize a seed.
    
    Args:
        seed: Raw seed bytes or base-58 text
        
    Returns:
        Seed bytes
        
    Raises:
        InvalidSeedEncoding: If the seed text cannot be decoded or is empty
    """
    if isinstance(seed, str):
        try:
            seed = decode_base58(seed.strip())
        except DecodeError as e:
            raise InvalidSeedEncoding(f"Invalid seed encoding: {e.message}") from e
            
    if not isinstance(seed, (bytes, bytearray)):
        raise InvalidSeedEncoding(f"Seed must be bytes or str, got {type(seed).__name__}")
        
    if not seed:
        raise InvalidSeedEncoding("Seed is empty")
        
    return bytes(seed)


def validate_private_key(key: Union[bytes, str]) -> bytes:
    """
    Validate a serialized private scalar.
    
    Args:
        key: 32-byte big-endian scalar or its hex string
        
    Returns:
        Scalar bytes
        
    Raises:
        CryptoError: If the scalar is out of range
    """
    if isinstance(key, str):
        try:
            key = hex_to_bytes(key)
        except DecodeError:
            # Never echo key material
            raise DecodeError("Invalid private key hex encoding") from None
        
    if len(key) != PRIVATE_KEY_LENGTH:
        raise CryptoError(f"Private key must be {PRIVATE_KEY_LENGTH} bytes, got {len(key)}")
        
    value = int.from_bytes(key, "big")
    if not 0 < value < CURVE_ORDER:
        raise CryptoError("Private key out of range")
        
    return bytes(key)


def is_valid_public_key(key: Union[bytes, str]) -> bool:
    """Check if public key encoding is well formed."""
    try:
        validate_public_key(key)
        return True
    except DecodeError:
        return False


def validate_public_key(key: Union[bytes, str]) -> bytes:
    """
    Validate compressed public key bytes.
    
    Args:
        key: Compressed G1 point as bytes or base-58 text
        
    Returns:
        Public key bytes
        
    Raises:
        DecodeError: If the encoding has the wrong shape
    """
    if isinstance(key, str):
        key = decode_base58(key)
        
    if len(key) != PUBLIC_KEY_LENGTH:
        raise DecodeError(f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(key)}")
        
    # Compression flag must be set
    if not key[0] & 0x80:
        raise DecodeError("Public key is not in compressed form")
        
    return bytes(key)


def validate_signature(signature: Union[bytes, str]) -> bytes:
    """
    Validate compressed signature bytes.
    
    Args:
        signature: Compressed G2 point as bytes or base-58 text
        
    Returns:
        Signature bytes
        
    Raises:
        DecodeError: If the encoding has the wrong shape
    """
    if isinstance(signature, str):
        signature = decode_base58(signature)
        
    if len(signature) != SIGNATURE_LENGTH:
        raise DecodeError(f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(signature)}")
        
    if not signature[0] & 0x80:
        raise DecodeError("Signature is not in compressed form")
        
    return bytes(signature)


def validate_signing_payload(payload: Union[bytes, str]) -> SigningPayload:
    """
    Validate a signing payload.
    
    Args:
        payload: 32-byte hash or its hex string
        
    Returns:
        Payload bytes
        
    Raises:
        DecodeError: If the hex text is invalid
        InvalidPayloadLength: If the payload is not 32 bytes
    """
    if isinstance(payload, str):
        if not HEX_PATTERN.match(payload):
            raise DecodeError(f"Invalid hex signing payload: {payload!r}")
        payload = hex_to_bytes(payload)
        
    if len(payload) != SIGNING_PAYLOAD_LENGTH:
        raise InvalidPayloadLength(len(payload), SIGNING_PAYLOAD_LENGTH)
        
    return SigningPayload(bytes(payload))


def validate_identifier(value: str, name: str) -> str:
    """
    Validate a contract or function identifier.
    
    Raises:
        UsageError: If the value is empty or not a string
    """
    if not isinstance(value, str) or not value.strip():
        raise UsageError(f"{name} must be a non-empty string")
    return value.strip()


def validate_network(network: Union[Network, str]) -> str:
    """
    Normalize a target network tag.
    
    Unknown tags are passed through; the remote service decides.
    """
    if isinstance(network, Network):
        return network.value
    return validate_identifier(network, "network")
