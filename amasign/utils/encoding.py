"""Encoding and decoding utilities for the Amadeus signing client."""

import json
from typing import Any, Union

from ..exceptions import DecodeError
from ..types.common import Base58Str, HexStr

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "int_to_bytes",
    "bytes_to_int",
    "encode_base58",
    "decode_base58",
    "decode_json",
]

# Constants
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: index for index, char in enumerate(BASE58_ALPHABET)}


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.
    
    Args:
        hex_str: Hex string with or without 0x prefix
        
    Returns:
        Decoded bytes
        
    Raises:
        DecodeError: If hex string is invalid
    """
    if not isinstance(hex_str, str):
        raise DecodeError(f"Expected hex string, got {type(hex_str).__name__}")
    try:
        # Remove 0x prefix if present
        if hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return bytes.fromhex(hex_str)
    except ValueError as e:
        raise DecodeError(f"Invalid hex string: {hex_str!r}") from e


def bytes_to_hex(data: bytes, prefix: bool = False) -> HexStr:
    """
    Convert bytes to hex string.
    
    Args:
        data: Bytes to encode
        prefix: Add 0x prefix
        
    Returns:
        Hex string
    """
    hex_str = data.hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def int_to_bytes(
    value: int,
    length: int,
    byteorder: str = "big",
    signed: bool = False
) -> bytes:
    """
    Convert integer to bytes with specified length.
    
    Args:
        value: Integer value
        length: Number of bytes
        byteorder: 'big' or 'little' endian
        signed: Whether integer is signed
        
    Returns:
        Encoded bytes
    """
    return value.to_bytes(length, byteorder=byteorder, signed=signed)


def bytes_to_int(
    data: bytes,
    byteorder: str = "big",
    signed: bool = False
) -> int:
    """
    Convert bytes to integer.
    
    Args:
        data: Bytes to decode
        byteorder: 'big' or 'little' endian
        signed: Whether integer is signed
        
    Returns:
        Decoded integer
    """
    return int.from_bytes(data, byteorder=byteorder, signed=signed)


def encode_base58(data: bytes) -> Base58Str:
    """
    Encode bytes as Base58 string.
    
    Args:
        data: Bytes to encode
        
    Returns:
        Base58 encoded string
    """
    # Convert to integer
    n = bytes_to_int(data, byteorder="big")
    
    # Encode
    encoded = ""
    while n:
        n, remainder = divmod(n, 58)
        encoded = BASE58_ALPHABET[remainder] + encoded
        
    # Add leading zeros
    for byte in data:
        if byte == 0:
            encoded = "1" + encoded
        else:
            break
            
    return Base58Str(encoded)


def decode_base58(string: str) -> bytes:
    """
    Decode Base58 string to bytes.
    
    Args:
        string: Base58 string
        
    Returns:
        Decoded bytes
        
    Raises:
        DecodeError: If string contains invalid characters
    """
    if not isinstance(string, str):
        raise DecodeError(f"Expected Base58 string, got {type(string).__name__}")
        
    # Decode to integer
    n = 0
    for position, char in enumerate(string):
        try:
            n = n * 58 + _BASE58_INDEX[char]
        except KeyError:
            # Position only: the input may be secret
            raise DecodeError(f"Invalid Base58 character at position {position}") from None
            
    body = n.to_bytes((n.bit_length() + 7) // 8, "big")
    
    # Add leading zeros
    leading_zeros = len(string) - len(string.lstrip("1"))
    return b"\x00" * leading_zeros + body


def decode_json(text: str) -> Any:
    """
    Decode JSON text.
    
    Args:
        text: JSON document
        
    Returns:
        Decoded value
        
    Raises:
        DecodeError: If text is not valid JSON
    """
    try:
        return json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Invalid JSON: {e}") from e
