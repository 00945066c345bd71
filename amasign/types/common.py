"""Common type definitions for the Amadeus signing client."""

from typing import Any, Dict, List, NewType, Union

__all__ = [
    "HexStr",
    "Base58Str",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "Signature",
    "SigningPayload",
    "TransactionBlob",
    "JSONValue",
]

# Text encodings
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

Base58Str = NewType("Base58Str", str)
"""Base-58 string (Bitcoin alphabet)."""

# Crypto types
PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte big-endian BLS12-381 scalar."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""48-byte compressed G1 point."""

Signature = NewType("Signature", bytes)
"""96-byte compressed G2 point."""

SigningPayload = NewType("SigningPayload", bytes)
"""32-byte hash supplied by the remote service."""

# Ledger types
TransactionBlob = NewType("TransactionBlob", str)
"""Opaque server-produced transaction encoding."""

JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
"""Arbitrary JSON value forwarded without interpretation."""
