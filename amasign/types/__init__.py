"""Type definitions for the Amadeus signing client."""

# Common types
from ..types.common import (
    HexStr,
    Base58Str,
    PrivateKeyBytes,
    PublicKeyBytes,
    Signature,
    SigningPayload,
    TransactionBlob,
    JSONValue,
)

# Transaction types
from ..types.transaction import (
    ContractCall,
    UnsignedTransaction,
    SignedTransaction,
)

__all__ = [
    # Common
    "HexStr",
    "Base58Str",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "Signature",
    "SigningPayload",
    "TransactionBlob",
    "JSONValue",
    
    # Transactions
    "ContractCall",
    "UnsignedTransaction",
    "SignedTransaction",
]
