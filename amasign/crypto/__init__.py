"""Cryptographic utilities for the Amadeus signing client."""

from ..crypto.keys import PrivateKey, PublicKey, derive_keypair, generate_seed
from ..crypto.signature import (
    TransactionSignatureScheme,
    hash_payload,
    sign,
    verify,
    encode_signature,
)

__all__ = [
    # Keys
    "PrivateKey",
    "PublicKey",
    "derive_keypair",
    "generate_seed",
    
    # Signatures
    "TransactionSignatureScheme",
    "hash_payload",
    "sign",
    "verify",
    "encode_signature",
]
