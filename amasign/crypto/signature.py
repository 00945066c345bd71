"""Transaction signatures for the Amadeus signing client."""

import hashlib
from typing import Any, Union

from py_ecc.bls.ciphersuites import G2Basic
from py_ecc.bls.hash_to_curve import hash_to_G2

from ..constants import SIGNATURE_DST
from ..crypto.keys import PrivateKey, PublicKey
from ..exceptions import AmadeusError, CryptoError
from ..types.common import Base58Str, Signature, SigningPayload
from ..utils.encoding import encode_base58
from ..utils.validation import validate_signature, validate_signing_payload

__all__ = [
    "TransactionSignatureScheme",
    "hash_payload",
    "sign",
    "verify",
    "encode_signature",
]


class TransactionSignatureScheme(G2Basic):
    """Minimal-pubkey-size BLS scheme keyed by the transaction DST."""
    DST = SIGNATURE_DST


def hash_payload(signing_payload: bytes) -> Any:
    """
    Map a signing payload onto G2.
    
    Args:
        signing_payload: 32-byte hash from the remote service
        
    Returns:
        Projective G2 point
    """
    payload = validate_signing_payload(signing_payload)
    return hash_to_G2(payload, SIGNATURE_DST, hashlib.sha256)


def sign(private_key: PrivateKey, signing_payload: SigningPayload) -> Signature:
    """
    Sign a transaction signing payload.
    
    Args:
        private_key: Derived private key
        signing_payload: 32-byte hash from the remote service
        
    Returns:
        96-byte compressed G2 signature
        
    Raises:
        InvalidPayloadLength: If payload is not 32 bytes
        CryptoError: If signing fails
    """
    payload = validate_signing_payload(signing_payload)
    
    try:
        signature = TransactionSignatureScheme.Sign(private_key.scalar, payload)
    except Exception as e:
        raise CryptoError(f"Signing failed: {e}") from e
        
    return Signature(bytes(signature))


def verify(
    public_key: PublicKey,
    signing_payload: bytes,
    signature: Union[bytes, str],
) -> bool:
    """
    Verify a transaction signature.
    
    Args:
        public_key: Signer public key
        signing_payload: 32-byte hash that was signed
        signature: Compressed signature bytes or base-58 text
        
    Returns:
        True if signature is valid
    """
    try:
        payload = validate_signing_payload(signing_payload)
        sig_bytes = validate_signature(signature)
    except AmadeusError:
        return False
        
    return TransactionSignatureScheme.Verify(public_key.point, payload, sig_bytes)


def encode_signature(signature: bytes) -> Base58Str:
    """Encode signature for transport."""
    return encode_base58(signature)
