"""BLS12-381 key management for the Amadeus signing client."""

import secrets
from typing import Tuple, Union

from py_ecc.bls.ciphersuites import G2Basic
from py_ecc.bls.g2_primitives import pubkey_to_G1

from ..constants import CURVE_ORDER, PRIVATE_KEY_LENGTH, SEED_LENGTH
from ..exceptions import CryptoError, DecodeError
from ..types.common import Base58Str, PrivateKeyBytes, PublicKeyBytes
from ..utils.encoding import bytes_to_int, encode_base58, int_to_bytes
from ..utils.validation import (
    validate_private_key,
    validate_public_key,
    validate_seed,
)

__all__ = ["PrivateKey", "PublicKey", "derive_keypair", "generate_seed"]


class PrivateKey:
    """
    BLS12-381 private scalar wrapper.
    
    Holds the scalar reduced modulo the curve order and derives the
    matching G1 public key (minimal-pubkey-size variant).
    """
    
    def __init__(self, key: Union[bytes, str, "PrivateKey"]) -> None:
        """
        Initialize private key.
        
        Args:
            key: 32-byte big-endian scalar, hex string, or another PrivateKey
            
        Raises:
            CryptoError: If the scalar is zero or not below the curve order
        """
        if isinstance(key, PrivateKey):
            self._secret = key._secret
            return
            
        self._secret = PrivateKeyBytes(validate_private_key(key))
        
    @classmethod
    def from_seed(cls, seed: Union[bytes, str]) -> "PrivateKey":
        """
        Derive private key from seed.
        
        The seed is read as a little-endian integer and reduced modulo
        the scalar field order.
        
        Args:
            seed: Raw seed bytes or base-58 text (any length)
            
        Returns:
            New PrivateKey instance
            
        Raises:
            InvalidSeedEncoding: If the seed text cannot be decoded
            CryptoError: If the seed reduces to zero
        """
        seed_bytes = validate_seed(seed)
        scalar = bytes_to_int(seed_bytes, byteorder="little") % CURVE_ORDER
        if scalar == 0:
            raise CryptoError("Seed reduces to the zero scalar")
        return cls(int_to_bytes(scalar, PRIVATE_KEY_LENGTH, byteorder="big"))
        
    @classmethod
    def from_bytes(cls, data: bytes) -> "PrivateKey":
        """
        Load private key from a serialized scalar.
        
        Args:
            data: 32-byte big-endian scalar, already reduced
            
        Raises:
            CryptoError: If the scalar is zero or not below the curve order
        """
        if not isinstance(data, (bytes, bytearray)):
            raise CryptoError(f"Private key must be bytes, got {type(data).__name__}")
        return cls(bytes(data))
        
    @classmethod
    def from_base58(cls, seed: str) -> "PrivateKey":
        """Derive private key from a base-58 seed."""
        return cls.from_seed(seed)
        
    @classmethod
    def create(cls) -> Tuple["PrivateKey", Base58Str]:
        """
        Create new random private key.
        
        Returns:
            Tuple of (private_key, base-58 seed)
        """
        while True:
            seed = generate_seed()
            try:
                return cls.from_seed(seed), seed
            except CryptoError:
                # Zero scalar, practically unreachable
                continue
                
    @property
    def secret(self) -> PrivateKeyBytes:
        """Get private scalar as 32 big-endian bytes."""
        return self._secret
        
    @property
    def scalar(self) -> int:
        """Get private scalar as an integer."""
        return bytes_to_int(self._secret, byteorder="big")
        
    def public_key(self) -> "PublicKey":
        """
        Get corresponding public key.
        
        Returns:
            PublicKey for scalar * G1
        """
        try:
            point = G2Basic.SkToPk(self.scalar)
        except Exception as e:
            raise CryptoError(f"Public key derivation failed: {e}") from e
        return PublicKey(bytes(point))
        
    def sign(self, signing_payload: bytes) -> bytes:
        """Sign a transaction signing payload."""
        from .signature import sign
        return sign(self, signing_payload)
        
    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PrivateKey):
            return False
        return secrets.compare_digest(self._secret, other._secret)
        
    def __hash__(self) -> int:
        return hash(self._secret)
        
    def __repr__(self) -> str:
        """String representation."""
        return "PrivateKey(****)"


class PublicKey:
    """
    BLS12-381 public key wrapper.
    
    A compressed G1 point, base-58 encoded when used as a signer identity.
    """
    
    def __init__(self, key: Union[bytes, str, "PublicKey"]) -> None:
        """
        Initialize public key.
        
        Args:
            key: Compressed G1 point as bytes, base-58 string, or another PublicKey
            
        Raises:
            DecodeError: If the key is not a valid compressed point
        """
        if isinstance(key, PublicKey):
            self._point = key._point
            return
            
        key_bytes = validate_public_key(key)
        try:
            pubkey_to_G1(key_bytes)
        except Exception as e:
            raise DecodeError(f"Invalid public key point: {e}") from e
        self._point = PublicKeyBytes(key_bytes)
        
    @classmethod
    def from_base58(cls, text: str) -> "PublicKey":
        """Parse a base-58 encoded public key."""
        return cls(text)
        
    @property
    def point(self) -> PublicKeyBytes:
        """Get compressed public key bytes."""
        return self._point
        
    def base58(self) -> Base58Str:
        """Get public key as base-58 text."""
        return encode_base58(self._point)
        
    def hex(self) -> str:
        """Get public key as hex string."""
        return self._point.hex()
        
    def verify(self, signature: Union[bytes, str], signing_payload: bytes) -> bool:
        """Verify a transaction signature made with the matching private key."""
        from .signature import verify
        return verify(self, signing_payload, signature)
        
    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PublicKey):
            return False
        return self._point == other._point
        
    def __hash__(self) -> int:
        return hash(self._point)
        
    def __str__(self) -> str:
        return self.base58()
        
    def __repr__(self) -> str:
        """String representation."""
        return f"PublicKey({self.base58()})"


def generate_seed(length: int = SEED_LENGTH) -> Base58Str:
    """Generate a random seed as base-58 text."""
    return encode_base58(secrets.token_bytes(length))


def derive_keypair(seed: Union[bytes, str]) -> Tuple[PrivateKey, PublicKey]:
    """
    Derive a keypair from a seed.
    
    Args:
        seed: Raw seed bytes or base-58 text
        
    Returns:
        Tuple of (private_key, public_key)
        
    Raises:
        InvalidSeedEncoding: If the seed text cannot be decoded
        CryptoError: If the seed reduces to zero
    """
    private_key = PrivateKey.from_seed(seed)
    return private_key, private_key.public_key()
