"""
Amadeus transaction signing client.

Builds, signs and broadcasts Amadeus ledger transactions through the
MCP service. Signing happens locally with BLS12-381; the private key
never leaves the process.
"""

from typing import Any, Optional, Union

from .client import Amadeus
from .constants import Network
from .exceptions import (
    AmadeusError,
    UsageError,
    DecodeError,
    InvalidSeedEncoding,
    CryptoError,
    ProviderError,
    TransportError,
    RemoteRejected,
    ProtocolViolation,
    InvalidPayloadLength,
    SubmissionError,
    BuildRequestFailed,
)
from .providers import BaseProvider, HTTPProvider
from .crypto import PrivateKey, PublicKey, derive_keypair, sign, verify
from .orchestrator import Submission, SubmissionOrchestrator, SubmissionState

__version__ = "1.0.0"

__all__ = [
    # Main client
    "Amadeus",
    "connect",
    
    # Network
    "Network",
    
    # Providers
    "BaseProvider",
    "HTTPProvider",
    
    # Exceptions
    "AmadeusError",
    "UsageError",
    "DecodeError",
    "InvalidSeedEncoding",
    "CryptoError",
    "ProviderError",
    "TransportError",
    "RemoteRejected",
    "ProtocolViolation",
    "InvalidPayloadLength",
    "SubmissionError",
    "BuildRequestFailed",
    
    # Crypto
    "PrivateKey",
    "PublicKey",
    "derive_keypair",
    "sign",
    "verify",
    
    # Submission
    "Submission",
    "SubmissionOrchestrator",
    "SubmissionState",
]


def connect(
    network: Union[Network, str] = Network.MAINNET,
    endpoint: Optional[str] = None,
    **kwargs: Any
) -> Amadeus:
    """
    Create a client for the Amadeus MCP service.
    
    Args:
        network: Target network for submitted transactions
        endpoint: Custom service endpoint
        **kwargs: Additional HTTPProvider arguments
        
    Returns:
        Amadeus client, usable as an async context manager
        
    Example:
        >>> async with amasign.connect(network="testnet") as client:
        ...     await client.sign_and_submit(seed, "Coin", "transfer", args)
    """
    return Amadeus.create_http_client(network=network, endpoint=endpoint, **kwargs)
