"""Main Amadeus signing client."""

import logging
from typing import Any, Optional, Union

from .constants import DEFAULT_TIMEOUT, Network
from .crypto.keys import PublicKey, derive_keypair
from .modules import ChainModule, TransactionModule
from .orchestrator import Submission, SubmissionOrchestrator
from .providers import BaseProvider, HTTPProvider
from .types.common import JSONValue
from .types.transaction import ContractCall
from .utils.validation import validate_identifier, validate_network

__all__ = ["Amadeus"]

logger = logging.getLogger(__name__)


class Amadeus:
    """
    Main client for signing and submitting Amadeus transactions.

    Owns a provider, exposes the transaction and chain modules, and runs
    the sign-and-submit pipeline. Private keys never leave this process.
    """

    def __init__(
        self,
        provider: Optional[BaseProvider] = None,
        network: Union[Network, str] = Network.MAINNET,
    ) -> None:
        """
        Initialize Amadeus client.

        Args:
            provider: Provider instance (default: HTTPProvider)
            network: Target network for submitted transactions
        """
        self._provider = provider or HTTPProvider()
        self._network = validate_network(network)

        self._tx = TransactionModule(self._provider)
        self._chain = ChainModule(self._provider)
        self._orchestrator = SubmissionOrchestrator(self._tx)

        logger.info(
            f"Initialized Amadeus client for {self._network} "
            f"with {self._provider.__class__.__name__}"
        )

    @property
    def tx(self) -> TransactionModule:
        """Get transaction module."""
        return self._tx

    @property
    def chain(self) -> ChainModule:
        """Get chain query module."""
        return self._chain

    @property
    def provider(self) -> BaseProvider:
        """Get current provider."""
        return self._provider

    @property
    def network(self) -> str:
        """Get target network."""
        return self._network

    async def connect(self) -> None:
        """Connect to provider."""
        await self._provider.connect()

    async def disconnect(self) -> None:
        """Disconnect from provider."""
        await self._provider.disconnect()

    async def __aenter__(self) -> "Amadeus":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.disconnect()

    @classmethod
    def create_http_client(
        cls,
        network: Union[Network, str] = Network.MAINNET,
        endpoint: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        **kwargs: Any
    ) -> "Amadeus":
        """
        Create client with HTTP provider.

        Args:
            network: Target network
            endpoint: Custom service endpoint
            timeout: Request timeout in seconds
            **kwargs: Additional provider arguments

        Returns:
            Configured Amadeus client
        """
        provider = HTTPProvider(endpoint=endpoint, timeout=timeout, **kwargs)
        return cls(provider=provider, network=network)

    @staticmethod
    def signer_for(seed: Union[bytes, str]) -> PublicKey:
        """Derive the public signer identity for a seed without network I/O."""
        _, public_key = derive_keypair(seed)
        return public_key

    def new_submission(
        self,
        contract: str,
        function: str,
        args: JSONValue = None,
        network: Optional[Union[Network, str]] = None,
    ) -> Submission:
        """Create an IDLE submission record for a contract call."""
        call = ContractCall(
            contract=validate_identifier(contract, "contract"),
            function=validate_identifier(function, "function"),
            args=[] if args is None else args,
        )
        target = validate_network(network) if network is not None else self._network
        return Submission(call=call, network=target)

    async def execute(self, seed: Union[bytes, str], submission: Submission) -> Any:
        """Run the sign-and-submit pipeline for a prepared submission."""
        return await self._orchestrator.execute(seed, submission)

    async def sign_and_submit(
        self,
        seed: Union[bytes, str],
        contract: str,
        function: str,
        args: JSONValue = None,
        network: Optional[Union[Network, str]] = None,
    ) -> Any:
        """
        Build, sign and broadcast a contract call.

        Args:
            seed: Raw seed bytes or base-58 text
            contract: Contract identifier
            function: Function name
            args: JSON-serializable argument list, forwarded as is
            network: Target network (default: client network)

        Returns:
            Decoded broadcast result
        """
        submission = self.new_submission(contract, function, args, network)
        return await self.execute(seed, submission)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<Amadeus "
            f"network={self.network} "
            f"provider={self.provider.__class__.__name__} "
            f"connected={self.provider.is_connected}>"
        )
