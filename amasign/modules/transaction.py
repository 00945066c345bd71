"""Transaction module for the Amadeus signing client."""

import logging
from typing import Any

from ..exceptions import ProtocolViolation
from ..providers.base import BaseProvider
from ..types.common import Base58Str
from ..types.transaction import (
    ContractCall,
    SignedTransaction,
    UnsignedTransaction,
)

__all__ = ["TransactionModule"]

logger = logging.getLogger(__name__)

CREATE_TRANSACTION_TOOL = "create_transaction"
SUBMIT_TRANSACTION_TOOL = "submit_transaction"


class TransactionModule:
    """
    Transaction-related operations.
    
    Wraps the build-unsigned and submit-signed tool calls. Signing
    happens locally between the two and is not part of this module.
    """
    
    def __init__(self, provider: BaseProvider) -> None:
        """
        Initialize transaction module.
        
        Args:
            provider: Provider instance
        """
        self._provider = provider
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        
    async def create(self, signer: Base58Str, call: ContractCall) -> UnsignedTransaction:
        """
        Build an unsigned transaction.
        
        Args:
            signer: Base-58 public key of the signer
            call: Contract, function and arguments
            
        Returns:
            Unsigned transaction with its signing payload
            
        Raises:
            RemoteRejected: If the service reports an error
            ProtocolViolation: If blob or signing_payload is missing
            TransportError: If the request fails
        """
        self._logger.info(f"Building {call.contract}.{call.function} for signer {signer}")
        
        data = await self._provider.call_tool(
            CREATE_TRANSACTION_TOOL,
            call.to_arguments(signer),
        )
        
        if not isinstance(data, dict):
            raise ProtocolViolation("create_transaction result is not an object")
            
        for name in ("blob", "signing_payload"):
            if not isinstance(data.get(name), str) or not data[name]:
                raise ProtocolViolation(f"create_transaction result missing {name}")
                
        return UnsignedTransaction.from_dict(data)
        
    async def submit(self, signed: SignedTransaction) -> Any:
        """
        Submit a signed transaction for broadcast.
        
        Args:
            signed: Blob, signature and target network
            
        Returns:
            Decoded broadcast result
            
        Raises:
            RemoteRejected: If the service reports an error
            TransportError: If the request fails
        """
        self._logger.info(f"Submitting transaction to {signed.network}")
        
        result = await self._provider.call_tool(
            SUBMIT_TRANSACTION_TOOL,
            signed.to_arguments(),
        )
        
        self._logger.info("Transaction submitted")
        return result
