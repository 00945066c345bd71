"""Read-only ledger queries for the Amadeus signing client."""

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import UsageError
from ..providers.base import BaseProvider
from ..utils.validation import validate_identifier

__all__ = ["ChainModule", "SortOrder"]

logger = logging.getLogger(__name__)


class SortOrder:
    """Transaction history sort orders."""
    ASC = "asc"
    DESC = "desc"


class ChainModule:
    """
    Ledger query operations.
    
    Accounts, blocks, transactions, validators and contract storage.
    All queries are single tool calls returning the decoded result.
    """
    
    def __init__(self, provider: BaseProvider) -> None:
        """
        Initialize chain module.
        
        Args:
            provider: Provider instance
        """
        self._provider = provider
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        
    async def get_account_balance(self, address: str) -> Dict[str, Any]:
        """
        Get balances of an account across all assets.
        
        Args:
            address: Base-58 account public key
        """
        address = validate_identifier(address, "address")
        return await self._provider.call_tool("get_account_balance", {"address": address})
        
    async def get_chain_stats(self) -> Dict[str, Any]:
        """Get height, total transactions and total accounts."""
        return await self._provider.call_tool("get_chain_stats", {})
        
    async def get_block_by_height(self, height: int) -> List[Dict[str, Any]]:
        """
        Get all entries at a block height.
        
        Args:
            height: Block height
            
        Raises:
            UsageError: If height is negative
        """
        if isinstance(height, bool) or not isinstance(height, int) or height < 0:
            raise UsageError(f"Invalid block height: {height!r}")
        return await self._provider.call_tool("get_block_by_height", {"height": height})
        
    async def get_transaction(self, tx_hash: str) -> Dict[str, Any]:
        """Get a transaction by hash."""
        tx_hash = validate_identifier(tx_hash, "tx_hash")
        return await self._provider.call_tool("get_transaction", {"tx_hash": tx_hash})
        
    async def get_transaction_history(
        self,
        address: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Get transaction history for an account.
        
        Args:
            address: Base-58 account public key
            limit: Maximum number of entries
            offset: Number of entries to skip
            sort: SortOrder.ASC or SortOrder.DESC
        """
        arguments: Dict[str, Any] = {"address": validate_identifier(address, "address")}
        
        if limit is not None:
            if limit <= 0:
                raise UsageError(f"Invalid limit: {limit}")
            arguments["limit"] = limit
        if offset is not None:
            if offset < 0:
                raise UsageError(f"Invalid offset: {offset}")
            arguments["offset"] = offset
        if sort is not None:
            if sort not in (SortOrder.ASC, SortOrder.DESC):
                raise UsageError(f"Invalid sort order: {sort}")
            arguments["sort"] = sort
            
        return await self._provider.call_tool("get_transaction_history", arguments)
        
    async def get_validators(self) -> Dict[str, Any]:
        """Get the current validator set."""
        return await self._provider.call_tool("get_validators", {})
        
    async def get_contract_state(self, contract_address: str, key: str) -> Dict[str, Any]:
        """
        Get one value from contract storage.
        
        Args:
            contract_address: Contract address
            key: Storage key
        """
        return await self._provider.call_tool(
            "get_contract_state",
            {
                "contract_address": validate_identifier(contract_address, "contract_address"),
                "key": validate_identifier(key, "key"),
            },
        )
