"""Amadeus ledger service modules."""

from ..modules.chain import ChainModule, SortOrder
from ..modules.transaction import TransactionModule

__all__ = [
    "ChainModule",
    "SortOrder",
    "TransactionModule",
]
