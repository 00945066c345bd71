"""Transaction-related type definitions for the Amadeus signing client."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..types.common import (
    Base58Str,
    HexStr,
    JSONValue,
    TransactionBlob,
)

__all__ = [
    "ContractCall",
    "UnsignedTransaction",
    "SignedTransaction",
]


@dataclass(frozen=True)
class ContractCall:
    """Contract function invocation to be wrapped in a transaction."""
    contract: str
    function: str
    args: JSONValue = field(default_factory=list)
    
    def to_arguments(self, signer: Base58Str) -> Dict[str, Any]:
        """Build create_transaction tool arguments."""
        return {
            "signer": signer,
            "contract": self.contract,
            "function": self.function,
            "args": self.args,
        }


@dataclass(frozen=True)
class UnsignedTransaction:
    """Unsigned transaction returned by create_transaction."""
    blob: TransactionBlob
    signing_payload: HexStr
    transaction_hash: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UnsignedTransaction":
        """
        Build from the decoded tool result.
        
        Raises:
            KeyError: If blob or signing_payload is missing
        """
        return cls(
            blob=TransactionBlob(data["blob"]),
            signing_payload=HexStr(data["signing_payload"]),
            transaction_hash=data.get("transaction_hash"),
            raw=dict(data),
        )


@dataclass(frozen=True)
class SignedTransaction:
    """Signed transaction ready for submit_transaction."""
    transaction: TransactionBlob
    signature: Base58Str
    network: str
    
    def to_arguments(self) -> Dict[str, Any]:
        """Build submit_transaction tool arguments."""
        return {
            "transaction": self.transaction,
            "signature": self.signature,
            "network": self.network,
        }
