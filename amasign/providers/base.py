"""Base JSON-RPC provider interface for the Amadeus signing client."""

import itertools
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..constants import JSONRPC_VERSION, TOOLS_CALL_METHOD
from ..exceptions import ProtocolViolation, RemoteRejected

__all__ = ["BaseProvider"]

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """
    Abstract base provider for the remote MCP ledger service.
    
    Subclasses implement the transport (``send``); envelope construction,
    error detection and tool result decoding live here so every transport
    shares them.
    """
    
    def __init__(self) -> None:
        """Initialize provider with its own request id counter."""
        self._ids = itertools.count(1)
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        
    @abstractmethod
    async def send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send one JSON-RPC envelope and return the decoded response.
        
        Args:
            payload: JSON-RPC request object
            
        Returns:
            Decoded JSON response object
            
        Raises:
            TransportError: If the request cannot be delivered
            ProtocolViolation: If the response is not a JSON object
        """
        raise NotImplementedError
        
    @abstractmethod
    async def connect(self) -> None:
        """
        Connect to the provider.
        
        Raises:
            ProviderError: If connection fails
        """
        raise NotImplementedError
        
    @abstractmethod
    async def disconnect(self) -> None:
        """
        Disconnect from the provider.
        """
        raise NotImplementedError
        
    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """
        Check if provider is connected.
        
        Returns:
            True if connected, False otherwise
        """
        raise NotImplementedError
        
    def build_request(
        self,
        method: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Build a JSON-RPC 2.0 request envelope."""
        return {
            "jsonrpc": JSONRPC_VERSION,
            "id": next(self._ids),
            "method": method,
            "params": params or {},
        }
        
    async def request(
        self, 
        method: str, 
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make a JSON-RPC request.
        
        Args:
            method: JSON-RPC method name
            params: Optional parameters for the request
            
        Returns:
            The ``result`` member of the response
            
        Raises:
            RemoteRejected: If the response carries an ``error`` member
            ProtocolViolation: If the response has no ``result``
        """
        payload = self.build_request(method, params)
        self._logger.debug(f"Request {payload['id']}: {method}")
        
        response = await self.send(payload)
        if not isinstance(response, dict):
            raise ProtocolViolation("JSON-RPC response is not an object")
            
        if response.get("error") is not None:
            error = response["error"]
            code = error.get("code") if isinstance(error, dict) else None
            raise RemoteRejected(
                f"Remote error: {json.dumps(error)}",
                detail=error,
                code=code if isinstance(code, int) else None,
            )
            
        if "result" not in response:
            raise ProtocolViolation("JSON-RPC response has neither result nor error")
            
        return response["result"]
        
    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> Any:
        """
        Call an MCP tool and decode its first text content block.
        
        Args:
            name: Tool name
            arguments: Tool arguments
            
        Returns:
            Decoded JSON of ``result.content[0].text``, or the raw text
            when it is not JSON
            
        Raises:
            RemoteRejected: If the call or the tool reports an error
            ProtocolViolation: If the result has no text content
        """
        result = await self.request(
            TOOLS_CALL_METHOD,
            {"name": name, "arguments": arguments},
        )
        text = _first_text_content(result)
        
        if result.get("isError"):
            raise RemoteRejected(f"Tool {name} failed: {text}", detail=text)
            
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text
            
    async def __aenter__(self) -> "BaseProvider":
        """Async context manager entry."""
        await self.connect()
        return self
        
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.disconnect()
        
    def __repr__(self) -> str:
        """String representation of provider."""
        return f"{self.__class__.__name__}()"


def _first_text_content(result: Any) -> str:
    """Extract ``content[0].text`` from a tool result."""
    if not isinstance(result, dict):
        raise ProtocolViolation("Tool result is not an object")
        
    content = result.get("content")
    if not isinstance(content, list) or not content:
        raise ProtocolViolation("Tool result has no content")
        
    first = content[0]
    if not isinstance(first, dict) or not isinstance(first.get("text"), str):
        raise ProtocolViolation("Tool result content has no text")
        
    return first["text"]
