"""HTTP provider implementation for the Amadeus signing client."""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientTimeout, ClientSession

from ..constants import (
    DEFAULT_TIMEOUT,
    MCP_ENDPOINT,
    USER_AGENT,
)
from ..exceptions import (
    ProtocolViolation,
    TransportError,
    TimeoutError,
)
from ..providers.base import BaseProvider

__all__ = ["HTTPProvider"]

logger = logging.getLogger(__name__)


class HTTPProvider(BaseProvider):
    """
    HTTP provider for the MCP ledger service.
    
    POSTs JSON-RPC envelopes to a single endpoint. Each request is
    attempted exactly once; there is no retry logic.
    """
    
    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[ClientSession] = None,
        proxy: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Initialize HTTP provider.
        
        Args:
            endpoint: Service URL (default: public MCP endpoint)
            timeout: Total request timeout in seconds
            session: Existing aiohttp session to use
            proxy: Proxy URL for requests
            headers: Additional headers for requests
        """
        super().__init__()
        
        self.endpoint = (endpoint or MCP_ENDPOINT).rstrip("/")
        self.timeout = ClientTimeout(total=timeout)
        self.proxy = proxy
        
        # Setup headers
        self.headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
            "Accept": "application/json",
            **(headers or {}),
        }
        
        # Session management
        self._session = session
        self._owns_session = session is None
        self._connected = False
        
    async def connect(self) -> None:
        """Initialize HTTP session."""
        if self._session is None:
            self._session = ClientSession(
                timeout=self.timeout,
                headers=self.headers,
            )
            
        self._connected = True
        self._logger.info(f"Connected to {self.endpoint}")
        
    async def disconnect(self) -> None:
        """Close HTTP session."""
        if self._session and self._owns_session:
            await self._session.close()
            self._session = None
            
        self._connected = False
        self._logger.info("Disconnected from provider")
        
    @property
    def is_connected(self) -> bool:
        """Check if provider is connected."""
        return (
            self._connected 
            and self._session is not None 
            and not self._session.closed
        )
        
    async def send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST a JSON-RPC envelope.
        
        Args:
            payload: JSON-RPC request object
            
        Returns:
            Decoded JSON response object
            
        Raises:
            TransportError: On connection failure or non-2xx status
            TimeoutError: If the request times out
            ProtocolViolation: If the body is not a JSON object
        """
        if not self.is_connected:
            await self.connect()
            
        try:
            self._logger.debug(f"Request: POST {self.endpoint} id={payload.get('id')}")
            
            async with self._session.post(
                self.endpoint,
                data=json.dumps(payload),
                headers=self.headers,
                proxy=self.proxy,
                timeout=self.timeout,
            ) as response:
                self._logger.debug(f"Response: {response.status}")
                body = await response.read()
                
                if response.status >= 300:
                    snippet = body[:200].decode("utf-8", errors="replace")
                    raise TransportError(
                        f"HTTP error {response.status}: {snippet}",
                        code=response.status,
                    )
                    
        except asyncio.TimeoutError as e:
            raise TimeoutError(
                f"Request timed out after {self.timeout.total}s"
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Network error: {e}") from e
            
        try:
            data = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            raise ProtocolViolation(f"Invalid JSON response: {e}") from e
            
        if not isinstance(data, dict):
            raise ProtocolViolation("JSON-RPC response is not an object")
            
        return data
        
    def __repr__(self) -> str:
        """String representation of provider."""
        return f"{self.__class__.__name__}(endpoint={self.endpoint})"
