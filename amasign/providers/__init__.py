"""Provider implementations for the Amadeus signing client."""

from ..providers.base import BaseProvider
from ..providers.http import HTTPProvider

__all__ = [
    "BaseProvider",
    "HTTPProvider", 
]
