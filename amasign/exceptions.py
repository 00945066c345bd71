"""Amadeus signing client exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "AmadeusError",
    "UsageError",
    "DecodeError",
    "InvalidSeedEncoding",
    "CryptoError",
    "ProviderError",
    "TransportError",
    "TimeoutError",
    "RemoteRejected",
    "ProtocolViolation",
    "InvalidPayloadLength",
    "SubmissionError",
    "BuildRequestFailed",
]


class AmadeusError(Exception):
    """Base exception for all Amadeus client errors."""
    
    def __init__(
        self, 
        message: str, 
        code: Optional[int] = None, 
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data
        
    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class UsageError(AmadeusError):
    """Raised when command-line input is missing or malformed."""
    pass


class DecodeError(AmadeusError):
    """Raised when a seed, key or payload cannot be decoded from text."""
    pass


class InvalidSeedEncoding(DecodeError):
    """Raised when the seed's base-58 text cannot be decoded."""
    pass


class CryptoError(AmadeusError):
    """Raised when a cryptographic operation fails."""
    pass


class ProviderError(AmadeusError):
    """Raised when the remote service call fails."""
    pass


class TransportError(ProviderError):
    """Raised on connection failures and non-2xx HTTP status."""
    pass


class TimeoutError(TransportError):
    """Raised when a request exceeds its timeout."""
    pass


class RemoteRejected(ProviderError):
    """Raised when a response carries an application-level error field."""
    
    def __init__(
        self,
        message: str,
        detail: Optional[Any] = None,
        code: Optional[int] = None,
    ) -> None:
        super().__init__(message, code=code, data=detail)
        self.detail = detail


class ProtocolViolation(ProviderError):
    """Raised when a response is missing expected fields or is malformed."""
    pass


class InvalidPayloadLength(ProtocolViolation):
    """Raised when a signing payload is not the expected width."""
    
    def __init__(self, actual: int, expected: int) -> None:
        super().__init__(
            f"Signing payload must be {expected} bytes, got {actual}"
        )
        self.actual = actual
        self.expected = expected


class SubmissionError(AmadeusError):
    """Raised when a phase of the submission pipeline fails."""
    
    def __init__(self, message: str, phase: Optional[str] = None) -> None:
        super().__init__(message)
        self.phase = phase


class BuildRequestFailed(SubmissionError):
    """Raised when the unsigned transaction could not be obtained."""
    pass
