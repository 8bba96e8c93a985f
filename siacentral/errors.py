"""
Exception classes for the Sia Central clients.

Every client raises subclasses of SiaCentralError so callers can tell local
validation problems, transport failures and API-reported failures apart.
"""

from __future__ import annotations

from typing import Optional


class SiaCentralError(Exception):
    """Base exception for Sia Central client errors."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(SiaCentralError, ValueError):
    """Raised before any network call when an argument breaks a client-side limit."""


class TransportError(SiaCentralError):
    """Raised when a request could not be completed or its body could not be decoded."""


class APIUnreachableError(TransportError):
    """Raised when the API cannot be reached (DNS, connect, protocol errors)."""


class APITimeoutError(APIUnreachableError):
    """Raised when the request times out."""


class InvalidResponseError(TransportError):
    """Raised when the response body is not valid JSON."""


class MalformedEnvelopeError(TransportError):
    """Raised when the decoded JSON does not have the expected envelope or payload shape."""


class APIError(SiaCentralError):
    """Raised when the API reports a failure through the status code or envelope type."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        response_type: Optional[str] = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.response_type = response_type
