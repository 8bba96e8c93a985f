"""
Python clients for the Sia Central blockchain-indexing API.

``siacentral.sia`` is the current v2 surface (hosts, wallet, broadcast),
``siacentral.scprime`` exposes host troubleshooting on the ScPrime network and
``siacentral.legacy`` keeps the superseded v1 wallet endpoints. See DESIGN.md
for details.
"""

__version__ = "0.1.0"

from .capabilities import AsyncHostAPI, AsyncWalletAPI, HostAPI, WalletAPI
from .config import ClientConfig, default_config
from .currency import Currency
from .errors import (
    APIError,
    APITimeoutError,
    APIUnreachableError,
    InvalidResponseError,
    MalformedEnvelopeError,
    SiaCentralError,
    TransportError,
    ValidationError,
)
from .transport import APIResponse
from .sia import APIClient, AsyncAPIClient
from .scprime import ScPrimeAPIClient
from .legacy import LegacyAPIClient

__all__ = [
    "__version__",
    "ClientConfig",
    "default_config",
    "Currency",
    "APIResponse",
    "APIClient",
    "AsyncAPIClient",
    "ScPrimeAPIClient",
    "LegacyAPIClient",
    "WalletAPI",
    "HostAPI",
    "AsyncWalletAPI",
    "AsyncHostAPI",
    "SiaCentralError",
    "ValidationError",
    "TransportError",
    "APIUnreachableError",
    "APITimeoutError",
    "InvalidResponseError",
    "MalformedEnvelopeError",
    "APIError",
]
