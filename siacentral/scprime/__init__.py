"""ScPrime network client."""

from .client import ScPrimeAPIClient
from .types import ConnectionReport

__all__ = ["ScPrimeAPIClient", "ConnectionReport"]
