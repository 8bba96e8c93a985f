"""Superseded v1 wallet client and its wire types."""

from .client import LegacyAPIClient
from .types import AddressBalance, AddressUsage, SiacoinOutput, TransactionFees, WalletTransaction

__all__ = [
    "LegacyAPIClient",
    "AddressBalance",
    "AddressUsage",
    "SiacoinOutput",
    "TransactionFees",
    "WalletTransaction",
]
