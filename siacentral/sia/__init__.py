"""Clients and payload types for the Sia Central v2 API."""

from . import filters
from .async_client import AsyncAPIClient
from .client import APIClient
from .filters import HostFilter, HostSort
from .types import (
    AddressBalance,
    AddressUsage,
    APIFees,
    AvgHostBenchmark,
    HostBenchmark,
    HostConfig,
    HostDetails,
    NetworkAverages,
    RPCPriceTable,
    SiacoinOutput,
    SiafundOutput,
    Transaction,
    TransactionFees,
    UniqueID,
)

__all__ = [
    "APIClient",
    "AsyncAPIClient",
    "HostFilter",
    "HostSort",
    "filters",
    "AddressBalance",
    "AddressUsage",
    "APIFees",
    "AvgHostBenchmark",
    "HostBenchmark",
    "HostConfig",
    "HostDetails",
    "NetworkAverages",
    "RPCPriceTable",
    "SiacoinOutput",
    "SiafundOutput",
    "Transaction",
    "TransactionFees",
    "UniqueID",
]
