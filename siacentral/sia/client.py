"""
Blocking client for the Sia Central v2 API.

Each method validates its arguments locally, sends one request through the
shared transport and raises APIError when the status code is outside 2xx or
the envelope type is not ``"success"``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional
from urllib.parse import quote

import httpx

from siacentral.config import ClientConfig, default_config
from siacentral.decoding import as_list
from siacentral.sia.filters import HostFilter, build_host_query
from siacentral.sia.types import (
    AddressBalance,
    AddressUsage,
    APIFees,
    HostDetails,
    NetworkAverages,
    TransactionFees,
)
from siacentral.transport import APIResponse, Transport, ensure_success
from siacentral.validators import check_addresses

logger = logging.getLogger(__name__)


def addresses_body(addresses: Iterable[str], *, max_addresses: int) -> Dict[str, Any]:
    return {"addresses": check_addresses(addresses, max_addresses=max_addresses)}


def transactions_body(transactions: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    return {"transactions": list(transactions)}


class APIClient:
    """Client for the Sia Central v2 API surface."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config or default_config
        self._transport = Transport(self.config, http_client=http_client)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *_exc_info: Any) -> None:
        self.close()

    def _call(
        self,
        method: str,
        target: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> APIResponse:
        status_code, envelope = self._transport.request(method, target, params=params, body=body)
        return ensure_success(status_code, envelope)

    def get_network_averages(self) -> NetworkAverages:
        """Average settings and benchmarks of all active hosts on the network."""
        envelope = self._call("GET", "/hosts/network/averages")
        return NetworkAverages.from_dict(envelope.data)

    def get_active_hosts(self, page: int = 0, limit: int = -1, *filters: HostFilter) -> List[HostDetails]:
        """
        List hosts successfully scanned in the last 24 hours.

        Args:
            page: Zero-based page; negative values are treated as 0.
            limit: Page size; negative values or values above the server
                maximum (500) are replaced by the maximum.
            *filters: Filters from ``siacentral.sia.filters``, applied in order.
        """
        params = build_host_query(page, limit, filters, max_limit=self.config.max_hosts_limit)
        envelope = self._call("GET", "/hosts", params=params)
        return [HostDetails.from_dict(item) for item in as_list(envelope.get("hosts"), "hosts")]

    def get_host(self, host_id: str) -> HostDetails:
        """Find a host by public key or netaddress."""
        encoded = quote(host_id, safe="")
        envelope = self._call("GET", f"/hosts/{encoded}")
        return HostDetails.from_dict(envelope.get("host"))

    def get_transaction_fees(self) -> TransactionFees:
        """Current recommended transaction fee range of the Sia network."""
        envelope = self._call("GET", "/wallet/fees")
        return TransactionFees.from_dict(envelope.data)

    def get_api_fees(self) -> APIFees:
        """Current Sia Central relay fee and payout address."""
        envelope = self._call("GET", "/wallet/fees")
        return APIFees.from_dict(envelope.get("api"))

    def find_address_balance(self, limit: int, page: int, addresses: Iterable[str]) -> AddressBalance:
        """Unspent outputs and the last ``limit`` transactions for a list of addresses."""
        body = addresses_body(addresses, max_addresses=self.config.max_addresses)
        envelope = self._call(
            "POST", "/wallet/addresses", params={"limit": limit, "page": page}, body=body
        )
        return AddressBalance.from_dict(envelope.data)

    def find_used_addresses(self, addresses: Iterable[str]) -> List[AddressUsage]:
        """Addresses from the list that have been seen in a transaction on chain."""
        body = addresses_body(addresses, max_addresses=self.config.max_addresses)
        envelope = self._call("POST", "/wallet/addresses/used", body=body)
        return [AddressUsage.from_dict(item) for item in as_list(envelope.get("addresses"), "addresses")]

    def get_address_balance(self, limit: int, page: int, address: str) -> AddressBalance:
        """Unspent outputs and the last ``limit`` transactions of one address."""
        encoded = quote(address, safe="")
        envelope = self._call(
            "GET", f"/wallet/addresses/{encoded}", params={"limit": limit, "page": page}
        )
        return AddressBalance.from_dict(envelope.data)

    def broadcast_transaction_set(self, transactions: Iterable[Mapping[str, Any]]) -> None:
        """Submit a signed transaction set to the network."""
        body = transactions_body(transactions)
        self._call("POST", "/wallet/broadcast", body=body)
        logger.debug("Broadcast transaction set of %d transactions", len(body["transactions"]))
