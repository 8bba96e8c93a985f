"""Asyncio client for the Sia Central v2 API, mirroring ``APIClient``."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional
from urllib.parse import quote

import httpx

from siacentral.config import ClientConfig, default_config
from siacentral.decoding import as_list
from siacentral.sia.client import addresses_body, transactions_body
from siacentral.sia.filters import HostFilter, build_host_query
from siacentral.sia.types import (
    AddressBalance,
    AddressUsage,
    APIFees,
    HostDetails,
    NetworkAverages,
    TransactionFees,
)
from siacentral.transport import APIResponse, AsyncTransport, ensure_success

logger = logging.getLogger(__name__)


class AsyncAPIClient:
    """
    Async client for the Sia Central v2 API surface.

    Example:
        async with AsyncAPIClient() as client:
            hosts = await client.get_active_hosts(0, 50, filters.online(True))
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self._transport = AsyncTransport(self.config, async_client=async_client)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "AsyncAPIClient":
        return self

    async def __aexit__(self, *_exc_info: Any) -> None:
        await self.aclose()

    async def _call(
        self,
        method: str,
        target: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> APIResponse:
        status_code, envelope = await self._transport.request(
            method, target, params=params, body=body
        )
        return ensure_success(status_code, envelope)

    async def get_network_averages(self) -> NetworkAverages:
        envelope = await self._call("GET", "/hosts/network/averages")
        return NetworkAverages.from_dict(envelope.data)

    async def get_active_hosts(
        self, page: int = 0, limit: int = -1, *filters: HostFilter
    ) -> List[HostDetails]:
        params = build_host_query(page, limit, filters, max_limit=self.config.max_hosts_limit)
        envelope = await self._call("GET", "/hosts", params=params)
        return [HostDetails.from_dict(item) for item in as_list(envelope.get("hosts"), "hosts")]

    async def get_host(self, host_id: str) -> HostDetails:
        encoded = quote(host_id, safe="")
        envelope = await self._call("GET", f"/hosts/{encoded}")
        return HostDetails.from_dict(envelope.get("host"))

    async def get_transaction_fees(self) -> TransactionFees:
        envelope = await self._call("GET", "/wallet/fees")
        return TransactionFees.from_dict(envelope.data)

    async def get_api_fees(self) -> APIFees:
        envelope = await self._call("GET", "/wallet/fees")
        return APIFees.from_dict(envelope.get("api"))

    async def find_address_balance(
        self, limit: int, page: int, addresses: Iterable[str]
    ) -> AddressBalance:
        body = addresses_body(addresses, max_addresses=self.config.max_addresses)
        envelope = await self._call(
            "POST", "/wallet/addresses", params={"limit": limit, "page": page}, body=body
        )
        return AddressBalance.from_dict(envelope.data)

    async def find_used_addresses(self, addresses: Iterable[str]) -> List[AddressUsage]:
        body = addresses_body(addresses, max_addresses=self.config.max_addresses)
        envelope = await self._call("POST", "/wallet/addresses/used", body=body)
        return [AddressUsage.from_dict(item) for item in as_list(envelope.get("addresses"), "addresses")]

    async def get_address_balance(self, limit: int, page: int, address: str) -> AddressBalance:
        encoded = quote(address, safe="")
        envelope = await self._call(
            "GET", f"/wallet/addresses/{encoded}", params={"limit": limit, "page": page}
        )
        return AddressBalance.from_dict(envelope.data)

    async def broadcast_transaction_set(self, transactions: Iterable[Mapping[str, Any]]) -> None:
        body = transactions_body(transactions)
        await self._call("POST", "/wallet/broadcast", body=body)
        logger.debug("Broadcast transaction set of %d transactions", len(body["transactions"]))
