"""
Client for the superseded v1 wallet API.

Kept for callers still on the old wire format. The base URL is part of the
client's ClientConfig rather than process-wide state.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional
from urllib.parse import quote

import httpx

from siacentral.config import LEGACY_BASE_URL, ClientConfig, default_config
from siacentral.decoding import as_list
from siacentral.legacy.types import AddressBalance, AddressUsage, TransactionFees
from siacentral.transport import APIResponse, Transport, ensure_success
from siacentral.validators import check_addresses


class LegacyAPIClient:
    """Client for the v1 wallet endpoints."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config or default_config.with_base_url(LEGACY_BASE_URL)
        self._transport = Transport(self.config, http_client=http_client)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "LegacyAPIClient":
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

    def get_transaction_fees(self) -> TransactionFees:
        envelope = self._call("GET", "/wallet/fees")
        return TransactionFees.from_dict(envelope.data)

    def find_address_balance(self, limit: int, page: int, addresses: Iterable[str]) -> AddressBalance:
        address_list = check_addresses(addresses, max_addresses=self.config.max_addresses)
        envelope = self._call(
            "POST",
            "/wallet/addresses",
            params={"limit": limit, "page": page},
            body={"addresses": address_list},
        )
        return AddressBalance.from_dict(envelope.data)

    def find_used_addresses(self, addresses: Iterable[str]) -> List[AddressUsage]:
        address_list = check_addresses(addresses, max_addresses=self.config.max_addresses)
        envelope = self._call("POST", "/wallet/addresses/used", body={"addresses": address_list})
        return [AddressUsage.from_dict(item) for item in as_list(envelope.get("addresses"), "addresses")]

    def get_address_balance(self, limit: int, page: int, address: str) -> AddressBalance:
        encoded = quote(address, safe="")
        envelope = self._call(
            "GET", f"/wallet/addresses/{encoded}", params={"limit": limit, "page": page}
        )
        return AddressBalance.from_dict(envelope.data)
