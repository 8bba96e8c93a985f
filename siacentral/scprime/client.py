"""
Client for the ScPrime side of the Sia Central API.

Only the troubleshooting endpoint is exposed. Unlike the wallet and host
endpoints it is classified on the HTTP status code alone: the envelope type is
not consulted, so a 2xx response is a success even when ``type`` is ``"error"``.
"""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

import httpx

from siacentral.config import SCPRIME_BASE_URL, ClientConfig, default_config
from siacentral.scprime.types import ConnectionReport
from siacentral.transport import Transport, ensure_success


class ScPrimeAPIClient:
    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config or default_config.with_base_url(SCPRIME_BASE_URL)
        self._transport = Transport(self.config, http_client=http_client)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "ScPrimeAPIClient":
        return self

    def __exit__(self, *_exc_info: Any) -> None:
        self.close()

    def get_host_connectivity(self, netaddress: str) -> ConnectionReport:
        """Check that a host is running and connectable at ``netaddress`` (host:port)."""
        encoded = quote(netaddress, safe="")
        status_code, envelope = self._transport.request("GET", f"/troubleshoot/{encoded}")
        ensure_success(status_code, envelope, check_type=False)
        return ConnectionReport.from_dict(
            envelope.get("report"), response_type=envelope.type, message=envelope.message
        )
