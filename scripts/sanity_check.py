"""Minimal sanity checks against the live Sia Central API."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from siacentral import AsyncAPIClient, ScPrimeAPIClient  # noqa: E402
from siacentral.logging_config import configure_logging  # noqa: E402
from siacentral.sia import filters  # noqa: E402

# Any address works; override via env to check one with history.
SAMPLE_ADDRESS = os.getenv(
    "SIACENTRAL_SAMPLE_ADDRESS",
    "000000000000000000000000000000000000000000000000000000000000000089eb0d6a8a69",
)
# Opt-in to the ScPrime troubleshooter (dials the host, slower).
SCPRIME_NETADDRESS = os.getenv("SIACENTRAL_SCPRIME_NETADDRESS")


async def main() -> None:
    configure_logging()
    async with AsyncAPIClient() as client:
        print("Transaction fees:", await client.get_transaction_fees())
        print("API fees:", await client.get_api_fees())
        print("Network averages:", await client.get_network_averages())

        hosts = await client.get_active_hosts(
            0, 3, filters.accepting_contracts(True), filters.sort_by(filters.HostSort.UPTIME, desc=True)
        )
        print("Top hosts by uptime:", [host.netaddress for host in hosts])
        if hosts:
            print("Host lookup:", await client.get_host(hosts[0].public_key))

        print("Address balance:", await client.get_address_balance(5, 0, SAMPLE_ADDRESS))
        print("Used addresses:", await client.find_used_addresses([SAMPLE_ADDRESS]))

    if SCPRIME_NETADDRESS:
        with ScPrimeAPIClient() as scprime:
            print("ScPrime connectivity:", scprime.get_host_connectivity(SCPRIME_NETADDRESS))


if __name__ == "__main__":
    asyncio.run(main())
