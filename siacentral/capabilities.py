"""Capability protocols shared by the client generations."""

from __future__ import annotations

from typing import Any, Iterable, List, Protocol, runtime_checkable


@runtime_checkable
class WalletAPI(Protocol):
    """Address balance and fee lookups; implemented by APIClient and LegacyAPIClient."""

    def get_transaction_fees(self) -> Any: ...

    def find_address_balance(self, limit: int, page: int, addresses: Iterable[str]) -> Any: ...

    def find_used_addresses(self, addresses: Iterable[str]) -> List[Any]: ...

    def get_address_balance(self, limit: int, page: int, address: str) -> Any: ...


@runtime_checkable
class HostAPI(Protocol):
    """Host directory lookups."""

    def get_network_averages(self) -> Any: ...

    def get_active_hosts(self, page: int = 0, limit: int = -1, *filters: Any) -> List[Any]: ...

    def get_host(self, host_id: str) -> Any: ...


@runtime_checkable
class AsyncWalletAPI(Protocol):
    """Coroutine twin of WalletAPI; implemented by AsyncAPIClient."""

    async def get_transaction_fees(self) -> Any: ...

    async def find_address_balance(self, limit: int, page: int, addresses: Iterable[str]) -> Any: ...

    async def find_used_addresses(self, addresses: Iterable[str]) -> List[Any]: ...

    async def get_address_balance(self, limit: int, page: int, address: str) -> Any: ...


@runtime_checkable
class AsyncHostAPI(Protocol):
    """Coroutine twin of HostAPI."""

    async def get_network_averages(self) -> Any: ...

    async def get_active_hosts(self, page: int = 0, limit: int = -1, *filters: Any) -> List[Any]: ...

    async def get_host(self, host_id: str) -> Any: ...
