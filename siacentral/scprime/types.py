"""Payload types for the ScPrime troubleshooting endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, List

from siacentral.decoding import as_mapping, to_bool, to_duration, to_str, to_str_list
from siacentral.transport import SUCCESS_TYPE


@dataclass(frozen=True)
class ConnectionReport:
    """
    Server-computed result of probing a host at its netaddress.

    ``external_settings`` and ``price_table`` are kept as raw mappings since
    ScPrime host settings use their own field set and currency denomination.
    """

    netaddress: str = ""
    public_key: str = ""
    version: str = ""
    resolved_addresses: List[str] = field(default_factory=list)
    connected: bool = False
    scanned: bool = False
    latency: timedelta = timedelta(0)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    external_settings: Dict[str, Any] = field(default_factory=dict)
    price_table: Dict[str, Any] = field(default_factory=dict)
    response_type: str = SUCCESS_TYPE
    message: str = ""

    @property
    def passed(self) -> bool:
        """True only when the API reported success and the probe found no errors."""
        return self.response_type == SUCCESS_TYPE and not self.errors

    @classmethod
    def from_dict(
        cls, data: Any, *, response_type: str = SUCCESS_TYPE, message: str = ""
    ) -> "ConnectionReport":
        data = as_mapping(data, "report")
        return cls(
            netaddress=to_str(data.get("netaddress"), "netaddress"),
            public_key=to_str(data.get("public_key"), "public_key"),
            version=to_str(data.get("version"), "version"),
            resolved_addresses=to_str_list(data.get("resolved_addresses"), "resolved_addresses"),
            connected=to_bool(data.get("connected"), "connected"),
            scanned=to_bool(data.get("scanned"), "scanned"),
            latency=to_duration(data.get("latency"), "latency"),
            errors=to_str_list(data.get("errors"), "errors"),
            warnings=to_str_list(data.get("warnings"), "warnings"),
            external_settings=dict(as_mapping(data.get("external_settings"), "external_settings")),
            price_table=dict(as_mapping(data.get("price_table"), "price_table")),
            response_type=response_type,
            message=message,
        )
