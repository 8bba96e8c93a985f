"""
Payload types of the superseded v1 wallet API.

Field names differ from the v2 types (``unspent_total``, ``sia_central``,
wallet transactions keyed by ``transaction_id``) and the two are not unified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from siacentral.currency import ZERO, Currency
from siacentral.decoding import (
    as_list,
    as_mapping,
    to_currency,
    to_int,
    to_raw_list,
    to_str,
    to_str_list,
    to_time,
)


@dataclass(frozen=True)
class SiacoinOutput:
    output_id: str = ""
    unlock_hash: str = ""
    value: Currency = ZERO
    source: str = ""
    maturity_height: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "SiacoinOutput":
        data = as_mapping(data, "unspent_output")
        return cls(
            output_id=to_str(data.get("output_id"), "output_id"),
            unlock_hash=to_str(data.get("unlock_hash"), "unlock_hash"),
            value=to_currency(data.get("value"), "value"),
            source=to_str(data.get("source"), "source"),
            maturity_height=to_int(data.get("maturity_height"), "maturity_height"),
        )


@dataclass(frozen=True)
class WalletTransaction:
    transaction_id: str = ""
    block_height: int = 0
    confirmations: int = 0
    timestamp: Optional[datetime] = None
    fees: Currency = ZERO
    siacoin_inputs: List[Dict[str, Any]] = field(default_factory=list)
    siacoin_outputs: List[Dict[str, Any]] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "WalletTransaction":
        data = as_mapping(data, "transaction")
        return cls(
            transaction_id=to_str(data.get("transaction_id"), "transaction_id"),
            block_height=to_int(data.get("block_height"), "block_height"),
            confirmations=to_int(data.get("confirmations"), "confirmations"),
            timestamp=to_time(data.get("timestamp"), "timestamp"),
            fees=to_currency(data.get("fees"), "fees"),
            siacoin_inputs=to_raw_list(data.get("siacoin_inputs"), "siacoin_inputs"),
            siacoin_outputs=to_raw_list(data.get("siacoin_outputs"), "siacoin_outputs"),
            tags=to_str_list(data.get("tags"), "tags"),
        )


@dataclass(frozen=True)
class AddressUsage:
    address: str = ""
    usage_type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "AddressUsage":
        data = as_mapping(data, "address")
        return cls(
            address=to_str(data.get("address"), "address"),
            usage_type=to_str(data.get("usage_type"), "usage_type"),
        )


@dataclass(frozen=True)
class AddressBalance:
    unspent_total: Currency = ZERO
    unspent_outputs: List[SiacoinOutput] = field(default_factory=list)
    transactions: List[WalletTransaction] = field(default_factory=list)
    unconfirmed_transactions: List[WalletTransaction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "AddressBalance":
        data = as_mapping(data, "balance")
        return cls(
            unspent_total=to_currency(data.get("unspent_total"), "unspent_total"),
            unspent_outputs=[
                SiacoinOutput.from_dict(item)
                for item in as_list(data.get("unspent_outputs"), "unspent_outputs")
            ],
            transactions=[
                WalletTransaction.from_dict(item)
                for item in as_list(data.get("transactions"), "transactions")
            ],
            unconfirmed_transactions=[
                WalletTransaction.from_dict(item)
                for item in as_list(data.get("unconfirmed_transactions"), "unconfirmed_transactions")
            ],
        )


@dataclass(frozen=True)
class TransactionFees:
    """Network fee range plus the fee Sia Central adds to relayed transactions."""

    minimum: Currency = ZERO
    maximum: Currency = ZERO
    sia_central: Currency = ZERO

    @classmethod
    def from_dict(cls, data: Any) -> "TransactionFees":
        data = as_mapping(data, "fees")
        return cls(
            minimum=to_currency(data.get("minimum"), "minimum"),
            maximum=to_currency(data.get("maximum"), "maximum"),
            sia_central=to_currency(data.get("sia_central"), "sia_central"),
        )
