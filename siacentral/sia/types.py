"""
Typed payloads returned by the Sia Central v2 API.

Every type is immutable and built once from a decoded response by
``from_dict``. Nested ledger sections of transactions are kept as raw mappings;
the client does not reconstruct or validate them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from siacentral.currency import ZERO, Currency
from siacentral.decoding import (
    as_list,
    as_mapping,
    to_bool,
    to_currency,
    to_duration,
    to_float,
    to_int,
    to_raw_list,
    to_str,
    to_time,
)
from siacentral.errors import MalformedEnvelopeError

UNIQUE_ID_SIZE = 16


@dataclass(frozen=True)
class UniqueID:
    """Fixed-length opaque identifier, serialized as a hex string."""

    value: bytes = bytes(UNIQUE_ID_SIZE)

    def __post_init__(self) -> None:
        if not isinstance(self.value, (bytes, bytearray)) or len(self.value) != UNIQUE_ID_SIZE:
            raise ValueError(f"UniqueID must be exactly {UNIQUE_ID_SIZE} bytes")
        object.__setattr__(self, "value", bytes(self.value))

    @classmethod
    def from_hex(cls, text: str) -> "UniqueID":
        try:
            raw = bytes.fromhex(text)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid UniqueID hex: {text!r}") from exc
        return cls(raw)

    def hex(self) -> str:
        return self.value.hex()

    def to_json(self) -> str:
        return self.hex()

    def __str__(self) -> str:
        return self.hex()


def _to_unique_id(value: Any, name: str) -> UniqueID:
    if value is None or value == "":
        return UniqueID()
    if not isinstance(value, str):
        raise MalformedEnvelopeError(f"Unexpected value for {name}: expected hex string.")
    try:
        return UniqueID.from_hex(value)
    except ValueError as exc:
        raise MalformedEnvelopeError(f"Unexpected value for {name}: {value!r} is not a UniqueID.") from exc


# attribute name -> wire key
_PRICE_TABLE_COSTS = {
    "update_price_table_cost": "updatepricetablecost",
    "account_balance_cost": "accountbalancecost",
    "fund_account_cost": "fundaccountcost",
    "latest_revision_cost": "latestrevisioncost",
    "subscription_memory_cost": "subscriptionmemorycost",
    "subscription_notification_cost": "subscriptionnotificationcost",
    "init_base_cost": "initbasecost",
    "memory_time_cost": "memorytimecost",
    "download_bandwidth_cost": "downloadbandwidthcost",
    "upload_bandwidth_cost": "uploadbandwidthcost",
    "drop_sectors_base_cost": "dropsectorsbasecost",
    "drop_sectors_unit_cost": "dropsectorsunitcost",
    "has_sector_base_cost": "hassectorbasecost",
    "read_base_cost": "readbasecost",
    "read_length_cost": "readlengthcost",
    "renew_contract_cost": "renewcontractcost",
    "revision_base_cost": "revisionbasecost",
    "swap_sector_cost": "swapsectorcost",
    "write_base_cost": "writebasecost",
    "write_length_cost": "writelengthcost",
    "write_store_cost": "writestorecost",
    "txn_fee_min_recommended": "txnfeeminrecommended",
    "txn_fee_max_recommended": "txnfeemaxrecommended",
    "contract_price": "contractprice",
    "collateral_cost": "collateralcost",
    "max_collateral": "maxcollateral",
}


@dataclass(frozen=True)
class RPCPriceTable:
    """
    Cost of executing RPCs on a host.

    Each host sets its own prices for the individual program instructions and
    RPCs; ``validity`` is how long the host guarantees them.
    """

    uid: UniqueID = field(default_factory=UniqueID)
    validity: timedelta = timedelta(0)
    host_block_height: int = 0
    update_price_table_cost: Currency = ZERO
    account_balance_cost: Currency = ZERO
    fund_account_cost: Currency = ZERO
    latest_revision_cost: Currency = ZERO
    subscription_memory_cost: Currency = ZERO
    subscription_notification_cost: Currency = ZERO
    init_base_cost: Currency = ZERO
    memory_time_cost: Currency = ZERO
    download_bandwidth_cost: Currency = ZERO
    upload_bandwidth_cost: Currency = ZERO
    drop_sectors_base_cost: Currency = ZERO
    drop_sectors_unit_cost: Currency = ZERO
    has_sector_base_cost: Currency = ZERO
    read_base_cost: Currency = ZERO
    read_length_cost: Currency = ZERO
    renew_contract_cost: Currency = ZERO
    revision_base_cost: Currency = ZERO
    swap_sector_cost: Currency = ZERO
    write_base_cost: Currency = ZERO
    write_length_cost: Currency = ZERO
    write_store_cost: Currency = ZERO
    txn_fee_min_recommended: Currency = ZERO
    txn_fee_max_recommended: Currency = ZERO
    contract_price: Currency = ZERO
    collateral_cost: Currency = ZERO
    max_collateral: Currency = ZERO
    max_duration: int = 0
    window_size: int = 0
    registry_entries_left: int = 0
    registry_entries_total: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "RPCPriceTable":
        data = as_mapping(data, "price_table")
        costs = {attr: to_currency(data.get(key), key) for attr, key in _PRICE_TABLE_COSTS.items()}
        return cls(
            uid=_to_unique_id(data.get("uid"), "uid"),
            validity=to_duration(data.get("validity"), "validity"),
            host_block_height=to_int(data.get("hostblockheight"), "hostblockheight"),
            max_duration=to_int(data.get("maxduration"), "maxduration"),
            window_size=to_int(data.get("windowsize"), "windowsize"),
            registry_entries_left=to_int(data.get("registryentriesleft"), "registryentriesleft"),
            registry_entries_total=to_int(data.get("registryentriestotal"), "registryentriestotal"),
            **costs,
        )


@dataclass(frozen=True)
class HostConfig:
    """A host's announced external settings."""

    accepting_contracts: bool = False
    max_download_batch_size: int = 0
    max_duration: int = 0
    max_revise_batch_size: int = 0
    netaddress: str = ""
    remaining_storage: int = 0
    sector_size: int = 0
    total_storage: int = 0
    unlock_hash: str = ""
    window_size: int = 0
    collateral: Currency = ZERO
    max_collateral: Currency = ZERO
    base_rpc_price: Currency = ZERO
    contract_price: Currency = ZERO
    download_price: Currency = ZERO
    sector_access_price: Currency = ZERO
    storage_price: Currency = ZERO
    upload_price: Currency = ZERO
    ephemeral_account_expiry: timedelta = timedelta(0)
    max_ephemeral_account_balance: Currency = ZERO
    revision_number: int = 0
    version: str = ""
    sia_mux_port: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "HostConfig":
        data = as_mapping(data, "settings")
        return cls(
            accepting_contracts=to_bool(data.get("accepting_contracts"), "accepting_contracts"),
            max_download_batch_size=to_int(data.get("max_download_batch_size"), "max_download_batch_size"),
            max_duration=to_int(data.get("max_duration"), "max_duration"),
            max_revise_batch_size=to_int(data.get("max_revise_batch_size"), "max_revise_batch_size"),
            netaddress=to_str(data.get("netaddress"), "netaddress"),
            remaining_storage=to_int(data.get("remaining_storage"), "remaining_storage"),
            sector_size=to_int(data.get("sector_size"), "sector_size"),
            total_storage=to_int(data.get("total_storage"), "total_storage"),
            unlock_hash=to_str(data.get("unlock_hash"), "unlock_hash"),
            window_size=to_int(data.get("window_size"), "window_size"),
            collateral=to_currency(data.get("collateral"), "collateral"),
            max_collateral=to_currency(data.get("max_collateral"), "max_collateral"),
            base_rpc_price=to_currency(data.get("base_rpc_price"), "base_rpc_price"),
            contract_price=to_currency(data.get("contract_price"), "contract_price"),
            download_price=to_currency(data.get("download_price"), "download_price"),
            sector_access_price=to_currency(data.get("sector_access_price"), "sector_access_price"),
            storage_price=to_currency(data.get("storage_price"), "storage_price"),
            upload_price=to_currency(data.get("upload_price"), "upload_price"),
            ephemeral_account_expiry=to_duration(
                data.get("ephemeral_account_expiry"), "ephemeral_account_expiry"
            ),
            max_ephemeral_account_balance=to_currency(
                data.get("max_ephemeral_account_balance"), "max_ephemeral_account_balance"
            ),
            revision_number=to_int(data.get("revision_number"), "revision_number"),
            version=to_str(data.get("version"), "version"),
            sia_mux_port=to_str(data.get("sia_mux_port"), "sia_mux_port"),
        )


@dataclass(frozen=True)
class HostBenchmark:
    """Result of the most recent benchmark of a single host. Times are in milliseconds."""

    contract_time: int = 0
    download_time: int = 0
    upload_time: int = 0
    error: str = ""
    timestamp: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Any) -> "HostBenchmark":
        data = as_mapping(data, "benchmark")
        return cls(
            contract_time=to_int(data.get("contract_time"), "contract_time"),
            download_time=to_int(data.get("download_time"), "download_time"),
            upload_time=to_int(data.get("upload_time"), "upload_time"),
            error=to_str(data.get("error"), "error"),
            timestamp=to_time(data.get("timestamp"), "timestamp"),
        )


@dataclass(frozen=True)
class AvgHostBenchmark:
    """Network-wide average benchmark results."""

    contract_time: float = 0.0
    download_time: float = 0.0
    upload_time: float = 0.0
    download_speed: float = 0.0
    upload_speed: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> "AvgHostBenchmark":
        data = as_mapping(data, "benchmarks")
        return cls(
            contract_time=to_float(data.get("contract_time"), "contract_time"),
            download_time=to_float(data.get("download_time"), "download_time"),
            upload_time=to_float(data.get("upload_time"), "upload_time"),
            download_speed=to_float(data.get("download_speed"), "download_speed"),
            upload_speed=to_float(data.get("upload_speed"), "upload_speed"),
        )


@dataclass(frozen=True)
class HostDetails:
    public_key: str = ""
    netaddress: str = ""
    version: str = ""
    country_code: str = ""
    online: bool = False
    estimated_uptime: float = 0.0
    first_seen_height: int = 0
    first_seen_timestamp: Optional[datetime] = None
    last_scan: Optional[datetime] = None
    last_success_scan: Optional[datetime] = None
    successful_interactions: int = 0
    failed_interactions: int = 0
    settings: HostConfig = field(default_factory=HostConfig)
    price_table: RPCPriceTable = field(default_factory=RPCPriceTable)
    benchmark: HostBenchmark = field(default_factory=HostBenchmark)
    benchmark_rhp2: HostBenchmark = field(default_factory=HostBenchmark)

    @classmethod
    def from_dict(cls, data: Any) -> "HostDetails":
        data = as_mapping(data, "host")
        return cls(
            public_key=to_str(data.get("public_key"), "public_key"),
            netaddress=to_str(data.get("netaddress"), "netaddress"),
            version=to_str(data.get("version"), "version"),
            country_code=to_str(data.get("country_code"), "country_code"),
            online=to_bool(data.get("online"), "online"),
            estimated_uptime=to_float(data.get("estimated_uptime"), "estimated_uptime"),
            first_seen_height=to_int(data.get("first_seen_height"), "first_seen_height"),
            first_seen_timestamp=to_time(data.get("first_seen_timestamp"), "first_seen_timestamp"),
            last_scan=to_time(data.get("last_scan"), "last_scan"),
            last_success_scan=to_time(data.get("last_success_scan"), "last_success_scan"),
            successful_interactions=to_int(data.get("successful_interactions"), "successful_interactions"),
            failed_interactions=to_int(data.get("failed_interactions"), "failed_interactions"),
            settings=HostConfig.from_dict(data.get("settings")),
            price_table=RPCPriceTable.from_dict(data.get("price_table")),
            benchmark=HostBenchmark.from_dict(data.get("benchmark")),
            benchmark_rhp2=HostBenchmark.from_dict(data.get("benchmark_rhp2")),
        )


@dataclass(frozen=True)
class NetworkAverages:
    """Average settings, prices and benchmarks of all active hosts."""

    settings: HostConfig = field(default_factory=HostConfig)
    price_table: RPCPriceTable = field(default_factory=RPCPriceTable)
    benchmarks: AvgHostBenchmark = field(default_factory=AvgHostBenchmark)
    benchmarks_rhp2: AvgHostBenchmark = field(default_factory=AvgHostBenchmark)

    @classmethod
    def from_dict(cls, data: Any) -> "NetworkAverages":
        data = as_mapping(data, "averages")
        return cls(
            settings=HostConfig.from_dict(data.get("settings")),
            price_table=RPCPriceTable.from_dict(data.get("price_table")),
            benchmarks=AvgHostBenchmark.from_dict(data.get("benchmarks")),
            benchmarks_rhp2=AvgHostBenchmark.from_dict(data.get("benchmarks_rhp2")),
        )


@dataclass(frozen=True)
class SiacoinOutput:
    output_id: str = ""
    unlock_hash: str = ""
    value: Currency = ZERO
    source: str = ""
    maturity_height: int = 0
    block_height: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "SiacoinOutput":
        data = as_mapping(data, "siacoin_output")
        return cls(
            output_id=to_str(data.get("output_id"), "output_id"),
            unlock_hash=to_str(data.get("unlock_hash"), "unlock_hash"),
            value=to_currency(data.get("value"), "value"),
            source=to_str(data.get("source"), "source"),
            maturity_height=to_int(data.get("maturity_height"), "maturity_height"),
            block_height=to_int(data.get("block_height"), "block_height"),
        )


@dataclass(frozen=True)
class SiafundOutput:
    output_id: str = ""
    unlock_hash: str = ""
    value: Currency = ZERO
    claim_start: Currency = ZERO
    block_height: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "SiafundOutput":
        data = as_mapping(data, "siafund_output")
        return cls(
            output_id=to_str(data.get("output_id"), "output_id"),
            unlock_hash=to_str(data.get("unlock_hash"), "unlock_hash"),
            value=to_currency(data.get("value"), "value"),
            claim_start=to_currency(data.get("claim_start"), "claim_start"),
            block_height=to_int(data.get("block_height"), "block_height"),
        )


@dataclass(frozen=True)
class Transaction:
    """A ledger transaction touching the queried addresses."""

    id: str = ""
    block_id: str = ""
    block_height: int = 0
    confirmations: int = 0
    timestamp: Optional[datetime] = None
    fees: Currency = ZERO
    siacoin_inputs: List[Dict[str, Any]] = field(default_factory=list)
    siacoin_outputs: List[Dict[str, Any]] = field(default_factory=list)
    siafund_inputs: List[Dict[str, Any]] = field(default_factory=list)
    siafund_outputs: List[Dict[str, Any]] = field(default_factory=list)
    file_contracts: List[Dict[str, Any]] = field(default_factory=list)
    file_contract_revisions: List[Dict[str, Any]] = field(default_factory=list)
    storage_proofs: List[Dict[str, Any]] = field(default_factory=list)
    miner_fees: List[Currency] = field(default_factory=list)
    transaction_signatures: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Transaction":
        data = as_mapping(data, "transaction")
        return cls(
            id=to_str(data.get("id"), "id"),
            block_id=to_str(data.get("block_id"), "block_id"),
            block_height=to_int(data.get("block_height"), "block_height"),
            confirmations=to_int(data.get("confirmations"), "confirmations"),
            timestamp=to_time(data.get("timestamp"), "timestamp"),
            fees=to_currency(data.get("fees"), "fees"),
            siacoin_inputs=to_raw_list(data.get("siacoin_inputs"), "siacoin_inputs"),
            siacoin_outputs=to_raw_list(data.get("siacoin_outputs"), "siacoin_outputs"),
            siafund_inputs=to_raw_list(data.get("siafund_inputs"), "siafund_inputs"),
            siafund_outputs=to_raw_list(data.get("siafund_outputs"), "siafund_outputs"),
            file_contracts=to_raw_list(data.get("file_contracts"), "file_contracts"),
            file_contract_revisions=to_raw_list(
                data.get("file_contract_revisions"), "file_contract_revisions"
            ),
            storage_proofs=to_raw_list(data.get("storage_proofs"), "storage_proofs"),
            miner_fees=[to_currency(fee, "miner_fees") for fee in as_list(data.get("miner_fees"), "miner_fees")],
            transaction_signatures=to_raw_list(
                data.get("transaction_signatures"), "transaction_signatures"
            ),
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
    """Balance, unspent outputs and recent transactions for one or more addresses."""

    unspent_siacoins: Currency = ZERO
    unspent_siafunds: Currency = ZERO
    unspent_siacoin_outputs: List[SiacoinOutput] = field(default_factory=list)
    unspent_siafund_outputs: List[SiafundOutput] = field(default_factory=list)
    transactions: List[Transaction] = field(default_factory=list)
    unconfirmed_transactions: List[Transaction] = field(default_factory=list)
    siafund_claim: Currency = ZERO

    @classmethod
    def from_dict(cls, data: Any) -> "AddressBalance":
        data = as_mapping(data, "balance")
        return cls(
            unspent_siacoins=to_currency(data.get("unspent_siacoins"), "unspent_siacoins"),
            unspent_siafunds=to_currency(data.get("unspent_siafunds"), "unspent_siafunds"),
            unspent_siacoin_outputs=[
                SiacoinOutput.from_dict(item)
                for item in as_list(data.get("unspent_siacoin_outputs"), "unspent_siacoin_outputs")
            ],
            unspent_siafund_outputs=[
                SiafundOutput.from_dict(item)
                for item in as_list(data.get("unspent_siafund_outputs"), "unspent_siafund_outputs")
            ],
            transactions=[
                Transaction.from_dict(item) for item in as_list(data.get("transactions"), "transactions")
            ],
            unconfirmed_transactions=[
                Transaction.from_dict(item)
                for item in as_list(data.get("unconfirmed_transactions"), "unconfirmed_transactions")
            ],
            siafund_claim=to_currency(data.get("siafund_claim"), "siafund_claim"),
        )


@dataclass(frozen=True)
class TransactionFees:
    """Recommended network fee range, per byte of transaction."""

    minimum: Currency = ZERO
    maximum: Currency = ZERO

    @classmethod
    def from_dict(cls, data: Any) -> "TransactionFees":
        data = as_mapping(data, "fees")
        return cls(
            minimum=to_currency(data.get("minimum"), "minimum"),
            maximum=to_currency(data.get("maximum"), "maximum"),
        )


@dataclass(frozen=True)
class APIFees:
    """Fee charged by Sia Central for relayed transactions and its payout address."""

    address: str = ""
    fee: Currency = ZERO

    @classmethod
    def from_dict(cls, data: Any) -> "APIFees":
        data = as_mapping(data, "api")
        return cls(
            address=to_str(data.get("address"), "address"),
            fee=to_currency(data.get("fee"), "fee"),
        )
