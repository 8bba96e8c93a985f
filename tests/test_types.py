from datetime import datetime, timedelta, timezone

import pytest

from siacentral.currency import ZERO, Currency
from siacentral.errors import MalformedEnvelopeError
from siacentral.legacy.types import AddressBalance as LegacyAddressBalance
from siacentral.legacy.types import TransactionFees as LegacyTransactionFees
from siacentral.scprime.types import ConnectionReport
from siacentral.sia.types import (
    AddressBalance,
    APIFees,
    HostDetails,
    NetworkAverages,
    RPCPriceTable,
    Transaction,
    UniqueID,
)

HOST_PAYLOAD = {
    "public_key": "ed25519:abc123",
    "netaddress": "host.example.com:9982",
    "version": "1.5.9",
    "country_code": "DE",
    "online": True,
    "estimated_uptime": 99.5,
    "first_seen_height": 150000,
    "first_seen_timestamp": "2020-01-02T03:04:05.123456789Z",
    "last_scan": "2024-05-06T07:08:09Z",
    "last_success_scan": "2024-05-06T07:08:09+02:00",
    "successful_interactions": 1200,
    "failed_interactions": 3,
    "settings": {
        "accepting_contracts": True,
        "max_duration": 25920,
        "netaddress": "host.example.com:9982",
        "remaining_storage": 4000000000000,
        "total_storage": 8000000000000,
        "sector_size": 4194304,
        "window_size": 144,
        "storage_price": "50000000000000",
        "contract_price": "100000000000000000000000",
        "collateral": "100000000000000",
        "ephemeral_account_expiry": 604800000000000,
        "version": "1.5.9",
        "sia_mux_port": "9983",
    },
    "price_table": {
        "uid": "00112233445566778899aabbccddeeff",
        "validity": 600000000000,
        "hostblockheight": 420000,
        "updatepricetablecost": "1",
        "writestorecost": "123456789012345678901234567890",
        "maxduration": 25920,
        "registryentriesleft": 10,
        "registryentriestotal": 100,
    },
    "benchmark": {
        "contract_time": 1500,
        "download_time": 800,
        "upload_time": 900,
        "timestamp": "2024-05-06T07:00:00Z",
    },
    "unknown_field": "ignored",
}


def test_unique_id_hex_round_trip():
    raw = bytes(range(16))
    uid = UniqueID(raw)
    assert UniqueID.from_hex(uid.hex()).value == raw
    assert str(uid) == "000102030405060708090a0b0c0d0e0f"
    assert uid.to_json() == uid.hex()


def test_unique_id_rejects_wrong_length():
    with pytest.raises(ValueError):
        UniqueID(b"short")
    with pytest.raises(ValueError):
        UniqueID.from_hex("00ff")
    with pytest.raises(ValueError):
        UniqueID.from_hex("zz" * 16)


def test_host_details_decoding():
    host = HostDetails.from_dict(HOST_PAYLOAD)
    assert host.public_key == "ed25519:abc123"
    assert host.online is True
    assert host.estimated_uptime == 99.5
    assert host.first_seen_timestamp == datetime(2020, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)
    assert host.last_success_scan.utcoffset() == timedelta(hours=2)
    assert host.settings.accepting_contracts is True
    assert host.settings.storage_price == Currency(50000000000000)
    assert host.settings.ephemeral_account_expiry == timedelta(days=7)
    assert host.settings.max_collateral == ZERO
    assert host.price_table.uid.hex() == "00112233445566778899aabbccddeeff"
    assert host.price_table.validity == timedelta(minutes=10)
    assert host.price_table.write_store_cost == Currency.from_string("123456789012345678901234567890")
    assert host.price_table.registry_entries_total == 100
    assert host.benchmark.contract_time == 1500
    assert host.benchmark_rhp2.contract_time == 0


def test_missing_sections_decode_to_zero_values():
    host = HostDetails.from_dict({})
    assert host.public_key == ""
    assert host.last_scan is None
    assert host.settings.total_storage == 0
    assert host.price_table.uid == UniqueID()
    assert HostDetails.from_dict(None) == host


def test_wrong_shapes_raise_malformed():
    with pytest.raises(MalformedEnvelopeError):
        HostDetails.from_dict({"settings": []})
    with pytest.raises(MalformedEnvelopeError):
        HostDetails.from_dict({"online": "yes"})
    with pytest.raises(MalformedEnvelopeError):
        HostDetails.from_dict({"settings": {"storage_price": "12.5"}})
    with pytest.raises(MalformedEnvelopeError):
        HostDetails.from_dict({"last_scan": "yesterday"})
    with pytest.raises(MalformedEnvelopeError):
        RPCPriceTable.from_dict({"uid": "abcd"})


def test_network_averages_decoding():
    averages = NetworkAverages.from_dict(
        {
            "type": "success",
            "settings": {"storage_price": "42"},
            "price_table": {"contractprice": "7"},
            "benchmarks": {"contract_time": 1200.5, "upload_speed": 30000000},
            "benchmarks_rhp2": {"download_speed": 45000000.25},
        }
    )
    assert averages.settings.storage_price == Currency(42)
    assert averages.price_table.contract_price == Currency(7)
    assert averages.benchmarks.contract_time == 1200.5
    assert averages.benchmarks.upload_speed == 30000000.0
    assert averages.benchmarks_rhp2.download_speed == 45000000.25


def test_address_balance_decoding():
    balance = AddressBalance.from_dict(
        {
            "unspent_siacoins": str(10**27),
            "unspent_siafunds": "10",
            "unspent_siacoin_outputs": [
                {"output_id": "o1", "unlock_hash": "u1", "value": str(10**27), "block_height": 5}
            ],
            "unspent_siafund_outputs": [{"output_id": "f1", "value": "10", "claim_start": "0"}],
            "transactions": [
                {
                    "id": "t1",
                    "block_height": 5,
                    "confirmations": 12,
                    "fees": "30",
                    "miner_fees": ["30"],
                    "siacoin_outputs": [{"value": "1", "unlock_hash": "u1"}],
                }
            ],
            "siafund_claim": "0",
        }
    )
    assert balance.unspent_siacoins == Currency(10**27)
    assert balance.unspent_siacoin_outputs[0].value == Currency(10**27)
    assert balance.unspent_siafund_outputs[0].output_id == "f1"
    transaction = balance.transactions[0]
    assert isinstance(transaction, Transaction)
    assert transaction.miner_fees == [Currency(30)]
    assert transaction.siacoin_outputs == [{"value": "1", "unlock_hash": "u1"}]
    assert balance.unconfirmed_transactions == []


def test_api_fees_decoding():
    fees = APIFees.from_dict({"address": "addr", "fee": str(25 * 10**22)})
    assert fees.address == "addr"
    assert fees.fee == Currency.from_siacoins("0.25")


def test_connection_report_decoding():
    report = ConnectionReport.from_dict(
        {
            "netaddress": "scp.example.com:4282",
            "resolved_addresses": ["203.0.113.5"],
            "connected": True,
            "latency": 25000000,
            "errors": [],
            "warnings": ["host is not accepting contracts"],
            "external_settings": {"acceptingcontracts": False},
        }
    )
    assert report.passed
    assert report.latency == timedelta(milliseconds=25)
    assert report.external_settings == {"acceptingcontracts": False}
    assert not ConnectionReport.from_dict({"errors": ["connection refused"]}).passed


def test_legacy_types_use_v1_field_names():
    balance = LegacyAddressBalance.from_dict(
        {
            "unspent_total": "15",
            "unspent_outputs": [{"output_id": "o1", "value": "15"}],
            "transactions": [{"transaction_id": "t1", "tags": ["siacoin_transfer"]}],
            "unspent_siacoins": "999",
        }
    )
    assert balance.unspent_total == Currency(15)
    assert balance.unspent_outputs[0].value == Currency(15)
    assert balance.transactions[0].transaction_id == "t1"
    assert balance.transactions[0].tags == ["siacoin_transfer"]

    fees = LegacyTransactionFees.from_dict({"minimum": "1", "maximum": "2", "sia_central": "3"})
    assert (fees.minimum, fees.maximum, fees.sia_central) == (Currency(1), Currency(2), Currency(3))


def test_connection_report_requires_success_type():
    report = ConnectionReport.from_dict(None, response_type="error", message="unable to connect to host")
    assert report.errors == []
    assert report.message == "unable to connect to host"
    assert not report.passed
