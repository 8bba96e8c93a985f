import json

import httpx
import pytest

from siacentral.currency import Currency
from siacentral.errors import (
    APIError,
    APIUnreachableError,
    InvalidResponseError,
    MalformedEnvelopeError,
    ValidationError,
)
from siacentral.sia import APIClient, filters
from siacentral.sia.types import HostDetails


class MockResponse:
    def __init__(self, status_code: int, json_body=None):
        self.status_code = status_code
        self._json = json_body

    def json(self):
        if self._json is None:
            raise ValueError("no JSON body")
        return self._json


class MockClient:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def request(self, method, url, params=None, content=None, headers=None):
        self.calls.append(
            {"method": method, "url": url, "params": params, "content": content, "headers": headers}
        )
        if not self.responses:
            raise RuntimeError("No mock responses")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        return None


def ok(**payload):
    return MockResponse(200, {"type": "success", "message": "", **payload})


def make_client(config, *responses):
    mock = MockClient(list(responses))
    return APIClient(config, http_client=mock), mock


def test_get_network_averages(config):
    client, mock = make_client(
        config,
        ok(settings={"storage_price": "1000"}, benchmarks={"upload_speed": 25000000}),
    )
    averages = client.get_network_averages()
    assert averages.settings.storage_price == Currency(1000)
    assert averages.benchmarks.upload_speed == 25000000.0
    assert mock.calls[0]["method"] == "GET"
    assert mock.calls[0]["url"] == "/hosts/network/averages"
    assert mock.calls[0]["content"] is None


def test_get_active_hosts_defaults(config):
    client, mock = make_client(config, ok(hosts=[{"public_key": "ed25519:a"}, {"public_key": "ed25519:b"}]))
    hosts = client.get_active_hosts()
    assert [host.public_key for host in hosts] == ["ed25519:a", "ed25519:b"]
    assert all(isinstance(host, HostDetails) for host in hosts)
    assert mock.calls[0]["url"] == "/hosts"
    assert mock.calls[0]["params"] == {"page": "0", "limit": "500"}


def test_get_active_hosts_with_filters(config):
    client, mock = make_client(config, ok(hosts=[]))
    hosts = client.get_active_hosts(
        2,
        50,
        filters.accepting_contracts(True),
        filters.min_uptime(0.9),
        filters.max_storage_price(Currency(10**14)),
        filters.sort_by(filters.HostSort.STORAGE_PRICE),
    )
    assert hosts == []
    assert mock.calls[0]["params"] == {
        "acceptcontracts": "true",
        "minuptime": "0.9",
        "maxstorageprice": "100000000000000",
        "sort": "storage_price",
        "dir": "asc",
        "page": "2",
        "limit": "50",
    }


def test_get_active_hosts_clamps_pagination(config):
    client, mock = make_client(config, ok(hosts=None))
    assert client.get_active_hosts(-3, 1000) == []
    assert mock.calls[0]["params"] == {"page": "0", "limit": "500"}


def test_get_active_hosts_rejects_wrong_shape(config):
    client, _ = make_client(config, ok(hosts={"public_key": "x"}))
    with pytest.raises(MalformedEnvelopeError):
        client.get_active_hosts()


def test_get_host_escapes_path(config):
    client, mock = make_client(config, ok(host={"netaddress": "host.example.com:9982", "online": True}))
    host = client.get_host("host.example.com:9982")
    assert host.online is True
    assert mock.calls[0]["url"] == "/hosts/host.example.com%3A9982"


def test_get_host_escapes_slashes(config):
    client, mock = make_client(config, ok(host={}))
    client.get_host("ed25519:a/b")
    assert mock.calls[0]["url"] == "/hosts/ed25519%3Aa%2Fb"


def test_get_host_not_found(config):
    client, _ = make_client(config, MockResponse(404, {"type": "error", "message": "host not found"}))
    with pytest.raises(APIError) as excinfo:
        client.get_host("ed25519:missing")
    assert excinfo.value.message == "host not found"
    assert excinfo.value.status_code == 404


def test_get_transaction_fees(config):
    client, mock = make_client(config, ok(minimum="10", maximum="20", api={"address": "a", "fee": "5"}))
    fees = client.get_transaction_fees()
    assert (fees.minimum, fees.maximum) == (Currency(10), Currency(20))
    assert mock.calls[0]["url"] == "/wallet/fees"


def test_get_api_fees(config):
    client, mock = make_client(config, ok(minimum="10", maximum="20", api={"address": "relay", "fee": "5"}))
    fees = client.get_api_fees()
    assert fees.address == "relay"
    assert fees.fee == Currency(5)
    assert mock.calls[0]["url"] == "/wallet/fees"


def test_find_address_balance(config):
    client, mock = make_client(config, ok(unspent_siacoins="1500", transactions=[{"id": "t1"}]))
    balance = client.find_address_balance(100, 1, ["addr1", "addr2"])
    assert balance.unspent_siacoins == Currency(1500)
    assert balance.transactions[0].id == "t1"
    call = mock.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "/wallet/addresses"
    assert call["params"] == {"limit": 100, "page": 1}
    assert json.loads(call["content"]) == {"addresses": ["addr1", "addr2"]}
    assert call["headers"]["Content-Type"] == "application/json"


def test_find_address_balance_at_ceiling(config):
    client, mock = make_client(config, ok())
    client.find_address_balance(10, 0, [f"addr{i}" for i in range(10000)])
    assert len(json.loads(mock.calls[0]["content"])["addresses"]) == 10000


def test_find_address_balance_over_ceiling_makes_no_request(config):
    client, mock = make_client(config, ok())
    with pytest.raises(ValidationError) as excinfo:
        client.find_address_balance(10, 0, [f"addr{i}" for i in range(10001)])
    assert str(excinfo.value) == "maximum of 10000 addresses"
    assert mock.calls == []


def test_find_used_addresses(config):
    client, mock = make_client(
        config,
        ok(addresses=[{"address": "addr1", "usage_type": "sender"}, {"address": "addr2", "usage_type": "receiver"}]),
    )
    used = client.find_used_addresses(["addr1", "addr2", "addr3"])
    assert [(usage.address, usage.usage_type) for usage in used] == [("addr1", "sender"), ("addr2", "receiver")]
    assert mock.calls[0]["url"] == "/wallet/addresses/used"
    assert json.loads(mock.calls[0]["content"]) == {"addresses": ["addr1", "addr2", "addr3"]}


def test_find_used_addresses_over_ceiling(config):
    client, mock = make_client(config, ok())
    with pytest.raises(ValidationError):
        client.find_used_addresses([f"addr{i}" for i in range(10001)])
    assert mock.calls == []


def test_get_address_balance(config):
    client, mock = make_client(config, ok(unspent_siacoins="7"))
    balance = client.get_address_balance(25, 2, "addr/1")
    assert balance.unspent_siacoins == Currency(7)
    assert mock.calls[0]["url"] == "/wallet/addresses/addr%2F1"
    assert mock.calls[0]["params"] == {"limit": 25, "page": 2}


def test_broadcast_transaction_set(config):
    client, mock = make_client(config, ok(message="transactions broadcast"))
    transactions = [{"siacoininputs": [], "minerfees": [Currency(30)]}]
    assert client.broadcast_transaction_set(transactions) is None
    call = mock.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "/wallet/broadcast"
    assert json.loads(call["content"]) == {"transactions": [{"siacoininputs": [], "minerfees": ["30"]}]}


def test_error_type_on_200_fails(config):
    client, _ = make_client(config, MockResponse(200, {"type": "error", "message": "invalid transaction"}))
    with pytest.raises(APIError) as excinfo:
        client.broadcast_transaction_set([{}])
    assert excinfo.value.message == "invalid transaction"
    assert excinfo.value.status_code == 200
    assert excinfo.value.response_type == "error"


def test_server_error_with_success_type_fails(config):
    client, _ = make_client(config, MockResponse(500, {"type": "success", "message": "odd"}))
    with pytest.raises(APIError):
        client.get_transaction_fees()


def test_non_json_response(config):
    client, _ = make_client(config, MockResponse(502))
    with pytest.raises(InvalidResponseError) as excinfo:
        client.get_network_averages()
    assert excinfo.value.status_code == 502


def test_transport_errors_propagate(config):
    request = httpx.Request("GET", "https://api.test/v2/wallet/fees")
    client, _ = make_client(config, httpx.ConnectError("connection refused", request=request))
    with pytest.raises(APIUnreachableError):
        client.get_transaction_fees()


def test_api_key_header(config):
    config.api_key = "my-key"
    client, mock = make_client(config, ok())
    client.get_transaction_fees()
    assert mock.calls[0]["headers"]["X-API-Key"] == "my-key"


def test_context_manager_leaves_injected_client_open(config):
    mock = MockClient([])
    mock.closed = False

    def close():
        mock.closed = True

    mock.close = close
    with APIClient(config, http_client=mock):
        pass
    assert mock.closed is False


def test_broadcast_accepts_generator(config):
    client, mock = make_client(config, ok())
    client.broadcast_transaction_set({"id": i} for i in range(2))
    assert len(mock.calls) == 1
    assert json.loads(mock.calls[0]["content"]) == {"transactions": [{"id": 0}, {"id": 1}]}
