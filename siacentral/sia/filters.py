"""
Composable host-listing filters.

Each filter is a pure function taking the current query parameters and
returning a new mapping with its own key set. ``build_host_query`` folds the
filters in the order given and then adds the clamped ``page`` and ``limit``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from functools import reduce
from typing import Callable, Dict, Iterable, Mapping, Optional, Union

from siacentral.config import MAX_HOSTS_LIMIT
from siacentral.currency import Currency
from siacentral.errors import ValidationError
from siacentral.validators import clamp_limit, clamp_page, require_unsigned

ACCEPT_CONTRACTS_PARAM = "acceptcontracts"
ONLINE_PARAM = "online"
BENCHMARKED_PARAM = "benchmarked"
MIN_AGE_PARAM = "minage"
MIN_UPTIME_PARAM = "minuptime"
MIN_DURATION_PARAM = "minduration"
MIN_STORAGE_PARAM = "minstorage"
MIN_UPLOAD_SPEED_PARAM = "minuploadspeed"
MIN_DOWNLOAD_SPEED_PARAM = "mindownloadspeed"
MAX_STORAGE_PRICE_PARAM = "maxstorageprice"
MAX_UPLOAD_PRICE_PARAM = "maxuploadprice"
MAX_DOWNLOAD_PRICE_PARAM = "maxdownloadprice"
MAX_CONTRACT_PRICE_PARAM = "maxcontractprice"
MAX_BASE_RPC_PRICE_PARAM = "maxbaserpcprice"
MAX_SECTOR_ACCESS_PRICE_PARAM = "maxsectoraccessprice"
SORT_PARAM = "sort"
DIR_PARAM = "dir"
PAGE_PARAM = "page"
LIMIT_PARAM = "limit"

HostFilter = Callable[[Mapping[str, str]], Dict[str, str]]
CurrencyLike = Union[Currency, int, str]


class HostSort(str, Enum):
    DATE_CREATED = "date_created"
    NET_ADDRESS = "net_address"
    PUBLIC_KEY = "public_key"
    ACCEPTING_CONTRACTS = "accepting_contracts"
    UPTIME = "uptime"
    UPLOAD_SPEED = "upload_speed"
    DOWNLOAD_SPEED = "download_speed"
    REMAINING_STORAGE = "remaining_storage"
    TOTAL_STORAGE = "total_storage"
    USED_STORAGE = "used_storage"
    AGE = "age"
    UTILIZATION = "utilization"
    CONTRACT_PRICE = "contract_price"
    STORAGE_PRICE = "storage_price"
    DOWNLOAD_PRICE = "download_price"
    UPLOAD_PRICE = "upload_price"


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _format_float(value: float) -> str:
    """Shortest positional form: 0.9 -> "0.9", 1.0 -> "1", 1e-05 -> "0.00001"."""
    if not math.isfinite(value):
        raise ValidationError(f"invalid number: {value!r}")
    return format(Decimal(repr(float(value))).normalize(), "f")


def _format_currency(value: CurrencyLike) -> str:
    try:
        return str(Currency.parse(value))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid currency amount: {value!r}") from exc


def _set(**values: str) -> HostFilter:
    def apply(params: Mapping[str, str]) -> Dict[str, str]:
        return {**params, **values}

    return apply


def _set_param(key: str, value: str) -> HostFilter:
    return _set(**{key: value})


def accepting_contracts(accepting: bool) -> HostFilter:
    """Only list hosts that are (or are not) accepting contracts."""
    return _set_param(ACCEPT_CONTRACTS_PARAM, _format_bool(accepting))


def online(is_online: bool) -> HostFilter:
    return _set_param(ONLINE_PARAM, _format_bool(is_online))


def benchmarked(is_benchmarked: bool) -> HostFilter:
    return _set_param(BENCHMARKED_PARAM, _format_bool(is_benchmarked))


def min_age(age: int) -> HostFilter:
    """Minimum host age in blocks."""
    return _set_param(MIN_AGE_PARAM, str(require_unsigned(age, name="min_age")))


def min_uptime(uptime: float) -> HostFilter:
    """Minimum estimated uptime, as a ratio."""
    return _set_param(MIN_UPTIME_PARAM, _format_float(uptime))


def min_duration(duration: int) -> HostFilter:
    """Minimum maximum-contract-duration in blocks."""
    return _set_param(MIN_DURATION_PARAM, str(require_unsigned(duration, name="min_duration")))


def min_storage(storage: int) -> HostFilter:
    """Minimum remaining storage in bytes."""
    return _set_param(MIN_STORAGE_PARAM, str(require_unsigned(storage, name="min_storage")))


def min_upload_speed(speed: int) -> HostFilter:
    return _set_param(MIN_UPLOAD_SPEED_PARAM, str(require_unsigned(speed, name="min_upload_speed")))


def min_download_speed(speed: int) -> HostFilter:
    return _set_param(
        MIN_DOWNLOAD_SPEED_PARAM, str(require_unsigned(speed, name="min_download_speed"))
    )


def max_storage_price(price: CurrencyLike) -> HostFilter:
    return _set_param(MAX_STORAGE_PRICE_PARAM, _format_currency(price))


def max_upload_price(price: CurrencyLike) -> HostFilter:
    return _set_param(MAX_UPLOAD_PRICE_PARAM, _format_currency(price))


def max_download_price(price: CurrencyLike) -> HostFilter:
    return _set_param(MAX_DOWNLOAD_PRICE_PARAM, _format_currency(price))


def max_contract_price(price: CurrencyLike) -> HostFilter:
    return _set_param(MAX_CONTRACT_PRICE_PARAM, _format_currency(price))


def max_base_rpc_price(price: CurrencyLike) -> HostFilter:
    return _set_param(MAX_BASE_RPC_PRICE_PARAM, _format_currency(price))


def max_sector_access_price(price: CurrencyLike) -> HostFilter:
    return _set_param(MAX_SECTOR_ACCESS_PRICE_PARAM, _format_currency(price))


def sort_by(sort_field: Union[HostSort, str], desc: bool = False) -> HostFilter:
    """Sort on ``sort_field``, ascending unless ``desc`` is set."""
    try:
        sort_value = HostSort(sort_field).value
    except ValueError as exc:
        raise ValidationError(f"unknown host sort field: {sort_field!r}") from exc
    return _set(**{SORT_PARAM: sort_value, DIR_PARAM: "desc" if desc else "asc"})


def apply_filters(
    filters: Iterable[HostFilter], params: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """Fold ``filters`` left to right over ``params``."""
    return reduce(lambda acc, host_filter: host_filter(acc), filters, dict(params or {}))


def build_host_query(
    page: int,
    limit: int,
    filters: Iterable[HostFilter] = (),
    *,
    max_limit: int = MAX_HOSTS_LIMIT,
) -> Dict[str, str]:
    """Build the full host-listing query: filters first, then pagination."""
    params = apply_filters(filters)
    params[PAGE_PARAM] = str(clamp_page(page))
    params[LIMIT_PARAM] = str(clamp_limit(limit, max_value=max_limit))
    return params
