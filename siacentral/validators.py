"""Shared validation helpers for Sia Central requests."""

from __future__ import annotations

from typing import Iterable, List, Optional

from siacentral.config import MAX_ADDRESSES, MAX_HOSTS_LIMIT
from siacentral.errors import ValidationError


def check_addresses(addresses: Iterable[str], *, max_addresses: int = MAX_ADDRESSES) -> List[str]:
    """
    Validate an address list before it is sent as a request body.

    Raises:
        ValidationError: if a bare string is passed, an entry is not a string,
            or the list is longer than ``max_addresses``.
    """
    if isinstance(addresses, (str, bytes)):
        raise ValidationError("addresses must be a list of strings")
    address_list = list(addresses)
    if len(address_list) > max_addresses:
        raise ValidationError(f"maximum of {max_addresses} addresses")
    for address in address_list:
        if not isinstance(address, str):
            raise ValidationError("addresses must be a list of strings")
    return address_list


def _to_int(value: object, *, name: str) -> int:
    try:
        return int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{name} must be an integer") from exc


def clamp_page(value: Optional[int]) -> int:
    """Negative pages are treated as the first page."""
    if value is None:
        return 0
    return max(_to_int(value, name="page"), 0)


def clamp_limit(value: Optional[int], *, max_value: int = MAX_HOSTS_LIMIT) -> int:
    """Out-of-range limits (negative or above ``max_value``) become ``max_value``."""
    if value is None:
        return max_value
    parsed = _to_int(value, name="limit")
    if parsed < 0 or parsed > max_value:
        return max_value
    return parsed


def require_unsigned(value: int, *, name: str) -> int:
    """Reject negative or non-integer values for fields the API treats as uint64."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer")
    if value < 0:
        raise ValidationError(f"{name} must not be negative")
    return value
