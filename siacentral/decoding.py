"""
Strict coercion helpers used by every payload type's ``from_dict``.

Missing keys (``None``) decode to the zero value of the field. Values of the
wrong JSON shape raise MalformedEnvelopeError naming the offending field.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Any, Dict, List, Mapping, Optional

from siacentral.currency import ZERO, Currency
from siacentral.errors import MalformedEnvelopeError

_RFC3339_REGEX = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<tz>Z|[+-]\d{2}:\d{2})$"
)


def _malformed(name: str, expected: str, value: Any) -> MalformedEnvelopeError:
    return MalformedEnvelopeError(
        f"Unexpected value for {name}: expected {expected}, got {type(value).__name__}."
    )


def as_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return value
    raise _malformed(name, "object", value)


def as_list(value: Any, name: str) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    raise _malformed(name, "array", value)


def to_int(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise _malformed(name, "integer", value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise _malformed(name, "integer", value)


def to_float(value: Any, name: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise _malformed(name, "number", value)


def to_bool(value: Any, name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise _malformed(name, "boolean", value)


def to_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise _malformed(name, "string", value)


def to_str_list(value: Any, name: str) -> List[str]:
    return [to_str(item, name) for item in as_list(value, name)]


def to_raw_list(value: Any, name: str) -> List[Dict[str, Any]]:
    """Keep nested ledger records opaque, only checking they are objects."""
    return [dict(as_mapping(item, name)) for item in as_list(value, name)]


def to_currency(value: Any, name: str) -> Currency:
    if value is None:
        return ZERO
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise _malformed(name, "currency string", value)
    try:
        return Currency.parse(value)
    except (TypeError, ValueError) as exc:
        raise MalformedEnvelopeError(f"Unexpected value for {name}: {value!r} is not a currency.") from exc


def to_duration(value: Any, name: str) -> timedelta:
    """Durations are sent as integer nanoseconds."""
    nanoseconds = to_int(value, name)
    return timedelta(microseconds=nanoseconds // 1000)


def to_time(value: Any, name: str) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise _malformed(name, "RFC 3339 timestamp", value)
    match = _RFC3339_REGEX.fullmatch(value.strip())
    if match is None:
        raise MalformedEnvelopeError(f"Unexpected value for {name}: {value!r} is not a timestamp.")
    text = match.group("base")
    fraction = match.group("frac")
    if fraction:
        # datetime only keeps microseconds
        text += "." + fraction[:6].ljust(6, "0")
    tz = match.group("tz")
    text += "+00:00" if tz == "Z" else tz
    return datetime.fromisoformat(text)
