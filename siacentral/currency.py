"""Arbitrary-precision currency amounts in the network's smallest unit (hastings)."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation, localcontext
from functools import total_ordering
from typing import Any, Union

# 1 SC = 10^24 H
SIACOIN_PRECISION = 10 ** 24

_DECIMAL_REGEX = re.compile(r"^[0-9]+$")


def _coerce(value: Any) -> int:
    if isinstance(value, Currency):
        return value._value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(f"unsupported operand for Currency: {type(value).__name__}")


@total_ordering
class Currency:
    """
    Unsigned, exact monetary amount.

    On-chain amounts routinely exceed 64 bits, so the value is held as a Python
    int and serialized as a base-10 string. Results that would be negative raise
    ValueError instead of wrapping.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("Currency value must be an int")
        if value < 0:
            raise ValueError("Currency cannot be negative")
        self._value = value

    @classmethod
    def from_string(cls, text: str) -> "Currency":
        """Parse a base-10 string such as ``"1000000000000000000000000"``."""
        if not isinstance(text, str):
            raise TypeError("Currency string must be a str")
        stripped = text.strip()
        if not _DECIMAL_REGEX.fullmatch(stripped):
            raise ValueError(f"invalid currency string: {text!r}")
        return cls(int(stripped))

    @classmethod
    def parse(cls, value: Union["Currency", int, str]) -> "Currency":
        """Build a Currency from another Currency, an int, or a base-10 string."""
        if isinstance(value, Currency):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(value)

    @classmethod
    def from_siacoins(cls, amount: Union[Decimal, str, int]) -> "Currency":
        """Convert a whole/fractional siacoin amount to hastings."""
        try:
            siacoins = Decimal(str(amount))
        except InvalidOperation as exc:
            raise ValueError(f"invalid siacoin amount: {amount!r}") from exc
        with localcontext() as ctx:
            ctx.prec = len(siacoins.as_tuple().digits) + 30
            hastings = siacoins.scaleb(24)
        if hastings != hastings.to_integral_value():
            raise ValueError("siacoin amount is more precise than one hasting")
        return cls(int(hastings))

    @property
    def siacoins(self) -> Decimal:
        with localcontext() as ctx:
            ctx.prec = max(28, len(str(self._value)) + 1)
            return Decimal(self._value).scaleb(-24)

    def to_json(self) -> str:
        return str(self._value)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        try:
            return self._value == _coerce(other)
        except TypeError:
            return NotImplemented

    def __lt__(self, other: object) -> bool:
        try:
            return self._value < _coerce(other)
        except TypeError:
            return NotImplemented

    def __add__(self, other: Any) -> "Currency":
        return Currency(self._value + _coerce(other))

    __radd__ = __add__

    def __sub__(self, other: Any) -> "Currency":
        result = self._value - _coerce(other)
        if result < 0:
            raise ValueError("Currency subtraction would be negative")
        return Currency(result)

    def __rsub__(self, other: Any) -> "Currency":
        return Currency(_coerce(other)) - self

    def __mul__(self, other: Any) -> "Currency":
        return Currency(self._value * _coerce(other))

    __rmul__ = __mul__

    def __floordiv__(self, other: Any) -> "Currency":
        return Currency(self._value // _coerce(other))

    def __mod__(self, other: Any) -> "Currency":
        return Currency(self._value % _coerce(other))

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Currency({self._value})"


ZERO = Currency(0)
