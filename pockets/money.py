"""Decimal quantities, currencies and amounts of money."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_MAX_DECIMAL = 10**12
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class MoneyError(Exception):
    """Base class for errors raised by this module."""


class InvalidDecimalError(MoneyError, ValueError):
    """The text could not be read as a decimal number."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"unable to convert the decimal: {detail}")
        self.detail = detail


class TooLargeError(MoneyError, ValueError):
    """The quantity exceeds the supported maximum."""

    def __init__(self) -> None:
        super().__init__("quantity over 10^12 is too large")


@dataclass
class Decimal:
    """A number held as an integer count of subunits and a power-of-ten precision."""

    subunits: int = 0
    precision: int = 0

    def simplify(self) -> None:
        """Remove trailing zeros from the subunits, lowering the precision."""
        while self.subunits % 10 == 0 and self.precision > 0:
            self.precision -= 1
            self.subunits //= 10


@dataclass(frozen=True)
class Currency:
    """A currency identified by its code."""

    code: str = ""


@dataclass
class Amount:
    """A quantity of a given currency."""

    quantity: Decimal = field(default_factory=Decimal)
    currency: Currency = field(default_factory=Currency)


def _parse_int64(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise InvalidDecimalError(f'parsing "{text}": invalid syntax')
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise InvalidDecimalError(f'parsing "{text}": value out of range')
    return number


def parse_decimal(value: str) -> Decimal:
    """Parse text such as ``"1.52"`` into a :class:`Decimal`."""
    int_part, _, frac_part = value.partition(".")
    subunits = _parse_int64(int_part + frac_part)
    if subunits > _MAX_DECIMAL:
        raise TooLargeError()
    return Decimal(subunits=subunits, precision=len(frac_part) % 256)


def convert(amount: Amount, to: Currency) -> Amount:
    """Convert ``amount`` into the currency ``to``; currently yields an empty amount."""
    return Amount()