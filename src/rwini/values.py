"""Typed property values.

Each parser reads a single stripped value and raises ``ValueError`` when the
text does not follow its grammar. Numbers follow a strict syntax: no digit
separators, no surrounding whitespace, and prices must fit a signed 32-bit
integer.
"""

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Self

SECONDS_SUFFIX = "s"
CUSTOM_PRICE_SEPARATOR = "="

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


def parse_int32(text: str) -> int:
    if _INT_PATTERN.fullmatch(text) is None:
        msg = f"Invalid integer: {text!r}"
        raise ValueError(msg)
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        msg = f"Integer out of range: {text!r}"
        raise ValueError(msg)
    return value


def parse_float(text: str) -> float:
    if _FLOAT_PATTERN.fullmatch(text) is None:
        msg = f"Invalid number: {text!r}"
        raise ValueError(msg)
    return float(text)


@dataclass(frozen=True, slots=True)
class Price:
    amount: int
    resource: str | None = None

    @property
    def is_credits(self) -> bool:
        return self.resource is None

    @classmethod
    def parse(cls, text: str) -> Self:
        resource, sep, amount = text.partition(CUSTOM_PRICE_SEPARATOR)
        if sep:
            try:
                return cls(parse_int32(amount.lstrip()), resource)
            except ValueError:
                msg = f"Invalid custom price amount: {text!r}"
                raise ValueError(msg) from None
        try:
            return cls(parse_int32(text))
        except ValueError:
            msg = f"Invalid credit price: {text!r}"
            raise ValueError(msg) from None

    def __str__(self) -> str:
        if self.resource is None:
            return str(self.amount)
        return f"{self.resource}{CUSTOM_PRICE_SEPARATOR}{self.amount}"


class SpeedUnit(StrEnum):
    NORMALIZED_PER_TICK = "normalized_per_tick"
    SECONDS = "seconds"


@dataclass(frozen=True, slots=True)
class Speed:
    value: float
    unit: SpeedUnit

    @classmethod
    def parse(cls, text: str) -> Self:
        if text.endswith(SECONDS_SUFFIX):
            try:
                return cls(parse_float(text.removesuffix(SECONDS_SUFFIX).rstrip()), SpeedUnit.SECONDS)
            except ValueError:
                msg = f"Invalid speed in seconds: {text!r}"
                raise ValueError(msg) from None
        try:
            return cls(parse_float(text), SpeedUnit.NORMALIZED_PER_TICK)
        except ValueError:
            msg = f"Invalid normalized per-tick speed: {text!r}"
            raise ValueError(msg) from None


class UnitClass(StrEnum):
    CUSTOM_UNIT_META_DATA = "CustomUnitMetaData"

    @classmethod
    def parse(cls, text: str) -> "UnitClass":
        try:
            return cls(text)
        except ValueError:
            msg = f"Unknown unit class: {text!r}"
            raise ValueError(msg) from None
