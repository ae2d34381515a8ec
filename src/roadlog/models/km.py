"""Kilometer values with one decimal digit.

Arithmetic goes through a single integer count of tenths so sums and
differences stay exact.
"""

from __future__ import annotations

from pydantic import Field

from roadlog._constants import KM_SEPARATOR, TENTHS_PER_UNIT
from roadlog.models._base import RoadlogModel


# Decimal strings are converted in chunks below CPython's int/str digit limit,
# so arbitrarily long km tokens parse and render without touching that limit.
_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def digits_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_digits(value: int) -> str:
    chunks: list[str] = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


class Km(RoadlogModel):
    """A distance such as ``12,5``.

    Parameters
    ----------
    whole : int
        Integer part, non-negative.
    digit : int
        Single decimal digit ``0..9``.
    """

    whole: int = Field(ge=0)
    digit: int = Field(ge=0, le=9)

    @classmethod
    def from_tenths(cls, tenths: int) -> Km:
        if tenths < 0:
            raise ValueError(f"distance must be non-negative, got {tenths} tenths")
        whole, digit = divmod(tenths, TENTHS_PER_UNIT)
        return cls(whole=whole, digit=digit)

    @classmethod
    def parse(cls, whole: str, digit: str) -> Km:
        """Build from the two captured lexer tokens."""
        return cls(whole=digits_to_int(whole), digit=int(digit))

    def to_tenths(self) -> int:
        return self.whole * TENTHS_PER_UNIT + self.digit

    def distance_to(self, other: Km) -> Km:
        """Absolute difference; direction of travel does not matter."""
        return Km.from_tenths(abs(self.to_tenths() - other.to_tenths()))

    def __add__(self, other: Km) -> Km:
        if not isinstance(other, Km):
            return NotImplemented
        return Km.from_tenths(self.to_tenths() + other.to_tenths())

    def __str__(self) -> str:
        return f"{int_to_digits(self.whole)}{KM_SEPARATOR}{self.digit}"


ZERO_KM = Km(whole=0, digit=0)
