"""Road identifiers.

A road is a category letter (``A`` or ``S``) followed by a number in
``1..999``.  Tokens that fail the road grammar resolve to :data:`NO_ROAD`,
a sentinel that renders as an empty string and must never be aggregated.
"""

from __future__ import annotations

import enum
import re

from pydantic import Field, model_validator

from roadlog._constants import ROAD_NAME
from roadlog.models._base import RoadlogModel, full_match

_ROAD_RE = re.compile(ROAD_NAME, re.ASCII)

NO_ROAD_NUMBER = -1


class RoadCategory(enum.IntEnum):
    """Road category; member order is the tie-break order within a number."""

    UNKNOWN = -1
    A = 0
    S = 1

    @property
    def letter(self) -> str:
        return "" if self is RoadCategory.UNKNOWN else self.name

    @classmethod
    def from_letter(cls, letter: str) -> RoadCategory:
        member = cls.__members__.get(letter)
        if member is None or member is cls.UNKNOWN:
            return cls.UNKNOWN
        return member


class Road(RoadlogModel):
    """A road: category plus number.

    Parameters
    ----------
    category : RoadCategory
        ``A``, ``S`` or ``UNKNOWN`` for the sentinel.
    number : int
        ``1..999`` for real roads, ``-1`` for the sentinel.
    """

    category: RoadCategory
    number: int = Field(ge=NO_ROAD_NUMBER, le=999)

    @model_validator(mode="after")
    def _check_number(self) -> Road:
        if self.category is RoadCategory.UNKNOWN:
            if self.number != NO_ROAD_NUMBER:
                raise ValueError(f"none road must have number {NO_ROAD_NUMBER}, got {self.number}")
        elif self.number < 1:
            raise ValueError(f"road number must be between 1 and 999, got {self.number}")
        return self

    @property
    def is_none(self) -> bool:
        return self.category is RoadCategory.UNKNOWN

    def sort_key(self) -> tuple[int, int]:
        """Order by number, then category."""
        return (self.number, int(self.category))

    def __str__(self) -> str:
        if self.is_none:
            return ""
        return f"{self.category.letter}{self.number}"


NO_ROAD = Road(category=RoadCategory.UNKNOWN, number=NO_ROAD_NUMBER)


def is_valid_road_name(value: str) -> bool:
    """Return ``True`` for ``[AS][1-9][0-9]{0,2}``."""
    return full_match(_ROAD_RE, value)


def parse_road(token: str) -> Road:
    """Parse a road token, returning :data:`NO_ROAD` when it is invalid."""
    if not is_valid_road_name(token):
        return NO_ROAD
    category = RoadCategory.from_letter(token[0])
    if category is RoadCategory.UNKNOWN:
        return NO_ROAD
    return Road(category=category, number=int(token[1:]))
