"""Line classification.

Every input line is exactly one of: empty, a query, an action, or
malformed.  Patterns are anchored against the whole line and restricted
to ASCII so that ``\\s`` and the alphanumeric classes accept the same
characters regardless of the input encoding.
"""

from __future__ import annotations

import re
from enum import StrEnum

from roadlog._constants import ALNUM, CAR_NAME, KM_TENTHS, KM_WHOLE, ROAD_NAME, group
from roadlog.models._base import RoadlogModel

_QUERY_RE = re.compile(r"\s*\?\s*" + group(ALNUM + "*") + r"\s*", re.ASCII)
_ACTION_RE = re.compile(
    r"\s*"
    + group(CAR_NAME)
    + r"\s+"
    + group(ROAD_NAME)
    + r"\s+"
    + group(KM_WHOLE)
    + ","
    + group(KM_TENTHS)
    + r"\s*",
    re.ASCII,
)


class LineKind(StrEnum):
    EMPTY = "empty"
    QUERY = "query"
    ACTION = "action"
    MALFORMED = "malformed"


class ActionTokens(RoadlogModel):
    """Raw captures of an action line, not yet converted to domain values."""

    car: str
    road: str
    km_whole: str
    km_digit: str


class ClassifiedLine(RoadlogModel):
    """Result of :func:`classify_line`.

    ``query`` is set only for :attr:`LineKind.QUERY` (possibly ``""``) and
    ``action`` only for :attr:`LineKind.ACTION`.
    """

    kind: LineKind
    query: str | None = None
    action: ActionTokens | None = None


_EMPTY = ClassifiedLine(kind=LineKind.EMPTY)
_MALFORMED = ClassifiedLine(kind=LineKind.MALFORMED)


def classify_line(text: str) -> ClassifiedLine:
    """Classify one line of input (without its line terminator)."""
    if not text:
        return _EMPTY

    matched = _QUERY_RE.fullmatch(text)
    if matched is not None:
        return ClassifiedLine(kind=LineKind.QUERY, query=matched.group(1))

    matched = _ACTION_RE.fullmatch(text)
    if matched is not None:
        car, road, km_whole, km_digit = matched.groups()
        return ClassifiedLine(
            kind=LineKind.ACTION,
            action=ActionTokens(car=car, road=road, km_whole=km_whole, km_digit=km_digit),
        )

    return _MALFORMED
