"""Car names."""

from __future__ import annotations

import re

from roadlog._constants import CAR_NAME
from roadlog.models._base import full_match

_CAR_RE = re.compile(CAR_NAME, re.ASCII)

Car = str
"""Cars are plain strings compared case-sensitively."""


def is_valid_car_name(value: str) -> bool:
    """Return ``True`` for 3-11 ASCII alphanumeric characters."""
    return full_match(_CAR_RE, value)
