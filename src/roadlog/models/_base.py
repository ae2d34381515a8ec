"""Base model for roadlog domain values.

Domain values inherit from :class:`RoadlogModel`, a frozen pydantic
model, so they are hashable and can key the ledger and store maps.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict


class RoadlogModel(BaseModel):
    """Frozen base for domain value models."""

    model_config = ConfigDict(frozen=True, extra="forbid")


def full_match(pattern: re.Pattern[str], value: str) -> bool:
    """Return ``True`` when *pattern* matches the whole of *value*."""
    return pattern.fullmatch(value) is not None
