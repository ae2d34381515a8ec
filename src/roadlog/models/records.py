"""Parsed actions and the records derived from them.

The processor converts every accepted action line into an
:class:`ActionReport`.  Only the ledger turns reports into
:class:`CommittedSegment` values, and only the store aggregates them.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from roadlog.models._base import RoadlogModel
from roadlog.models.car import Car, is_valid_car_name
from roadlog.models.km import Km
from roadlog.models.road import Road


class Position(RoadlogModel):
    """Where a car was last reported."""

    road: Road
    km: Km


class ActionReport(RoadlogModel):
    """A single accepted action line."""

    car: Car = Field(..., description="Car name")
    position: Position
    line_no: int = Field(..., ge=1, description="1-based line number the action was read from")

    @field_validator("car")
    @classmethod
    def _check_car(cls, value: str) -> str:
        if not is_valid_car_name(value):
            raise ValueError(f"invalid car name {value!r}")
        return value

    @property
    def road(self) -> Road:
        return self.position.road

    @property
    def km(self) -> Km:
        return self.position.km


class PendingReport(RoadlogModel):
    """An open report waiting for a same-road action of the same car."""

    position: Position
    line_no: int = Field(..., ge=1)


class CommittedSegment(RoadlogModel):
    """A measured trip segment ready for aggregation."""

    car: Car
    road: Road
    distance: Km
