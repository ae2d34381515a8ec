"""Append-only distance aggregation.

This is the only component that sums committed segments.  Totals are never
decremented; reads return sorted views so enumeration order never depends
on insertion order.
"""

from __future__ import annotations

import logging
from typing import Any

from roadlog.exceptions import RoadlogInvariantError
from roadlog.models.car import Car
from roadlog.models.km import ZERO_KM, Km
from roadlog.models.records import CommittedSegment
from roadlog.models.road import Road, RoadCategory

_logger = logging.getLogger(__name__)


def _add(totals: dict[Any, Km], key: Any, distance: Km) -> None:
    totals[key] = totals.get(key, ZERO_KM) + distance


class AggregationStore:
    """Per-car totals by road category and per-road totals over all cars."""

    def __init__(self) -> None:
        self._car_totals: dict[RoadCategory, dict[Car, Km]] = {
            RoadCategory.A: {},
            RoadCategory.S: {},
        }
        self._road_totals: dict[Road, Km] = {}
        self._cars: set[Car] = set()

    def commit(self, segment: CommittedSegment) -> None:
        """Add a segment to every total it contributes to."""
        per_car = self._car_totals.get(segment.road.category)
        if per_car is None:
            raise RoadlogInvariantError(
                f"segment for car {segment.car} has no valid road",
                car=segment.car,
                road=str(segment.road),
            )

        self._cars.add(segment.car)
        _add(per_car, segment.car, segment.distance)
        _add(self._road_totals, segment.road, segment.distance)
        _logger.debug("Committed car=%s road=%s distance=%s", segment.car, segment.road, segment.distance)

    def has_car(self, car: Car) -> bool:
        return car in self._cars

    def has_road(self, road: Road) -> bool:
        return road in self._road_totals

    def cars(self) -> list[Car]:
        """Every car with a committed segment, in natural order."""
        return sorted(self._cars)

    def roads(self) -> list[Road]:
        """Every road with a committed segment, by number then category."""
        return sorted(self._road_totals, key=Road.sort_key)

    def car_distance(self, car: Car, category: RoadCategory) -> Km | None:
        """Total for *car* on *category*, ``None`` if it never drove there."""
        return self._car_totals.get(category, {}).get(car)

    def road_distance(self, road: Road) -> Km | None:
        return self._road_totals.get(road)
