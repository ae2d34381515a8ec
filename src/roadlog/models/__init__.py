"""Domain value types for roadlog."""

from roadlog.models._base import RoadlogModel
from roadlog.models.car import Car, is_valid_car_name
from roadlog.models.km import ZERO_KM, Km
from roadlog.models.records import ActionReport, CommittedSegment, PendingReport, Position
from roadlog.models.road import NO_ROAD, Road, RoadCategory, is_valid_road_name, parse_road

__all__ = [
    "ActionReport",
    "Car",
    "CommittedSegment",
    "Km",
    "NO_ROAD",
    "PendingReport",
    "Position",
    "Road",
    "RoadCategory",
    "RoadlogModel",
    "ZERO_KM",
    "is_valid_car_name",
    "is_valid_road_name",
    "parse_road",
]
