"""Custom exception hierarchy for roadlog."""

from __future__ import annotations


class RoadlogError(Exception):
    """Base exception for all roadlog errors."""


class RoadlogConfigError(RoadlogError):
    """Invalid configuration value."""


class RoadlogInvariantError(RoadlogError):
    """Internal consistency fault.

    Raised when a segment on the ``none`` road reaches the aggregation
    store.  The lexer only ever produces valid road names, so reaching
    this indicates a bug in the pipeline rather than bad input.
    """

    def __init__(
        self,
        message: str,
        *,
        car: str = "",
        road: str = "",
    ) -> None:
        self.car = car
        self.road = road
        super().__init__(message)
