"""Per-car pending reports.

Each car is either idle or has exactly one pending report on some road.
An action for an idle car opens a report.  An action on the pending road
closes it into a :class:`CommittedSegment`.  An action on any other road
rejects the pending report (the diagnostic points at the *original* line)
and opens a new one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from roadlog.diagnostics import Diagnostic
from roadlog.models.car import Car
from roadlog.models.records import ActionReport, CommittedSegment, PendingReport
from roadlog.state.history import HistoryTable

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerOutcome:
    """What recording one action produced; at most one field is set."""

    segment: CommittedSegment | None = None
    rejected: Diagnostic | None = None


_NOTHING = LedgerOutcome()


class PositionLedger:
    """Pairs consecutive reports of the same car."""

    def __init__(self, history: HistoryTable | None = None) -> None:
        self._history = history if history is not None else HistoryTable()
        self._pending: dict[Car, PendingReport] = {}

    @property
    def history(self) -> HistoryTable:
        return self._history

    def __len__(self) -> int:
        return len(self._pending)

    def __contains__(self, car: object) -> bool:
        return car in self._pending

    def pending(self, car: Car) -> PendingReport | None:
        return self._pending.get(car)

    def _open(self, action: ActionReport, line_text: str) -> None:
        self._pending[action.car] = PendingReport(position=action.position, line_no=action.line_no)
        self._history.remember(action.line_no, line_text)

    def record(self, action: ActionReport, line_text: str) -> LedgerOutcome:
        """Record *action*, read from the line *line_text*."""
        previous = self._pending.get(action.car)
        if previous is None:
            self._open(action, line_text)
            _logger.debug("Opened report car=%s road=%s line=%d", action.car, action.road, action.line_no)
            return _NOTHING

        if previous.position.road != action.road:
            rejected = Diagnostic(line_no=previous.line_no, text=self._history.recall(previous.line_no))
            self._history.forget(previous.line_no)
            self._open(action, line_text)
            _logger.debug(
                "Road mismatch car=%s pending=%s new=%s; reopened at line %d",
                action.car,
                previous.position.road,
                action.road,
                action.line_no,
            )
            return LedgerOutcome(rejected=rejected)

        segment = CommittedSegment(
            car=action.car,
            road=action.road,
            distance=previous.position.km.distance_to(action.km),
        )
        self._history.forget(previous.line_no)
        del self._pending[action.car]
        _logger.debug("Closed report car=%s road=%s distance=%s", segment.car, segment.road, segment.distance)
        return LedgerOutcome(segment=segment)
