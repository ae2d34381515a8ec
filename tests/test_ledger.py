from __future__ import annotations

from roadlog.diagnostics import Diagnostic
from roadlog.models import ActionReport, Km, Position, parse_road
from roadlog.state.history import HistoryTable
from roadlog.state.ledger import PositionLedger


def _action(car: str, road: str, km: str, line_no: int) -> ActionReport:
    whole, digit = km.split(",")
    return ActionReport(
        car=car,
        position=Position(road=parse_road(road), km=Km.parse(whole, digit)),
        line_no=line_no,
    )


def test_first_action_opens_pending_report() -> None:
    history = HistoryTable()
    ledger = PositionLedger(history)

    outcome = ledger.record(_action("CAR001", "A1", "10,0", 1), "CAR001 A1 10,0")

    assert outcome.segment is None
    assert outcome.rejected is None
    pending = ledger.pending("CAR001")
    assert pending is not None
    assert pending.line_no == 1
    assert str(pending.position.road) == "A1"
    assert history.recall(1) == "CAR001 A1 10,0"


def test_same_road_commits_and_clears() -> None:
    history = HistoryTable()
    ledger = PositionLedger(history)
    ledger.record(_action("CAR001", "A1", "12,5", 1), "CAR001 A1 12,5")

    outcome = ledger.record(_action("CAR001", "A1", "10,0", 2), "CAR001 A1 10,0")

    assert outcome.rejected is None
    assert outcome.segment is not None
    assert outcome.segment.car == "CAR001"
    assert str(outcome.segment.road) == "A1"
    assert outcome.segment.distance == Km(whole=2, digit=5)
    assert "CAR001" not in ledger
    assert len(history) == 0


def test_mismatch_reports_original_line_and_reopens() -> None:
    history = HistoryTable()
    ledger = PositionLedger(history)
    ledger.record(_action("CAR001", "A1", "10,0", 1), "  CAR001 A1 10,0 ")

    outcome = ledger.record(_action("CAR001", "S2", "5,0", 2), "CAR001 S2 5,0")

    assert outcome.segment is None
    assert outcome.rejected == Diagnostic(line_no=1, text="  CAR001 A1 10,0 ")
    pending = ledger.pending("CAR001")
    assert pending is not None
    assert pending.line_no == 2
    assert str(pending.position.road) == "S2"
    assert pending.position.km == Km(whole=5, digit=0)
    assert 1 not in history
    assert history.recall(2) == "CAR001 S2 5,0"


def test_reopened_report_closes_on_new_road() -> None:
    ledger = PositionLedger()
    ledger.record(_action("CAR001", "A1", "10,0", 1), "CAR001 A1 10,0")
    ledger.record(_action("CAR001", "S2", "5,0", 2), "CAR001 S2 5,0")

    outcome = ledger.record(_action("CAR001", "S2", "7,5", 3), "CAR001 S2 7,5")

    assert outcome.segment is not None
    assert str(outcome.segment.road) == "S2"
    assert outcome.segment.distance == Km(whole=2, digit=5)


def test_cars_are_tracked_independently() -> None:
    ledger = PositionLedger()
    ledger.record(_action("abc", "A1", "1,0", 1), "abc A1 1,0")
    ledger.record(_action("ABC", "S1", "1,0", 2), "ABC S1 1,0")

    assert len(ledger) == 2
    outcome = ledger.record(_action("abc", "A1", "3,0", 3), "abc A1 3,0")
    assert outcome.segment is not None
    assert ledger.pending("ABC") is not None


def test_third_action_after_commit_opens_again() -> None:
    ledger = PositionLedger()
    ledger.record(_action("CAR001", "A1", "1,0", 1), "CAR001 A1 1,0")
    ledger.record(_action("CAR001", "A1", "2,0", 2), "CAR001 A1 2,0")

    outcome = ledger.record(_action("CAR001", "S3", "9,9", 3), "CAR001 S3 9,9")

    assert outcome.segment is None
    assert outcome.rejected is None
    pending = ledger.pending("CAR001")
    assert pending is not None
    assert pending.line_no == 3
