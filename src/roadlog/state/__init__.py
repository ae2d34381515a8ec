"""State layer.

The ledger, its history side-store and the aggregation store are the only
mutable state of a run.  They are owned by one processor and never shared.
"""

from roadlog.state.history import HistoryTable
from roadlog.state.ledger import LedgerOutcome, PositionLedger
from roadlog.state.store import AggregationStore

__all__ = ["AggregationStore", "HistoryTable", "LedgerOutcome", "PositionLedger"]
