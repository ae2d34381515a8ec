"""roadlog - per-car and per-road distance aggregation over a road log."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("roadlog")
except PackageNotFoundError:
    __version__ = "0+local"
from roadlog.config import RoadlogConfig
from roadlog.diagnostics import Diagnostic
from roadlog.exceptions import RoadlogConfigError, RoadlogError, RoadlogInvariantError
from roadlog.lexer import ClassifiedLine, LineKind, classify_line
from roadlog.models import (
    NO_ROAD,
    ActionReport,
    CommittedSegment,
    Km,
    PendingReport,
    Position,
    Road,
    RoadCategory,
    parse_road,
)
from roadlog.processor import LineResult, RoadLogProcessor, handle_action, handle_query
from roadlog.query import QueryKind, answer_query, resolve_query
from roadlog.state import AggregationStore, HistoryTable, PositionLedger

__all__ = [
    "__version__",
    "ActionReport",
    "AggregationStore",
    "ClassifiedLine",
    "CommittedSegment",
    "Diagnostic",
    "HistoryTable",
    "Km",
    "LineKind",
    "LineResult",
    "NO_ROAD",
    "PendingReport",
    "Position",
    "PositionLedger",
    "QueryKind",
    "Road",
    "RoadCategory",
    "RoadLogProcessor",
    "RoadlogConfig",
    "RoadlogConfigError",
    "RoadlogError",
    "RoadlogInvariantError",
    "answer_query",
    "classify_line",
    "handle_action",
    "handle_query",
    "parse_road",
    "resolve_query",
]
