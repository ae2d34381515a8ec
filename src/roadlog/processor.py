"""Line-by-line processing of a road log.

:func:`handle_action` and :func:`handle_query` are the two entry points a
classified line can reach.  They receive the state they operate on
explicitly; :class:`RoadLogProcessor` owns that state for one run and
keeps the line counter.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from roadlog.diagnostics import Diagnostic
from roadlog.lexer import ActionTokens, LineKind, classify_line
from roadlog.models.km import Km
from roadlog.models.records import ActionReport, Position
from roadlog.models.road import parse_road
from roadlog.query import answer_query
from roadlog.state.history import HistoryTable
from roadlog.state.ledger import LedgerOutcome, PositionLedger
from roadlog.state.store import AggregationStore

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineResult:
    """Everything one input line produced."""

    line_no: int
    kind: LineKind
    answers: tuple[str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass
class ProcessorStats:
    lines: int = 0
    actions: int = 0
    queries: int = 0
    segments: int = 0
    diagnostics: int = 0


def build_action(tokens: ActionTokens, line_no: int) -> ActionReport:
    """Convert lexer captures into an :class:`ActionReport`."""
    return ActionReport(
        car=tokens.car,
        position=Position(road=parse_road(tokens.road), km=Km.parse(tokens.km_whole, tokens.km_digit)),
        line_no=line_no,
    )


def handle_action(
    tokens: ActionTokens,
    line_text: str,
    line_no: int,
    *,
    ledger: PositionLedger,
    store: AggregationStore,
) -> LedgerOutcome:
    """Record an action; commit a segment when it closes one."""
    outcome = ledger.record(build_action(tokens, line_no), line_text)
    if outcome.segment is not None:
        store.commit(outcome.segment)
    return outcome


def handle_query(
    token: str,
    line_text: str,
    line_no: int,
    *,
    store: AggregationStore,
) -> tuple[list[str], Diagnostic | None]:
    """Answer a query; an invalid token yields a diagnostic for the query line."""
    answers = answer_query(token, store)
    if answers is None:
        return [], Diagnostic(line_no=line_no, text=line_text)
    return answers, None


class RoadLogProcessor:
    """Owns the state of one run and feeds lines through it in order."""

    def __init__(self) -> None:
        self.history = HistoryTable()
        self.ledger = PositionLedger(self.history)
        self.store = AggregationStore()
        self.stats = ProcessorStats()
        self._line_no = 0

    @property
    def line_no(self) -> int:
        """Number of lines read so far, blank lines included."""
        return self._line_no

    def feed(self, line: str) -> LineResult:
        """Process one line (without its terminator)."""
        self._line_no += 1
        self.stats.lines += 1
        line_no = self._line_no
        classified = classify_line(line)

        answers: list[str] = []
        diagnostic: Diagnostic | None = None
        if classified.kind is LineKind.MALFORMED:
            diagnostic = Diagnostic(line_no=line_no, text=line)
        elif classified.kind is LineKind.QUERY:
            assert classified.query is not None  # noqa: S101
            self.stats.queries += 1
            answers, diagnostic = handle_query(classified.query, line, line_no, store=self.store)
        elif classified.kind is LineKind.ACTION:
            assert classified.action is not None  # noqa: S101
            self.stats.actions += 1
            outcome = handle_action(classified.action, line, line_no, ledger=self.ledger, store=self.store)
            if outcome.segment is not None:
                self.stats.segments += 1
            diagnostic = outcome.rejected

        diagnostics: tuple[Diagnostic, ...] = ()
        if diagnostic is not None:
            self.stats.diagnostics += 1
            diagnostics = (diagnostic,)
        return LineResult(line_no=line_no, kind=classified.kind, answers=tuple(answers), diagnostics=diagnostics)

    def process_lines(self, lines: Iterable[str]) -> Iterator[LineResult]:
        for line in lines:
            yield self.feed(line)

    def run(self, stream_in: TextIO, stream_out: TextIO, stream_err: TextIO) -> ProcessorStats:
        """Drive the processor from *stream_in* until end of input.

        Answers go to *stream_out*, diagnostics to *stream_err*.  Both are
        flushed per line so their interleaving follows the input order.
        """
        for result in self.process_lines(strip_terminator(raw) for raw in stream_in):
            if result.answers:
                stream_out.write("".join(f"{answer}\n" for answer in result.answers))
                stream_out.flush()
            for diagnostic in result.diagnostics:
                stream_err.write(f"{diagnostic.render()}\n")
                stream_err.flush()
        _logger.debug(
            "End of input lines=%d actions=%d queries=%d segments=%d diagnostics=%d",
            self.stats.lines,
            self.stats.actions,
            self.stats.queries,
            self.stats.segments,
            self.stats.diagnostics,
        )
        return self.stats


def strip_terminator(raw: str) -> str:
    """Drop a trailing ``\\n``; any ``\\r`` stays part of the line text."""
    if raw.endswith("\n"):
        return raw[:-1]
    return raw
