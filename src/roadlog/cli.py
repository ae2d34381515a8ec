"""Command line entry point: read a road log on stdin.

Usage
-----
::

    roadlog < events.log
    python -m roadlog --log-level DEBUG < events.log

Answers are written to stdout and ``Error in line N: ...`` diagnostics
to stderr.  Logging is left unconfigured unless a level is given through
``--log-level`` or ``ROADLOG_LOG_LEVEL``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from roadlog import __version__
from roadlog.config import RoadlogConfig
from roadlog.exceptions import RoadlogConfigError, RoadlogInvariantError
from roadlog.processor import RoadLogProcessor

_logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTERNAL_FAULT = 1
EXIT_DIAGNOSTICS = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadlog",
        description="Aggregate per-car and per-road distances from a road log read on stdin.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Enable logging on stderr at this level (default: $ROADLOG_LOG_LEVEL, or off)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help=f"Exit with status {EXIT_DIAGNOSTICS} if any line was rejected",
    )
    return parser


def _configure_logging(config: RoadlogConfig) -> None:
    level = config.logging_level
    if level is None:
        return
    logging.basicConfig(level=level, format=config.log_format, stream=sys.stderr)


def _reconfigure_streams() -> None:
    """Make the standard streams byte-transparent.

    Input lines end at ``\\n`` only, so a ``\\r`` stays in the line text, and
    bytes that are not valid in the stream encoding round-trip through
    ``surrogateescape`` into diagnostics unchanged.
    """
    stdin_reconfigure = getattr(sys.stdin, "reconfigure", None)
    if stdin_reconfigure is not None:
        stdin_reconfigure(errors="surrogateescape", newline="\n")
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        config = RoadlogConfig.from_env(log_level=args.log_level, strict=args.strict)
    except RoadlogConfigError as exc:
        print(f"roadlog: {exc}", file=sys.stderr)
        return EXIT_INTERNAL_FAULT
    _reconfigure_streams()
    _configure_logging(config)

    processor = RoadLogProcessor()
    try:
        stats = processor.run(sys.stdin, sys.stdout, sys.stderr)
    except RoadlogInvariantError as exc:
        _logger.debug("Internal consistency fault at line %d", processor.line_no, exc_info=True)
        print(f"roadlog: internal error at line {processor.line_no}: {exc}", file=sys.stderr)
        return EXIT_INTERNAL_FAULT

    if config.strict and stats.diagnostics:
        return EXIT_DIAGNOSTICS
    return EXIT_OK
