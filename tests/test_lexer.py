from __future__ import annotations

import pytest

from roadlog.lexer import LineKind, classify_line


def test_empty_line() -> None:
    assert classify_line("").kind is LineKind.EMPTY


def test_whitespace_only_line_is_malformed() -> None:
    assert classify_line("   ").kind is LineKind.MALFORMED


@pytest.mark.parametrize(
    ("line", "token"),
    [("?", ""), ("?CAR001", "CAR001"), ("  ?  A1  ", "A1"), ("?\tabc", "abc"), ("? ", "")],
)
def test_query_lines(line: str, token: str) -> None:
    classified = classify_line(line)
    assert classified.kind is LineKind.QUERY
    assert classified.query == token


def test_query_token_captured_verbatim_even_if_not_a_name() -> None:
    classified = classify_line("?ab")
    assert classified.kind is LineKind.QUERY
    assert classified.query == "ab"


@pytest.mark.parametrize("line", ["?CAR 1", "?CAR-1", "??", "CAR001?"])
def test_malformed_queries(line: str) -> None:
    assert classify_line(line).kind is LineKind.MALFORMED


def test_action_tokens() -> None:
    classified = classify_line("  CAR001  S12\t10,5 ")
    assert classified.kind is LineKind.ACTION
    assert classified.action is not None
    assert classified.action.car == "CAR001"
    assert classified.action.road == "S12"
    assert classified.action.km_whole == "10"
    assert classified.action.km_digit == "5"


def test_action_with_zero_whole_part() -> None:
    classified = classify_line("abc A1 0,0")
    assert classified.kind is LineKind.ACTION


@pytest.mark.parametrize(
    "line",
    [
        "CAR001 A1 010,0",  # leading zero
        "CAR001 A0 1,0",  # road number zero
        "CAR001 A01 1,0",
        "CAR001 A1000 1,0",
        "CAR001 B1 1,0",
        "CAR001 A1 1.0",  # dot separator
        "CAR001 A1 1,",
        "CAR001 A1 1,23",
        "CAR001 A1 1",
        "CA A1 1,0",  # car name too short
        "CAR001234567 A1 1,0",  # too long
        "CAR001A1 1,0",
        "CAR001 A1 1 ,0",
        "CAR001 A1 1,0 extra",
    ],
)
def test_malformed_actions(line: str) -> None:
    assert classify_line(line).kind is LineKind.MALFORMED


def test_non_ascii_is_rejected() -> None:
    assert classify_line("CAR\u00e901 A1 1,0").kind is LineKind.MALFORMED
    assert classify_line("CAR001\u00a0A1 1,0").kind is LineKind.MALFORMED
