from __future__ import annotations

import pytest

from roadlog.models import CommittedSegment, Km, parse_road
from roadlog.query import QueryKind, answer_query, render_car, resolve_query
from roadlog.state.store import AggregationStore


@pytest.fixture
def store() -> AggregationStore:
    store = AggregationStore()
    for car, road, whole, digit in (
        ("CAR001", "A1", 2, 5),
        ("CAR001", "S1", 1, 0),
        ("A12", "S3", 0, 4),
        ("bus", "A12", 7, 0),
    ):
        store.commit(CommittedSegment(car=car, road=parse_road(road), distance=Km(whole=whole, digit=digit)))
    return store


@pytest.mark.parametrize(
    ("token", "kind"),
    [
        ("", QueryKind.ALL),
        ("CAR001", QueryKind.CAR),
        ("A1", QueryKind.ROAD),
        ("A12", QueryKind.MIXED),
        ("S999", QueryKind.IGNORE),
        ("nobody", QueryKind.IGNORE),
        ("ab", QueryKind.INVALID),
        ("A0", QueryKind.INVALID),
    ],
)
def test_resolve_query(store: AggregationStore, token: str, kind: QueryKind) -> None:
    assert resolve_query(token, store).kind is kind


def test_car_answer_lists_both_categories(store: AggregationStore) -> None:
    assert answer_query("CAR001", store) == ["CAR001 A 2,5 S 1,0"]


def test_car_answer_omits_missing_category(store: AggregationStore) -> None:
    assert answer_query("bus", store) == ["bus A 7,0"]


def test_road_answer(store: AggregationStore) -> None:
    assert answer_query("S1", store) == ["S1 1,0"]


def test_mixed_answer_gives_car_then_road(store: AggregationStore) -> None:
    assert answer_query("A12", store) == ["A12 S 0,4", "A12 7,0"]


def test_unknown_name_is_silently_ignored(store: AggregationStore) -> None:
    assert answer_query("S999", store) == []


def test_invalid_token(store: AggregationStore) -> None:
    assert answer_query("ab", store) is None


def test_all_lists_cars_then_roads(store: AggregationStore) -> None:
    assert answer_query("", store) == [
        "A12 S 0,4",
        "CAR001 A 2,5 S 1,0",
        "bus A 7,0",
        "A1 2,5",
        "S1 1,0",
        "S3 0,4",
        "A12 7,0",
    ]


def test_all_is_idempotent(store: AggregationStore) -> None:
    assert answer_query("", store) == answer_query("", store)


def test_all_on_empty_store() -> None:
    assert answer_query("", AggregationStore()) == []


def test_car_without_totals_renders_bare_name() -> None:
    assert render_car("ghost", AggregationStore()) == "ghost"
