"""Query classification and answer rendering."""

from __future__ import annotations

from enum import StrEnum

from roadlog.models._base import RoadlogModel
from roadlog.models.car import Car, is_valid_car_name
from roadlog.models.road import Road, RoadCategory, is_valid_road_name, parse_road
from roadlog.state.store import AggregationStore

_CAR_CATEGORIES: tuple[RoadCategory, ...] = (RoadCategory.A, RoadCategory.S)


class QueryKind(StrEnum):
    ALL = "all"
    CAR = "car"
    ROAD = "road"
    MIXED = "mixed"
    IGNORE = "ignore"
    INVALID = "invalid"


class ResolvedQuery(RoadlogModel):
    kind: QueryKind
    name: str = ""


def resolve_query(token: str, store: AggregationStore) -> ResolvedQuery:
    """Classify a query token against what the store currently knows.

    A token can name both a car and a road (``A12`` is a valid car name),
    in which case both answers are given.  Well-formed names that the store
    has never seen are ignored without a diagnostic.
    """
    if not token:
        return ResolvedQuery(kind=QueryKind.ALL)
    if not is_valid_car_name(token) and not is_valid_road_name(token):
        return ResolvedQuery(kind=QueryKind.INVALID, name=token)

    is_car = store.has_car(token)
    is_road = store.has_road(parse_road(token))
    if is_car and is_road:
        kind = QueryKind.MIXED
    elif is_car:
        kind = QueryKind.CAR
    elif is_road:
        kind = QueryKind.ROAD
    else:
        kind = QueryKind.IGNORE
    return ResolvedQuery(kind=kind, name=token)


def render_car(car: Car, store: AggregationStore) -> str:
    parts = [car]
    for category in _CAR_CATEGORIES:
        distance = store.car_distance(car, category)
        if distance is not None:
            parts.append(f"{category.letter} {distance}")
    return " ".join(parts)


def render_road(road: Road, store: AggregationStore) -> str:
    distance = store.road_distance(road)
    if distance is None:
        raise KeyError(str(road))
    return f"{road} {distance}"


def render_all(store: AggregationStore) -> list[str]:
    """Every car in natural order, then every road by number and category."""
    answers = [render_car(car, store) for car in store.cars()]
    answers.extend(render_road(road, store) for road in store.roads())
    return answers


def answer_query(token: str, store: AggregationStore) -> list[str] | None:
    """Answer lines for *token*, or ``None`` when the token is invalid."""
    resolved = resolve_query(token, store)
    if resolved.kind is QueryKind.INVALID:
        return None
    if resolved.kind is QueryKind.ALL:
        return render_all(store)

    answers: list[str] = []
    if resolved.kind in (QueryKind.CAR, QueryKind.MIXED):
        answers.append(render_car(resolved.name, store))
    if resolved.kind in (QueryKind.ROAD, QueryKind.MIXED):
        answers.append(render_road(parse_road(resolved.name), store))
    return answers
