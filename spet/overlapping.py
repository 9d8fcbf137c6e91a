import itertools
import logging
from typing import Any, Iterable, List, Optional

from spet.errors import InvalidThreshold
from spet.points import EndOf, StartOf, enumerate_points, sorted_chain
from spet.span import Span
from spet.spet import Spet


def _as_spet(value: Any) -> Spet:
    if isinstance(value, Spet):
        return value
    return Spet(value)


def n_overlapping(k: int, sets: Iterable[Any]) -> Spet:
    """
    Returns the values covered by at least ``k`` of ``sets``.

    ``sets`` is normally an iterable of ``Spet``s. Any other iterable of spans
    is normalized into a ``Spet`` first, so a single input never counts twice
    toward the threshold.

    The inputs' spans are heap-merged into one ascending stream and swept as
    start/end points. At each coordinate all starts are applied before all
    ends, so spans that only touch at an endpoint still overlap there.
    """
    if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
        raise InvalidThreshold(k)

    spets = [_as_spet(value) for value in sets]
    if k > len(spets):
        return Spet.empty

    result: List[Span] = []
    active = 0
    pending_start: Optional[Any] = None

    points = enumerate_points(sorted_chain(spets))
    for coordinate, group in itertools.groupby(points, key=lambda point: point.value):
        starts = 0
        ends = 0
        for point in group:
            match point:
                case StartOf():
                    starts += 1
                case EndOf():
                    ends += 1

        if active < k <= active + starts:
            pending_start = coordinate
        active += starts

        if active - ends < k <= active:
            result.append(Span(pending_start, coordinate))
            pending_start = None
        active -= ends

    assert active == 0, f"Unbalanced sweep, {active} spans still open"
    logging.debug(f"n_overlapping(k={k}) over {len(spets)} sets produced {len(result)} spans")
    return Spet._from_canonical(result)


def union_all(sets: Iterable[Any]) -> Spet:
    """Union of any number of sets; empty when there are none."""
    return n_overlapping(1, sets)


def intersection_all(sets: Iterable[Any]) -> Spet:
    """Intersection of one or more sets."""
    spets = [_as_spet(value) for value in sets]
    if not spets:
        raise ValueError("intersection_all requires at least one set")
    return n_overlapping(len(spets), spets)
