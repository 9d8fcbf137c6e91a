from datetime import datetime

import pytest

from spet.errors import InvalidSpan, SpetError
from spet.span import Span, make_span


def test_make_span():
    span = make_span(1, 3)
    assert span.start == 1
    assert span.end == 3
    assert span == Span(1, 3)


def test_invalid_span():
    with pytest.raises(InvalidSpan) as excinfo:
        make_span(5, 3)
    assert excinfo.value.start == 5
    assert excinfo.value.end == 3
    # Never swapped into a valid span
    with pytest.raises(ValueError):
        Span(2.5, 1.0)
    with pytest.raises(SpetError):
        Span(datetime(2024, 1, 2), datetime(2024, 1, 1))


def test_degenerate_span_is_allowed():
    span = Span.point(4)
    assert span == Span(4, 4)
    assert span.contains(4)
    assert str(span) == "4"


def test_spans_are_immutable():
    span = Span(1, 2)
    with pytest.raises(AttributeError):
        span.start = 0  # type: ignore[misc]


def test_ordering_by_start_then_end():
    spans = [Span(3, 4), Span(1, 5), Span(1, 2)]
    assert sorted(spans) == [Span(1, 2), Span(1, 5), Span(3, 4)]


def test_overlaps_and_touching():
    assert Span(1, 3).overlaps(Span(2, 5))
    assert Span(2, 5).overlaps(Span(1, 3))
    # Closed endpoints: touching is overlapping
    assert Span(1, 2).overlaps(Span(2, 3))
    assert Span(1, 2).touches(Span(2, 3))
    assert not Span(1, 2).is_adjacent(Span(2, 3))
    assert not Span(1, 2).overlaps(Span(3, 4))
    assert not Span(1, 2).touches(Span(3, 4))


def test_contains_is_closed():
    span = Span(1.5, 2.5)
    assert span.contains(1.5)
    assert span.contains(2.0)
    assert span.contains(2.5)
    assert not span.contains(2.6)
    assert not span.contains(1.4)


def test_intersection():
    assert Span(1, 5).intersection(Span(3, 8)) == Span(3, 5)
    assert Span(1, 2).intersection(Span(2, 3)) == Span(2, 2)
    assert Span(1, 2).intersection(Span(3, 4)) is None


def test_datetime_domain():
    day = Span(datetime(2024, 1, 1, 9), datetime(2024, 1, 1, 17))
    assert day.contains(datetime(2024, 1, 1, 12))
    assert not day.contains(datetime(2024, 1, 1, 18))


def test_repr_and_str():
    assert repr(Span(1, 2)) == "Span(1, 2)"
    assert str(Span(1, 2)) == "1-2"
