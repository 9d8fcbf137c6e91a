from functools import reduce

from hypothesis import given
from hypothesis import strategies as st

from spet.overlapping import n_overlapping
from spet.span import Span
from spet.spet import Spet

# Bounded and always well-formed (start <= end)
span_strategy = st.tuples(st.integers(-10, 10), st.integers(-10, 10)).map(
    lambda t: Span(min(t), max(t))
)
spet_strategy = st.lists(span_strategy, max_size=8).map(Spet.from_spans)

# Every endpoint plus every gap between endpoints
SAMPLES = [x / 2 for x in range(-24, 25)]


def is_canonical(s: Spet) -> bool:
    items = list(s)
    return all(span.start <= span.end for span in items) and all(
        a.end < b.start for a, b in zip(items, items[1:])
    )


@given(st.lists(span_strategy, max_size=12))
def test_from_spans_is_canonical_and_idempotent(spans):
    s = Spet.from_spans(spans)
    assert is_canonical(s)
    assert Spet.from_spans(list(s)) == s
    assert Spet.from_sorted_spans(list(s)) == s
    assert Spet.from_sorted_spans(sorted(spans)) == s


@given(st.lists(span_strategy, max_size=12))
def test_from_spans_preserves_membership(spans):
    s = Spet.from_spans(spans)
    for x in SAMPLES:
        assert (x in s) == any(span.contains(x) for span in spans)


@given(spet_strategy, spet_strategy, spet_strategy)
def test_union_laws(a, b, c):
    assert is_canonical(a | b)
    assert a | b == b | a
    assert (a | b) | c == a | (b | c)
    assert a | Spet.empty == a


@given(spet_strategy, spet_strategy, spet_strategy)
def test_intersection_laws(a, b, c):
    assert is_canonical(a & b)
    assert a & b == b & a
    assert (a & b) & c == a & (b & c)
    assert a & Spet.empty == Spet.empty


@given(spet_strategy, spet_strategy)
def test_membership_containment(a, b):
    union = a | b
    intersection = a & b
    for x in SAMPLES:
        assert (x in union) == (x in a or x in b)
        assert (x in intersection) == (x in a and x in b)


@given(spet_strategy)
def test_single_set_overlap_is_identity(a):
    assert n_overlapping(1, [a]) == a


@given(st.lists(spet_strategy, min_size=1, max_size=5))
def test_full_threshold_is_intersection(sets):
    expected = reduce(lambda x, y: x & y, sets)
    assert n_overlapping(len(sets), sets) == expected
    assert n_overlapping(len(sets) + 1, sets) == Spet.empty


@given(st.lists(spet_strategy, max_size=5), st.integers(1, 6))
def test_threshold_membership(sets, k):
    result = n_overlapping(k, sets)
    assert is_canonical(result)
    for x in SAMPLES:
        covered = sum(1 for s in sets if x in s)
        assert (x in result) == (covered >= k)
