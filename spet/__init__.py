from spet.errors import SpetError, InvalidSpan, InvalidThreshold, UnsortedSpans
from spet.span import Comparable, Span, make_span
from spet.points import StartOf, EndOf, enumerate_points, sorted_chain
from spet.spet import Spet, from_spans, from_sorted_spans, union, intersection
from spet.overlapping import n_overlapping, union_all, intersection_all

__all__ = [
    "SpetError",
    "InvalidSpan",
    "InvalidThreshold",
    "UnsortedSpans",
    "Comparable",
    "Span",
    "make_span",
    "StartOf",
    "EndOf",
    "enumerate_points",
    "sorted_chain",
    "Spet",
    "from_spans",
    "from_sorted_spans",
    "union",
    "intersection",
    "n_overlapping",
    "union_all",
    "intersection_all",
]
