import heapq
import itertools
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple

from spet.span import Span, T


@dataclass(frozen=True)
class StartOf(Generic[T]):
    span: Span[T]

    @property
    def value(self) -> T:
        return self.span.start

    @property
    def delta(self) -> int:
        return 1


@dataclass(frozen=True)
class EndOf(Generic[T]):
    span: Span[T]

    @property
    def value(self) -> T:
        return self.span.end

    @property
    def delta(self) -> int:
        return -1


Point = StartOf[T] | EndOf[T]


def sorted_chain(
    iterables: Iterable[Iterable[Any]],
    key: Optional[Callable[[Any], Any]] = None,
) -> Iterator[Any]:
    """
    Chains several ascending iterables into a single ascending iterator.

    Given N items split among M iterables, consuming the result costs
    O(N log M). Nothing is materialized up front.
    """
    return heapq.merge(*iterables, key=key)


def enumerate_points(spans: Iterable[Span[T]]) -> Iterator[Point]:
    """
    Yields the start and end point of every span, in ascending coordinate
    order.

    ``spans`` must be ascending by start; they may overlap. Given
    ``[Span(1, 3), Span(2, 2)]`` the points come out at 1, 2, 2, 3.

    When a start and an end share a coordinate the start comes first, so a
    span beginning where another ends is seen as overlapping it for that
    instant.
    """
    # Min-heap of the ends of every span containing the current coordinate.
    # The sequence number keeps ties from comparing spans.
    ends: List[Tuple[Any, int, Span[T]]] = []
    for seq, span in zip(itertools.count(), spans):
        while ends and ends[0][0] < span.start:
            _, _, ended = heapq.heappop(ends)
            yield EndOf(ended)
        yield StartOf(span)
        heapq.heappush(ends, (span.end, seq, span))

    while ends:
        _, _, ended = heapq.heappop(ends)
        yield EndOf(ended)
