import logging
from typing import ClassVar, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from spet import config
from spet.errors import UnsortedSpans
from spet.span import Span, T

SpanLike = Union[Span[T], Tuple[T, T], T]


def _coerce(value: SpanLike) -> Span[T]:
    if isinstance(value, Span):
        return value
    if isinstance(value, tuple):
        if len(value) != 2:
            raise TypeError(
                f"Invalid span tuple: {value!r}. Must be a (start, end) pair."
            )
        start, end = value
        return Span(start, end)
    return Span.point(value)


def _sweep(spans: Iterable[Span[T]], check_sorted: bool = False) -> Tuple[Span[T], ...]:
    """
    Merges spans that arrive ascending by start into canonical form.

    A span starting at or before the end of the one being accumulated is folded
    into it; anything else closes the accumulator and starts a new one.
    """
    merged: List[Span[T]] = []
    previous: Optional[Span[T]] = None
    for span in spans:
        if check_sorted and previous is not None and span.start < previous.start:
            logging.error(f"Unsorted input to from_sorted_spans: {span!r} follows {previous!r}")
            raise UnsortedSpans(previous, span)
        previous = span

        if not merged:
            merged.append(span)
            continue

        last = merged[-1]
        if span.start <= last.end:
            if span.end > last.end:
                merged[-1] = Span(last.start, span.end)
        else:
            merged.append(span)
    return tuple(merged)


class Spet(Generic[T]):
    """
    An immutable set of values stored as sorted, disjoint closed spans.

        >>> Spet([(1, 2), (2, 3), 7])
        Spet([(1, 3), 7])

    Every operation returns a new ``Spet``; none modify their operands.
    """
    # Invariant: a tuple of spans sorted by start, and for any two consecutive
    # spans s1, s2 we have s1.end < s2.start.
    __slots__ = ("_spans",)
    _spans: Tuple[Span[T], ...]

    empty: ClassVar["Spet"]  # type: ignore

    def __init__(self, values: Iterable[SpanLike] = ()):
        """
        Builds a Spet from ``Span`` objects, ``(start, end)`` tuples or bare
        values (which become single-point spans), in any order.
        """
        processed = [_coerce(value) for value in values]
        processed.sort()
        self._spans = _sweep(processed)

    @classmethod
    def _from_canonical(cls, spans: Iterable[Span[T]]) -> 'Spet[T]':
        # Skips normalization entirely, only for spans already in canonical form.
        new_set = cls.__new__(cls)
        new_set._spans = tuple(spans)
        return new_set

    @classmethod
    def from_spans(cls, spans: Iterable[Span[T]]) -> 'Spet[T]':
        """Sorts and merges arbitrary spans into a Spet."""
        return cls._from_canonical(_sweep(sorted(spans)))

    @classmethod
    def from_sorted_spans(cls, spans: Iterable[Span[T]]) -> 'Spet[T]':
        """
        Merges spans that are already ascending by start, skipping the sort.

        Passing unsorted spans gives a wrong result. Nothing checks for this
        unless ``check_sorted`` is switched on in ``spet.config``, in which case
        ``UnsortedSpans`` is raised.
        """
        return cls._from_canonical(_sweep(spans, check_sorted=config.settings().check_sorted))

    @property
    def spans(self) -> Tuple[Span[T], ...]:
        return self._spans

    ###########################################################################
    # Set operations
    ###########################################################################

    def union(self, other: 'Spet[T]') -> 'Spet[T]':
        """
        Returns the values in either set.

        Walks both span sequences in start order and folds each span into the
        last output span when they touch, without building the interleaved list.
        """
        a, b = self._spans, other._spans
        merged: List[Span[T]] = []
        i = 0
        j = 0

        while i < len(a) or j < len(b):
            # Take whichever next span starts first
            if j == len(b) or (i < len(a) and a[i].start <= b[j].start):
                current = a[i]
                i += 1
            else:
                current = b[j]
                j += 1

            if not merged:
                merged.append(current)
                continue

            last = merged[-1]
            if current.start <= last.end:
                if current.end > last.end:
                    merged[-1] = Span(last.start, current.end)
            else:
                merged.append(current)

        return self._from_canonical(merged)

    def intersection(self, other: 'Spet[T]') -> 'Spet[T]':
        """Returns the values present in both sets."""
        a, b = self._spans, other._spans
        result: List[Span[T]] = []
        i = 0
        j = 0

        while i < len(a) and j < len(b):
            left, right = a[i], b[j]

            start = max(left.start, right.start)
            end = min(left.end, right.end)
            if start <= end:
                result.append(Span(start, end))

            # The span that finishes first cannot overlap anything further
            if left.end < right.end:
                i += 1
            elif right.end < left.end:
                j += 1
            else:
                i += 1
                j += 1

        return self._from_canonical(result)

    def __or__(self, other: object) -> 'Spet[T]':
        if not isinstance(other, Spet):
            return NotImplemented
        return self.union(other)

    def __add__(self, other: object) -> 'Spet[T]':
        if not isinstance(other, Spet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> 'Spet[T]':
        if not isinstance(other, Spet):
            return NotImplemented
        return self.intersection(other)

    ###########################################################################
    # Queries
    ###########################################################################

    def _find(self, value: T) -> Optional[int]:
        low, high = 0, len(self._spans) - 1
        while low <= high:
            mid = (low + high) // 2
            span = self._spans[mid]
            if value < span.start:
                high = mid - 1
            elif span.end < value:
                low = mid + 1
            else:
                return mid
        return None

    def __contains__(self, value: object) -> bool:
        """Checks whether a value lies within any span, in O(log n)."""
        if isinstance(value, Span):
            index = self._find(value.start)
            return index is not None and value.end <= self._spans[index].end
        try:
            return self._find(value) is not None  # type: ignore[arg-type]
        except TypeError:
            # Not comparable with this set's domain
            return False

    def span_containing(self, value: T) -> Optional[Span[T]]:
        index = self._find(value)
        return None if index is None else self._spans[index]

    @property
    def is_empty(self) -> bool:
        return not self._spans

    @property
    def start(self) -> Optional[T]:
        return self._spans[0].start if self._spans else None

    @property
    def end(self) -> Optional[T]:
        return self._spans[-1].end if self._spans else None

    def hull(self) -> Optional[Span[T]]:
        """The smallest single span covering the whole set."""
        if not self._spans:
            return None
        return Span(self._spans[0].start, self._spans[-1].end)

    def is_canonical(self) -> bool:
        return all(s1.end < s2.start for s1, s2 in zip(self._spans, self._spans[1:]))

    ###########################################################################
    # Container protocol
    ###########################################################################

    def __iter__(self) -> Iterator[Span[T]]:
        return iter(self._spans)

    def __len__(self) -> int:
        return len(self._spans)

    def __bool__(self) -> bool:
        return bool(self._spans)

    def __getitem__(self, index: int) -> Span[T]:
        return self._spans[index]

    def __repr__(self) -> str:
        # Usable with __init__
        span_strs = []
        for span in self._spans:
            if span.start == span.end:
                span_strs.append(repr(span.start))
            else:
                span_strs.append(f"({span.start!r}, {span.end!r})")
        return f"Spet([{', '.join(span_strs)}])"

    def __str__(self) -> str:
        return f"{{{', '.join(str(span) for span in self._spans)}}}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Spet):
            return NotImplemented
        return self._spans == other._spans

    def __hash__(self) -> int:
        return hash(self._spans)


Spet.empty = Spet()


def union(a: Spet[T], b: Spet[T]) -> Spet[T]:
    return a.union(b)


def intersection(a: Spet[T], b: Spet[T]) -> Spet[T]:
    return a.intersection(b)


def from_spans(spans: Iterable[Span[T]]) -> Spet[T]:
    return Spet.from_spans(spans)


def from_sorted_spans(spans: Sequence[Span[T]]) -> Spet[T]:
    return Spet.from_sorted_spans(spans)
