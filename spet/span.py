from dataclasses import dataclass
from typing import Any, Generic, Optional, Protocol, TypeVar

from spet.errors import InvalidSpan


class Comparable(Protocol):
    """
    Anything with a total order over the values actually used as endpoints.

    ints, floats (minus NaN), datetimes, strings and tuples all qualify.
    """
    def __lt__(self, other: Any, /) -> bool: ...
    def __le__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)


@dataclass(frozen=True, order=True)
class Span(Generic[T]):
    """
    A closed interval ``[start, end]``.

    Spans order by ``(start, end)``, which is the order ``Spet`` sorts them in.
    """
    start: T
    end: T

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidSpan(self.start, self.end)

    @classmethod
    def point(cls, value: T) -> 'Span[T]':
        return cls(value, value)

    def overlaps(self, other: 'Span[T]') -> bool:
        """True if the two spans share at least one value (touching counts)."""
        return max(self.start, other.start) <= min(self.end, other.end)

    def is_adjacent(self, other: 'Span[T]') -> bool:
        """
        True if the spans do not overlap but one ends exactly where the other
        starts. With closed endpoints a shared endpoint is already an overlap,
        so this only holds for domains with unusual equality.
        """
        if self.overlaps(other):
            return False
        return self.end == other.start or other.end == self.start

    def touches(self, other: 'Span[T]') -> bool:
        return self.overlaps(other) or self.is_adjacent(other)

    def contains(self, value: T) -> bool:
        return self.start <= value <= self.end

    def intersection(self, other: 'Span[T]') -> Optional['Span[T]']:
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        if start <= end:
            return Span(start, end)
        return None

    def __repr__(self) -> str:
        return f"Span({self.start!r}, {self.end!r})"

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"


def make_span(start: T, end: T) -> Span[T]:
    """Builds a span, raising ``InvalidSpan`` if ``start > end``."""
    return Span(start, end)
