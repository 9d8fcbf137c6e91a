from typing import Any


class SpetError(ValueError):
    pass


class InvalidSpan(SpetError):
    """Raised when a span would have its start after its end."""

    def __init__(self, start: Any, end: Any):
        self.start = start
        self.end = end
        super().__init__(
            f"Invalid span: start ({start!r}) cannot be greater than end ({end!r})"
        )


class InvalidThreshold(SpetError):
    """Raised when an overlap threshold is not a positive integer."""

    def __init__(self, k: Any):
        self.k = k
        super().__init__(f"Invalid threshold: k must be a positive integer, got {k!r}")


class UnsortedSpans(SpetError):
    """
    Raised by ``Spet.from_sorted_spans`` when the sortedness check is enabled
    and the input is not ordered by start.
    """

    def __init__(self, previous: Any, current: Any):
        self.previous = previous
        self.current = current
        super().__init__(
            f"Spans are not sorted by start: {current!r} follows {previous!r}"
        )
