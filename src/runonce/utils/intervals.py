"""Sorted set of disjoint half-open intervals."""

from bisect import bisect_right
from collections.abc import Iterator


class IntervalSet:
    """Disjoint ``[start, end)`` ranges kept sorted by start.

    Overlap queries and insertion use binary search. Callers only add
    ranges that do not overlap existing ones; ``add`` enforces this.
    """

    def __init__(self) -> None:
        self._starts: list[int] = []
        self._ends: list[int] = []

    def __len__(self) -> int:
        return len(self._starts)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(zip(self._starts, self._ends, strict=True))

    def overlaps(self, start: int, end: int) -> bool:
        """Check whether ``[start, end)`` intersects any stored range."""
        index = bisect_right(self._starts, start)
        # The range starting at or before `start` may extend past it.
        if index > 0 and self._ends[index - 1] > start:
            return True
        # The next range may begin before `end`.
        return index < len(self._starts) and self._starts[index] < end

    def add(self, start: int, end: int) -> None:
        """Store ``[start, end)``.

        Raises:
            ValueError: If the range is empty or overlaps a stored range.
        """
        if end <= start:
            raise ValueError(f"empty interval [{start}, {end})")
        if self.overlaps(start, end):
            raise ValueError(f"interval [{start}, {end}) overlaps an existing interval")
        index = bisect_right(self._starts, start)
        self._starts.insert(index, start)
        self._ends.insert(index, end)

    def try_add(self, start: int, end: int) -> bool:
        """Store ``[start, end)`` unless it overlaps; report whether it was stored."""
        if end <= start or self.overlaps(start, end):
            return False
        self.add(start, end)
        return True
