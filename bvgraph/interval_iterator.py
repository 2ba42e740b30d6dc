"""Iteration over the integers of a sequence of intervals."""

from __future__ import annotations

from typing import Sequence

from .iterator_base import IntIterator


class IntervalSequenceIterator(IntIterator):
    """Returns the integers of consecutive intervals, in order.

    Each interval is given by its left extreme and the number of integers
    it holds. Only the first ``count`` intervals are used; by default, all
    of them. Empty intervals are passed over.
    """

    def __init__(
        self,
        left: Sequence[int],
        lengths: Sequence[int],
        count: int | None = None,
    ) -> None:
        available = min(len(left), len(lengths))
        if count is None:
            if len(left) != len(lengths):
                raise ValueError(
                    f"{len(left)} left extremes but {len(lengths)} lengths"
                )
            count = available
        if not 0 <= count <= available:
            raise ValueError(f"count {count} outside 0..{available}")
        self._left: tuple[int, ...] = tuple(left)
        self._lengths: tuple[int, ...] = tuple(lengths)
        self._interval = 0
        self._current_left = 0
        self._index = 0
        self._remaining = count
        self._advance()

    def _advance(self) -> None:
        """Move past finished or empty intervals."""
        while self._remaining != 0:
            self._current_left = self._left[self._interval]
            if self._index < self._lengths[self._interval]:
                break
            self._remaining -= 1
            self._interval += 1
            self._index = 0

    def next(self) -> int:
        if not self.has_next():
            raise StopIteration("interval sequence iterator is exhausted")
        value = self._current_left + self._index
        self._index += 1
        self._advance()
        return value

    def has_next(self) -> bool:
        return self._remaining != 0

    def skip(self, how_many: int) -> int:
        skipped = 0
        while skipped < how_many and self.has_next():
            left_in_interval = self._lengths[self._interval] - self._index
            if how_many - skipped < left_in_interval:
                self._index += how_many - skipped
                return how_many
            skipped += left_in_interval
            self._index = self._lengths[self._interval]
            self._advance()
        return skipped

    def clone(self) -> IntervalSequenceIterator:
        copy = IntervalSequenceIterator((), (), 0)
        copy._left = self._left
        copy._lengths = self._lengths
        copy._interval = self._interval
        copy._current_left = self._current_left
        copy._index = self._index
        copy._remaining = self._remaining
        return copy

    def __repr__(self) -> str:
        return (
            f"IntervalSequenceIterator(intervals={len(self._left)}, "
            f"interval={self._interval}, index={self._index}, "
            f"remaining={self._remaining})"
        )