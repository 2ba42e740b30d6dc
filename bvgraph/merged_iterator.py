"""The ordered, duplicate-free merge of two increasing iterators."""

from __future__ import annotations

from .iterator_base import IntIterator


class MergedIterator(IntIterator):
    """Merges two iterators that return values in increasing order.

    A value that both iterators hold at the same point is returned once.
    At most ``limit`` values are returned; by default there is no limit.
    """

    def __init__(
        self,
        first: IntIterator,
        second: IntIterator,
        limit: int | None = None,
    ) -> None:
        if limit is not None and limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        self._it0 = first
        self._it1 = second
        self._remaining = limit
        self._valid0 = False
        self._valid1 = False
        self._curr0 = 0
        self._curr1 = 0
        self._pull0()
        self._pull1()

    def _pull0(self) -> None:
        self._valid0 = self._it0.has_next()
        if self._valid0:
            self._curr0 = self._it0.next()

    def _pull1(self) -> None:
        self._valid1 = self._it1.has_next()
        if self._valid1:
            self._curr1 = self._it1.next()

    def has_next(self) -> bool:
        return self._remaining != 0 and (self._valid0 or self._valid1)

    def next(self) -> int:
        if not self.has_next():
            raise StopIteration("merged iterator is exhausted")
        if self._remaining is not None:
            self._remaining -= 1

        if not self._valid0:
            current = self._curr1
            self._pull1()
        elif not self._valid1:
            current = self._curr0
            self._pull0()
        elif self._curr0 < self._curr1:
            current = self._curr0
            self._pull0()
        elif self._curr0 > self._curr1:
            current = self._curr1
            self._pull1()
        else:
            current = self._curr0
            self._pull0()
            self._pull1()
        return current

    def skip(self, how_many: int) -> int:
        skipped = 0
        while skipped < how_many and self.has_next():
            self.next()
            skipped += 1
        return skipped

    def clone(self) -> MergedIterator:
        copy = MergedIterator.__new__(MergedIterator)
        copy._it0 = self._it0.clone()
        copy._it1 = self._it1.clone()
        copy._remaining = self._remaining
        copy._valid0 = self._valid0
        copy._valid1 = self._valid1
        copy._curr0 = self._curr0
        copy._curr1 = self._curr1
        return copy

    def __repr__(self) -> str:
        return f"MergedIterator(first={self._it0!r}, second={self._it1!r})"