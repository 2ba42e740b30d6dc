"""Integer iterators with look-ahead, skipping and cloning.

Every iterator here can be asked whether it has more values, told to skip
ahead, and cloned into an independent copy at its current position. They
are also ordinary Python iterators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import islice
from typing import Iterable, Sequence


class IntIterator(ABC):
    """Base class for iterators over integers."""

    @abstractmethod
    def next(self) -> int:
        """Return the next value; raises StopIteration when there is none."""

    @abstractmethod
    def has_next(self) -> bool:
        """Return True if :meth:`next` would return a value."""

    @abstractmethod
    def skip(self, how_many: int) -> int:
        """Skip up to ``how_many`` values and return how many were skipped."""

    @abstractmethod
    def clone(self) -> IntIterator:
        """Return an independent copy positioned where this iterator is."""

    def __iter__(self) -> IntIterator:
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self.next()


class EmptyIterator(IntIterator):
    """An iterator that never returns anything."""

    def next(self) -> int:
        raise StopIteration("can't advance an empty iterator")

    def has_next(self) -> bool:
        return False

    def skip(self, how_many: int) -> int:
        raise RuntimeError("can't skip on an empty iterator")

    def clone(self) -> EmptyIterator:
        return EmptyIterator()

    def __repr__(self) -> str:
        return "EmptyIterator()"


class SequenceIterator(IntIterator):
    """Iterates over a sequence without copying it.

    The sequence is shared with clones, so it must not change while
    iterating.
    """

    def __init__(self, values: Sequence[int], position: int = 0) -> None:
        if not 0 <= position <= len(values):
            raise ValueError(f"position {position} outside 0..{len(values)}")
        self._values = values
        self._position = position

    def next(self) -> int:
        if not self.has_next():
            raise StopIteration("sequence iterator is exhausted")
        value = self._values[self._position]
        self._position += 1
        return value

    def has_next(self) -> bool:
        return self._position < len(self._values)

    def skip(self, how_many: int) -> int:
        skipped = max(0, min(how_many, len(self._values) - self._position))
        self._position += skipped
        return skipped

    def clone(self) -> SequenceIterator:
        return SequenceIterator(self._values, self._position)

    def __repr__(self) -> str:
        return f"SequenceIterator(size={len(self._values)}, position={self._position})"


class CaptureIterator(IntIterator):
    """Copies the first ``length`` values of an iterable and iterates over the copy."""

    def __init__(self, values: Iterable[int], length: int | None = None) -> None:
        if length is None:
            captured = list(values)
        else:
            if length < 0:
                raise ValueError(f"length must not be negative, got {length}")
            captured = list(islice(values, length))
            if len(captured) < length:
                raise ValueError(
                    f"asked to capture {length} values, only {len(captured)} available"
                )
        self._backing: tuple[int, ...] = tuple(captured)
        self._position = 0

    def next(self) -> int:
        if not self.has_next():
            raise StopIteration("capture iterator is exhausted")
        value = self._backing[self._position]
        self._position += 1
        return value

    def has_next(self) -> bool:
        return self._position < len(self._backing)

    def skip(self, how_many: int) -> int:
        if how_many < 0:
            raise ValueError(f"can't skip a negative count: {how_many}")
        if self._position + how_many < len(self._backing):
            self._position += how_many
            return how_many
        skipped = len(self._backing) - self._position
        self._position = len(self._backing)
        return skipped

    def clone(self) -> CaptureIterator:
        copy = CaptureIterator(())
        copy._backing = self._backing
        copy._position = self._position
        return copy

    def __len__(self) -> int:
        return len(self._backing)

    def __repr__(self) -> str:
        return f"CaptureIterator(size={len(self._backing)}, position={self._position})"