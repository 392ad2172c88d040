from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """
    Half-open range [start, end) into the source text.

    Invariant:
    - 0 <= start <= end

    Offsets are Python string indices, so `source[span.as_slice()]` is the covered text.
    """

    start: int = 0
    end: int = 0

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("Span positions cannot be negative")
        if self.start > self.end:
            raise ValueError("Span invariant violated: start > end")

    @staticmethod
    def at(offset: int, length: int) -> Span:
        """Create a Span at offset with given length."""
        return Span(offset, offset + length)

    @staticmethod
    def empty(offset: int) -> Span:
        """Create an empty Span at the given offset."""
        return Span(offset, offset)

    def len(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def offset(self, delta: int) -> Span:
        """Re-base a relative span into the coordinate space `delta` points at."""
        return Span(self.start + delta, self.end + delta)

    def contains_range(self, other: Span) -> bool:
        return self.start <= other.start and other.end <= self.end

    def cover(self, other: Span) -> Span:
        """Get the minimal span that covers both this span and another span."""
        return Span(min(self.start, other.start), max(self.end, other.end))

    def __repr__(self) -> str:
        return f"Span({self.start}, {self.end})"


NO_SPAN: Final[Span] = Span()
"""Sentinel for "no span available"."""


@dataclass(frozen=True, slots=True)
class Spanned:
    """A source string paired with the span it was read from."""

    span: Span
    value: str

    @staticmethod
    def from_source(source: str, span: Span) -> Spanned:
        return Spanned(span, source[span.as_slice()])


class SpanIterator:
    """Lazy iterator over the whitespace-separated tokens of a string.

    Spans are relative to the string; use `Span.offset` to move them into document space.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0

    def __iter__(self) -> Iterator[Span]:
        return self

    def __next__(self) -> Span:
        text = self._text
        length = len(text)
        position = self._position
        while position < length and text[position].isspace():
            position += 1
        if position >= length:
            self._position = length
            raise StopIteration
        start = position
        while position < length and not text[position].isspace():
            position += 1
        self._position = position
        return Span(start, position)
