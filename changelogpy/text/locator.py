"""Offset to line/column conversion for reporting."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from changelogpy.text.span import Span


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """1-based line/column plus the 0-based offset it was derived from."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Position:
    start: Point
    end: Point

    def as_slice(self) -> slice:
        return slice(self.start.offset, self.end.offset)


class Locator:
    """Precomputed line table over one source text.

    Lines are split on `\\n`; a trailing `\\r` belongs to the terminator, not the line text.
    """

    __slots__ = ("_source", "_starts", "_ends")

    def __init__(self, source: str) -> None:
        self._source = source
        starts: list[int] = []
        ends: list[int] = []
        start = 0
        while True:
            newline = source.find("\n", start)
            if newline < 0:
                break
            starts.append(start)
            ends.append(newline - 1 if newline > start and source[newline - 1] == "\r" else newline)
            start = newline + 1
        if start < len(source) or not starts:
            starts.append(start)
            ends.append(len(source))
        self._starts = starts
        self._ends = ends

    @property
    def source(self) -> str:
        return self._source

    @property
    def lines(self) -> int:
        return len(self._starts)

    def line(self, number: int) -> str | None:
        """Text of the 1-based line `number`, without its terminator."""
        if number < 1 or number > len(self._starts):
            return None
        index = number - 1
        return self._source[self._starts[index] : self._ends[index]]

    def point(self, offset: int) -> Point:
        offset = max(0, min(offset, len(self._source)))
        index = max(bisect_right(self._starts, offset) - 1, 0)
        return Point(line=index + 1, column=offset - self._starts[index] + 1, offset=offset)

    def position(self, span: Span) -> Position:
        return Position(start=self.point(span.start), end=self.point(span.end))
