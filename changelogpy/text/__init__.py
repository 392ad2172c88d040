"""Source spans and line/column location."""

from changelogpy.text.locator import Locator, Point, Position
from changelogpy.text.span import NO_SPAN, Span, SpanIterator, Spanned

__all__ = [
    "NO_SPAN",
    "Locator",
    "Point",
    "Position",
    "Span",
    "SpanIterator",
    "Spanned",
]
