"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from changelogpy.diagnostics.diagnostic import Diagnostic


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Stable sort by source location, location-less diagnostics first."""

    def key(diagnostic: Diagnostic) -> tuple[int, int, int]:
        span = diagnostic.span
        if span is None:
            return (0, 0, 0)
        return (1, span.start, span.end)

    return sorted(diagnostics, key=key)


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)
