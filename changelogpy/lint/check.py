"""Check contract: one stateful visitor per rule."""

from __future__ import annotations

from typing import ClassVar

from changelogpy.changelog.parsed import (
    InvalidSpan,
    InvalidSpanKind,
    ParsedChangelog,
    ParsedChanges,
    ParsedRelease,
    ParsedUnreleased,
)
from changelogpy.diagnostics import Diagnostic, Rule
from changelogpy.text import Span


class Check:
    """Visitor for a single rule.

    The linter calls the hooks in traversal order; hooks that a check does not override
    are no-ops. Findings are recorded with `report` and turned into diagnostics tagged
    with the check's own rule.
    """

    rule: ClassVar[Rule]

    def __init__(self) -> None:
        self._locations: list[Span | None] = []

    def visit_changelog(self, changelog: ParsedChangelog) -> None:
        pass

    def visit_unreleased(self, unreleased: ParsedUnreleased) -> None:
        pass

    def visit_release(self, release: ParsedRelease) -> None:
        pass

    def visit_changes(self, changes: ParsedChanges) -> None:
        pass

    def visit_invalid_span(self, invalid_span: InvalidSpan) -> None:
        pass

    def finalize(self) -> None:
        pass

    def report(self, location: Span | None = None) -> None:
        self._locations.append(location)

    def diagnostics(self) -> list[Diagnostic]:
        return [Diagnostic(rule=self.rule, location=location) for location in self._locations]


class InvalidSpanCheck(Check):
    """Reports every parser marker of one kind at the marker's span."""

    marker: ClassVar[InvalidSpanKind]

    def visit_invalid_span(self, invalid_span: InvalidSpan) -> None:
        if invalid_span.kind is self.marker:
            self.report(invalid_span.span)
