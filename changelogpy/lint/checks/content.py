"""Change group checks."""

from __future__ import annotations

from typing import Final

from changelogpy.changelog.parsed import ParsedChanges, ParsedRelease, ParsedUnreleased
from changelogpy.diagnostics import Rule
from changelogpy.lint.check import Check

CHANGE_TYPES: Final[frozenset[str]] = frozenset(
    {"Added", "Changed", "Deprecated", "Fixed", "Removed", "Security"}
)


class EmptySection(Check):
    """Releases without change groups and change groups without entries.

    An unreleased section with no change groups is fine.
    """

    rule = Rule.EMPTY_SECTION

    def visit_release(self, release: ParsedRelease) -> None:
        if not release.changes:
            self.report(release.heading_span)

    def visit_changes(self, changes: ParsedChanges) -> None:
        if not changes.items:
            self.report(changes.heading_span)


class InvalidChangeType(Check):
    rule = Rule.INVALID_CHANGE_TYPE

    def visit_changes(self, changes: ParsedChanges) -> None:
        if changes.kind.value not in CHANGE_TYPES:
            self.report(changes.kind.span)


class DuplicateChangeType(Check):
    """Repeated change types within one section; each section starts a new scope."""

    rule = Rule.DUPLICATE_CHANGE_TYPE

    def __init__(self) -> None:
        super().__init__()
        self._seen: set[str] = set()

    def visit_unreleased(self, unreleased: ParsedUnreleased) -> None:
        self._seen.clear()

    def visit_release(self, release: ParsedRelease) -> None:
        self._seen.clear()

    def visit_changes(self, changes: ParsedChanges) -> None:
        kind = changes.kind.value
        if kind in self._seen:
            self.report(changes.kind.span)
        else:
            self._seen.add(kind)
