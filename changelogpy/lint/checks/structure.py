"""Document structure checks."""

from __future__ import annotations

from changelogpy.changelog.parsed import InvalidSpanKind, ParsedChangelog
from changelogpy.diagnostics import Rule
from changelogpy.lint.check import Check, InvalidSpanCheck


class MissingTitle(Check):
    rule = Rule.MISSING_TITLE

    def __init__(self) -> None:
        super().__init__()
        self._missing = False

    def visit_changelog(self, changelog: ParsedChangelog) -> None:
        self._missing = changelog.title is None

    def finalize(self) -> None:
        if self._missing:
            self.report()


class MissingUnreleased(Check):
    rule = Rule.MISSING_UNRELEASED

    def __init__(self) -> None:
        super().__init__()
        self._missing = False

    def visit_changelog(self, changelog: ParsedChangelog) -> None:
        self._missing = changelog.unreleased is None

    def finalize(self) -> None:
        if self._missing:
            self.report()


class InvalidTitle(InvalidSpanCheck):
    rule = Rule.INVALID_TITLE
    marker = InvalidSpanKind.INVALID_TITLE


class DuplicateTitle(InvalidSpanCheck):
    rule = Rule.DUPLICATE_TITLE
    marker = InvalidSpanKind.DUPLICATE_TITLE


class InvalidSectionHeading(InvalidSpanCheck):
    rule = Rule.INVALID_SECTION_HEADING
    marker = InvalidSpanKind.INVALID_SECTION_HEADING


class DuplicateUnreleased(InvalidSpanCheck):
    rule = Rule.DUPLICATE_UNRELEASED
    marker = InvalidSpanKind.DUPLICATE_UNRELEASED


class UnreleasedOutOfOrder(InvalidSpanCheck):
    rule = Rule.UNRELEASED_OUT_OF_ORDER
    marker = InvalidSpanKind.UNRELEASED_OUT_OF_ORDER
