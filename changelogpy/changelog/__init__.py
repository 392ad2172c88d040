"""Changelog IR, parser and owned model."""

from changelogpy.changelog.owned import (
    YANKED_MARKER,
    Changelog,
    Changes,
    Release,
    Unreleased,
    materialize,
)
from changelogpy.changelog.parsed import (
    InvalidSpan,
    InvalidSpanKind,
    ParsedChangelog,
    ParsedChanges,
    ParsedRelease,
    ParsedUnreleased,
)
from changelogpy.changelog.parser import UNRELEASED_LABEL, parse

__all__ = [
    "UNRELEASED_LABEL",
    "YANKED_MARKER",
    "Changelog",
    "Changes",
    "InvalidSpan",
    "InvalidSpanKind",
    "ParsedChangelog",
    "ParsedChanges",
    "ParsedRelease",
    "ParsedUnreleased",
    "Release",
    "Unreleased",
    "materialize",
    "parse",
]
