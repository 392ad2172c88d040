"""Span-annotated changelog IR produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from changelogpy.text import Span, Spanned


class InvalidSpanKind(StrEnum):
    INVALID_TITLE = "invalid-title"
    INVALID_SECTION_HEADING = "invalid-section-heading"
    UNDEFINED_LINK_REFERENCE = "undefined-link-reference"
    DUPLICATE_UNRELEASED = "duplicate-unreleased"
    DUPLICATE_TITLE = "duplicate-title"
    UNRELEASED_OUT_OF_ORDER = "unreleased-out-of-order"


@dataclass(frozen=True, slots=True)
class InvalidSpan:
    """Marker for source that does not fit the changelog structure."""

    kind: InvalidSpanKind
    span: Span


@dataclass(frozen=True, slots=True)
class ParsedChanges:
    """One change group (`### Added`) and its entries."""

    heading_span: Span
    kind: Spanned
    items: tuple[Spanned, ...] = ()


@dataclass(frozen=True, slots=True)
class ParsedUnreleased:
    heading_span: Span
    url: str | None = None
    changes: tuple[ParsedChanges, ...] = ()


@dataclass(frozen=True, slots=True)
class ParsedRelease:
    heading_span: Span
    version: Spanned
    url: str | None = None
    date: Spanned | None = None
    yanked: Spanned | None = None
    changes: tuple[ParsedChanges, ...] = ()


@dataclass(frozen=True, slots=True)
class ParsedChangelog:
    """Parsed changelog; releases keep document order."""

    title: Spanned | None = None
    unreleased: ParsedUnreleased | None = None
    releases: tuple[ParsedRelease, ...] = ()
    invalid_spans: tuple[InvalidSpan, ...] = ()

    def spanned_values(self) -> list[Spanned]:
        """Every source string held by the IR, in document order per section."""
        values: list[Spanned] = []
        if self.title is not None:
            values.append(self.title)
        sections: list[ParsedUnreleased | ParsedRelease] = []
        if self.unreleased is not None:
            sections.append(self.unreleased)
        sections.extend(self.releases)
        for section in sections:
            if isinstance(section, ParsedRelease):
                values.append(section.version)
                if section.date is not None:
                    values.append(section.date)
                if section.yanked is not None:
                    values.append(section.yanked)
            for changes in section.changes:
                values.append(changes.kind)
                values.extend(changes.items)
        return values
