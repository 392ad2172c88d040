"""Changelog parser: Markdown blocks to the span-annotated IR."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from changelogpy.changelog.parsed import (
    InvalidSpan,
    InvalidSpanKind,
    ParsedChangelog,
    ParsedChanges,
    ParsedRelease,
    ParsedUnreleased,
)
from changelogpy.markdown import Blocks, BulletList, Heading, Link, Literal
from changelogpy.text import Span, SpanIterator, Spanned

UNRELEASED_LABEL = "Unreleased"

Section: TypeAlias = ParsedUnreleased | ParsedRelease | InvalidSpan


@dataclass(slots=True)
class _GroupBuilder:
    heading_span: Span
    kind: Spanned
    items: list[Spanned] = field(default_factory=list)

    def finish(self) -> ParsedChanges:
        return ParsedChanges(heading_span=self.heading_span, kind=self.kind, items=tuple(self.items))


def parse(source: str) -> ParsedChangelog:
    """Parse a changelog into its intermediate representation.

    Parsing never fails. Every string is a Markdown document; whatever does not fit the
    changelog structure is recorded in `invalid_spans` and parsing carries on.
    """
    broken_references: list[InvalidSpan] = []

    def on_broken_reference(span: Span) -> None:
        broken_references.append(InvalidSpan(InvalidSpanKind.UNDEFINED_LINK_REFERENCE, span))

    blocks = Blocks(source, on_broken_reference=on_broken_reference)
    title: Spanned | None = None
    unreleased: ParsedUnreleased | None = None
    releases: list[ParsedRelease] = []
    invalid_spans: list[InvalidSpan] = []

    for block in blocks:
        if not isinstance(block, Heading):
            continue
        if block.level == 1:
            literal = _single_literal(block)
            if literal is None:
                invalid_spans.append(InvalidSpan(InvalidSpanKind.INVALID_TITLE, block.span))
            elif title is None:
                title = Spanned.from_source(source, literal.span)
            else:
                invalid_spans.append(InvalidSpan(InvalidSpanKind.DUPLICATE_TITLE, literal.span))
        elif block.level == 2:
            section = _parse_section(source, block, blocks)
            if isinstance(section, ParsedUnreleased):
                if unreleased is not None:
                    invalid_spans.append(
                        InvalidSpan(InvalidSpanKind.DUPLICATE_UNRELEASED, section.heading_span)
                    )
                    continue
                if releases:
                    invalid_spans.append(
                        InvalidSpan(InvalidSpanKind.UNRELEASED_OUT_OF_ORDER, section.heading_span)
                    )
                unreleased = section
            elif isinstance(section, ParsedRelease):
                releases.append(section)
            else:
                invalid_spans.append(section)

    invalid_spans.extend(broken_references)
    return ParsedChangelog(
        title=title,
        unreleased=unreleased,
        releases=tuple(releases),
        invalid_spans=tuple(invalid_spans),
    )


def _parse_section(source: str, heading: Heading, blocks: Blocks) -> Section:
    match heading.inlines:
        case (Link() as link,) if source[link.content.span.as_slice()] == UNRELEASED_LABEL:
            return ParsedUnreleased(
                heading_span=heading.span,
                url=link.target or None,
                changes=_parse_changes(source, blocks),
            )
        case (Link() as link, Literal() as literal):
            date, yanked = _release_tokens(source, literal.span)
            return ParsedRelease(
                heading_span=heading.span,
                version=Spanned.from_source(source, link.content.span),
                url=link.target or None,
                date=date,
                yanked=yanked,
                changes=_parse_changes(source, blocks),
            )
        case _:
            return InvalidSpan(InvalidSpanKind.INVALID_SECTION_HEADING, heading.span)


def _release_tokens(source: str, span: Span) -> tuple[Spanned | None, Spanned | None]:
    """Split `- <date> <yanked>` following a release link; extra tokens are ignored."""
    tokens = SpanIterator(source[span.as_slice()])
    next(tokens, None)
    spanned: list[Spanned | None] = []
    for _ in range(2):
        token = next(tokens, None)
        spanned.append(
            Spanned.from_source(source, token.offset(span.start)) if token is not None else None
        )
    return spanned[0], spanned[1]


def _parse_changes(source: str, blocks: Blocks) -> tuple[ParsedChanges, ...]:
    """Consume the run of level 3 headings and bullet lists following a section heading."""
    groups: list[ParsedChanges] = []
    current: _GroupBuilder | None = None
    while True:
        block = blocks.peek()
        if isinstance(block, Heading) and block.level == 3:
            next(blocks)
            if current is not None:
                groups.append(current.finish())
            literal = _single_literal(block)
            current = (
                _GroupBuilder(block.span, Spanned.from_source(source, literal.span))
                if literal is not None
                else None
            )
        elif isinstance(block, BulletList):
            next(blocks)
            if current is not None:
                current.items.extend(Spanned.from_source(source, item.span) for item in block.items)
        else:
            break
    if current is not None:
        groups.append(current.finish())
    return tuple(groups)


def _single_literal(heading: Heading) -> Literal | None:
    match heading.inlines:
        case (Literal() as literal,):
            return literal
        case _:
            return None
