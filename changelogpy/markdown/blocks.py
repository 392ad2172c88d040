"""Simplified block/inline AST read from the Markdown token stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from changelogpy.text import Span


@dataclass(frozen=True, slots=True)
class Literal:
    """A contiguous run of text."""

    span: Span


@dataclass(frozen=True, slots=True)
class Link:
    span: Span
    content: Literal
    target: str


Inline: TypeAlias = Link | Literal


@dataclass(frozen=True, slots=True)
class Heading:
    """A heading; `span` stops before the line break that ends it."""

    span: Span
    level: int
    inlines: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph:
    literal: Literal


@dataclass(frozen=True, slots=True)
class BulletList:
    span: Span
    items: tuple[Literal, ...]


Block: TypeAlias = Heading | Paragraph | BulletList
