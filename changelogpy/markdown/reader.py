"""Peekable block stream over a tokenized Markdown document."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from markdown_it.token import Token

from changelogpy.markdown.blocks import (
    Block,
    BulletList,
    Heading,
    Inline,
    Link,
    Literal,
    Paragraph,
)
from changelogpy.markdown.tokenizer import MarkdownTokens, tokenize
from changelogpy.text import Span

_TEXT_TOKENS = frozenset({"text", "text_special"})


class Blocks:
    """Single-pass stream of headings, paragraphs and bullet lists with one block of lookahead.

    Other block kinds are skipped; container blocks (block quotes, ordered lists) are
    walked through so the blocks inside them are still produced. Every unresolved
    reference-style link is reported once to `on_broken_reference` before the first
    block is read.
    """

    def __init__(
        self,
        source: str,
        *,
        on_broken_reference: Callable[[Span], None] | None = None,
    ) -> None:
        self._document = tokenize(source)
        self._tokens = self._document.tokens
        self._index = 0
        self._peeked: Block | None = None
        if on_broken_reference is not None:
            for span in self._document.broken_references:
                on_broken_reference(span)

    def __iter__(self) -> Iterator[Block]:
        return self

    def __next__(self) -> Block:
        block = self.peek()
        if block is None:
            raise StopIteration
        self._peeked = None
        return block

    def peek(self) -> Block | None:
        if self._peeked is None:
            self._peeked = self._read()
        return self._peeked

    def _read(self) -> Block | None:
        tokens = self._tokens
        while self._index < len(tokens):
            token = tokens[self._index]
            if token.type == "heading_open":
                return self._read_heading(token)
            if token.type == "paragraph_open" and not token.hidden:
                return self._read_paragraph()
            if token.type == "bullet_list_open":
                return self._read_list(token)
            self._index += 1
        return None

    def _read_heading(self, opening: Token) -> Heading:
        inline = self._tokens[self._index + 1]
        self._index += 3
        return Heading(
            span=_block_span(self._document, opening),
            level=int(opening.tag[1:]),
            inlines=_heading_inlines(inline),
        )

    def _read_paragraph(self) -> Paragraph:
        inline = self._tokens[self._index + 1]
        self._index += 3
        return Paragraph(Literal(_content_span(inline)))

    def _read_list(self, opening: Token) -> BulletList:
        tokens = self._tokens
        level = opening.level
        items: list[Literal] = []
        item_open: Token | None = None
        item_span: Span | None = None
        index = self._index + 1
        while index < len(tokens):
            token = tokens[index]
            if token.type == "bullet_list_close" and token.level == level:
                break
            if token.level == level + 1 and token.type == "list_item_open":
                item_open = token
                item_span = None
            elif token.level == level + 1 and token.type == "list_item_close":
                if item_span is None:
                    item_span = _empty_item_span(self._document, item_open or opening)
                items.append(Literal(item_span))
            elif token.type == "inline":
                content = _content_span(token)
                item_span = content if item_span is None else item_span.cover(content)
            index += 1
        self._index = index + 1
        return BulletList(span=_block_span(self._document, opening), items=tuple(items))


def _block_span(document: MarkdownTokens, opening: Token) -> Span:
    """From the block's first character to the end of its last non-blank line."""
    first_line, end_line = opening.map or (0, 1)
    line_start, text = document.line_text(first_line)
    column = len(text) - len(text.lstrip())
    if opening.markup.startswith("#"):
        found = text.find(opening.markup, column)
        if found >= 0:
            column = found
    start = line_start + column
    end = start
    for line in range(end_line - 1, first_line - 1, -1):
        offset, text = document.line_text(line)
        trimmed = text.rstrip()
        if trimmed:
            end = offset + len(trimmed)
            break
    return Span(start, max(start, end))


def _empty_item_span(document: MarkdownTokens, item: Token) -> Span:
    first_line = item.map[0] if item.map else 0
    line_start, text = document.line_text(first_line)
    column = text.find(item.markup) if item.markup else -1
    if column < 0:
        return Span.empty(line_start + len(text) - len(text.lstrip()))
    return Span.empty(line_start + column + len(item.markup))


def _content_span(inline: Token) -> Span:
    offsets: list[int] = inline.meta["offsets"]
    return Span(offsets[0], offsets[-1])


def _to_document(offsets: Sequence[int], start: int, end: int) -> Span:
    last = len(offsets) - 1
    start = max(0, min(start, last))
    end = max(start, min(end, last))
    return Span(offsets[start], offsets[end])


def _structural_range(token: Token) -> tuple[int, int] | None:
    content_range: tuple[int, int] | None = token.meta.get("span")
    if content_range is None:
        return None
    start, end = content_range
    width = len(token.markup)
    # `**` is tokenized as two single-character delimiters; widen to the whole run
    if token.type in ("em_open", "strong_open"):
        return (max(end - width, 0), end)
    if token.type in ("em_close", "strong_close"):
        return (start, start + width)
    return content_range


def _heading_inlines(inline: Token) -> tuple[Inline, ...]:
    """Links plus the text runs between other inline constructs."""
    offsets: list[int] = inline.meta["offsets"]
    children = inline.children or []
    inlines: list[Inline] = []
    run_start = 0
    has_text = False
    index = 0
    while index < len(children):
        child = children[index]
        index += 1
        if child.type in _TEXT_TOKENS:
            has_text = has_text or bool(child.content)
            continue
        content_range = _structural_range(child)
        if content_range is None:
            continue
        start, end = content_range
        if has_text:
            inlines.append(Literal(_to_document(offsets, run_start, start)))
            has_text = False
        if child.type == "link_open":
            label_start, label_end = child.meta.get("label", (start, start))
            target = child.attrGet("href")
            inlines.append(
                Link(
                    span=_to_document(offsets, start, end),
                    content=Literal(_to_document(offsets, label_start, label_end)),
                    target=str(target) if target is not None else "",
                )
            )
            while index < len(children) and children[index].type != "link_close":
                index += 1
            index += 1
        run_start = end
    if has_text:
        inlines.append(Literal(_to_document(offsets, run_start, len(offsets) - 1)))
    return tuple(inlines)
