"""CommonMark tokenization with source positions for inline tokens.

markdown-it-py only records line maps on block tokens. To recover exact offsets we
wrap every inline rule so that each token it pushes is tagged with the
content-relative range the rule consumed (`token.meta["span"]`), and replace the
core inline step so every inline token carries a map from content indices back to
document offsets (`token.meta["offsets"]`).

Reference-style links with no matching definition are collected while tokenizing.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
import re
from typing import Any, Final, TypeAlias

from markdown_it import MarkdownIt
from markdown_it.common.utils import normalizeReference
from markdown_it.helpers import parseLinkLabel
from markdown_it.rules_core.state_core import StateCore
from markdown_it.rules_inline.state_inline import StateInline
from markdown_it.token import Token

from changelogpy.text import Span

InlineRule: TypeAlias = Callable[[StateInline, bool], bool]
LineBounds: TypeAlias = tuple[tuple[int, int], ...]

_NEWLINE: Final = re.compile(r"\r\n|\r|\n")

# Keep a Changelog marks withdrawn releases with `[YANKED]`, which CommonMark
# would otherwise read as a shortcut reference.
_YANKED_LABEL: Final = "YANKED"

_SOURCE_KEY: Final = "changelogpy.source"
_LINES_KEY: Final = "changelogpy.line_bounds"
_BROKEN_KEY: Final = "changelogpy.broken_references"
_PENDING_KEY: Final = "changelogpy.pending_references"


@dataclass(frozen=True, slots=True)
class MarkdownTokens:
    """Flat markdown-it token stream plus the positional side data read with it."""

    source: str
    tokens: tuple[Token, ...]
    line_bounds: LineBounds
    broken_references: tuple[Span, ...]

    def line_text(self, line: int) -> tuple[int, str]:
        """Start offset and text (without terminator) of 0-based `line`, clamped to the document."""
        start, end = self.line_bounds[max(0, min(line, len(self.line_bounds) - 1))]
        return start, self.source[start:end]


def tokenize(source: str) -> MarkdownTokens:
    bounds = line_bounds(source)
    env: dict[str, Any] = {
        _SOURCE_KEY: source,
        _LINES_KEY: bounds,
        _BROKEN_KEY: [],
    }
    tokens = _MARKDOWN.parse(source, env)
    return MarkdownTokens(
        source=source,
        tokens=tuple(tokens),
        line_bounds=bounds,
        broken_references=tuple(env[_BROKEN_KEY]),
    )


def line_bounds(source: str) -> LineBounds:
    """(start, end) of every line, split the same way markdown-it normalizes line breaks."""
    bounds: list[tuple[int, int]] = []
    start = 0
    for match in _NEWLINE.finditer(source):
        bounds.append((start, match.start()))
        start = match.end()
    bounds.append((start, len(source)))
    return tuple(bounds)


def content_offsets(content: str, first_line: int, bounds: LineBounds, source: str) -> list[int]:
    """Map every index of `content` (and one past its end) to a document offset.

    Inline content is the block's source lines with container indentation and
    markers removed, so each content line is located inside its source line. The
    result is non-decreasing and stays within the document.

    markdown-it replaces NUL with U+FFFD in content; the source line is searched with
    the same replacement, which keeps its length.
    """
    offsets: list[int] = []
    last_line = len(bounds) - 1
    floor = 0
    for index, text in enumerate(content.split("\n")):
        line_start, line_end = bounds[min(first_line + index, last_line)]
        line = source[line_start:line_end].replace("\x00", "\ufffd")
        base = line_start + _column_of(line, text)
        for delta in range(len(text) + 1):
            offset = max(min(base + delta, line_end), floor)
            offsets.append(offset)
            floor = offset
    return offsets


def _column_of(line: str, text: str) -> int:
    indent = len(line) - len(line.lstrip())
    if not text:
        return indent
    if line.endswith(text):
        return len(line) - len(text)
    stripped = line.rstrip()
    if stripped.endswith(text):
        return len(stripped) - len(text)
    found = line.find(text)
    if found >= 0:
        return found
    return indent


def _inline_with_offsets(state: StateCore) -> None:
    env = state.env
    source: str = env[_SOURCE_KEY]
    bounds: LineBounds = env[_LINES_KEY]
    broken: list[Span] = env[_BROKEN_KEY]
    for token in state.tokens:
        if token.type != "inline":
            continue
        first_line = token.map[0] if token.map else 0
        offsets = content_offsets(token.content, first_line, bounds, source)
        token.meta["offsets"] = offsets
        if token.children is None:
            token.children = []
        env[_PENDING_KEY] = []
        state.md.inline.parse(token.content, state.md, env, token.children)
        for start, end in env.pop(_PENDING_KEY):
            broken.append(Span(offsets[start], offsets[end]))


def _positioned(name: str, fn: InlineRule) -> InlineRule:
    def rule(state: StateInline, silent: bool) -> bool:
        if silent:
            return fn(state, silent)
        start = state.pos
        had_pending = bool(state.pending)
        first = len(state.tokens)
        label_end = -1
        if name == "link" and state.src[start] == "[":
            label_end = parseLinkLabel(state, start, True)
        if not fn(state, silent):
            if label_end >= 0:
                _record_broken_reference(state, start, label_end)
            return False
        pushed = state.tokens[first:]
        if had_pending and pushed and pushed[0].type == "text":
            # pending text flushed by the rule's first push
            pushed = pushed[1:]
        _annotate(name, pushed, start, state.pos, label_end)
        return True

    return rule


def _annotate(name: str, pushed: list[Token], start: int, end: int, label_end: int) -> None:
    if not pushed:
        return
    if name == "emphasis":
        # one token per delimiter character
        for index, token in enumerate(pushed):
            token.meta["span"] = (start + index, start + index + 1)
    elif name == "link":
        pushed[0].meta["span"] = (start, end)
        pushed[0].meta["label"] = (start + 1, max(label_end, start + 1))
    elif name == "autolink":
        pushed[0].meta["span"] = (start, end)
        pushed[0].meta["label"] = (start + 1, max(end - 1, start + 1))
    elif len(pushed) == 1:
        pushed[0].meta["span"] = (start, end)


def _record_broken_reference(state: StateInline, start: int, label_end: int) -> None:
    src = state.src
    maximum = state.posMax
    after = label_end + 1
    if after < maximum and src[after] == "(":
        return
    end = after
    label = ""
    if after < maximum and src[after] == "[":
        second_end = parseLinkLabel(state, after)
        if second_end >= 0:
            label = src[after + 1 : second_end]
            end = second_end + 1
    if not label:
        label = src[start + 1 : label_end]
    key = normalizeReference(label)
    if not key or key == _YANKED_LABEL:
        return
    references: MutableMapping[str, Any] = state.env.get("references", {})
    if key in references:
        return
    pending: list[tuple[int, int]] = state.env.setdefault(_PENDING_KEY, [])
    if pending and start < pending[-1][1]:
        return
    pending.append((start, end))


def _build_markdown() -> MarkdownIt:
    md = MarkdownIt("commonmark")
    for rule in list(md.inline.ruler.__rules__):
        md.inline.ruler.at(rule.name, _positioned(rule.name, rule.fn))
    md.core.ruler.at("inline", _inline_with_offsets)
    return md


_MARKDOWN: Final[MarkdownIt] = _build_markdown()
