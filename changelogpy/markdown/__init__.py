"""Markdown block/inline adapter over markdown-it-py."""

from changelogpy.markdown.blocks import (
    Block,
    BulletList,
    Heading,
    Inline,
    Link,
    Literal,
    Paragraph,
)
from changelogpy.markdown.reader import Blocks
from changelogpy.markdown.tokenizer import MarkdownTokens, tokenize

__all__ = [
    "Block",
    "Blocks",
    "BulletList",
    "Heading",
    "Inline",
    "Link",
    "Literal",
    "MarkdownTokens",
    "Paragraph",
    "tokenize",
]
