"""Span-aware parser and linter for Keep a Changelog documents."""

from changelogpy.changelog import (
    Changelog,
    InvalidSpan,
    InvalidSpanKind,
    ParsedChangelog,
    ParsedChanges,
    ParsedRelease,
    ParsedUnreleased,
    materialize,
    parse,
)
from changelogpy.diagnostics import ALL_RULES, Diagnostic, Rule
from changelogpy.errors import ConfigError, ParseError
from changelogpy.lint import DEFAULT_RULESET, Check, Linter, RuleSet, lint
from changelogpy.pipeline import (
    ChangelogParseResult,
    CheckRunResult,
    parse_result,
    run_check,
    run_check_file,
)
from changelogpy.text import Locator, Point, Position, Span, SpanIterator, Spanned

__all__ = [
    "ALL_RULES",
    "DEFAULT_RULESET",
    "Changelog",
    "ChangelogParseResult",
    "Check",
    "CheckRunResult",
    "ConfigError",
    "Diagnostic",
    "InvalidSpan",
    "InvalidSpanKind",
    "Linter",
    "Locator",
    "ParseError",
    "ParsedChangelog",
    "ParsedChanges",
    "ParsedRelease",
    "ParsedUnreleased",
    "Point",
    "Position",
    "Rule",
    "RuleSet",
    "Span",
    "SpanIterator",
    "Spanned",
    "lint",
    "materialize",
    "parse",
    "parse_result",
    "run_check",
    "run_check_file",
]
