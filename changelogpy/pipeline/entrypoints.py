"""Entrypoints that parse once and lint from the shared result."""

from __future__ import annotations

import logging
from pathlib import Path

from changelogpy.changelog import parse
from changelogpy.diagnostics import has_errors
from changelogpy.lint import DEFAULT_RULESET, RuleSet, lint
from changelogpy.pipeline.result import ChangelogParseResult, CheckRunResult

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def parse_result(text: str, *, path: Path | str | None = None) -> ChangelogParseResult:
    return ChangelogParseResult(
        source_text=text,
        changelog=parse(text),
        path=Path(path) if path is not None else None,
    )


def run_check(
    text: str,
    *,
    ruleset: RuleSet | None = None,
    path: Path | str | None = None,
    parse: ChangelogParseResult | None = None,
) -> CheckRunResult:
    """Lint a changelog from one parse lifecycle."""
    resolved_parse = _resolve_parse(text, path=path, parse=parse)
    resolved_ruleset = ruleset if ruleset is not None else DEFAULT_RULESET
    diagnostics = lint(resolved_parse.changelog, resolved_ruleset, path=resolved_parse.path)
    logger.debug(
        "Checked %s: %d diagnostic(s) from %d rule(s)",
        resolved_parse.path or "<memory>",
        len(diagnostics),
        len(resolved_ruleset),
    )
    return CheckRunResult(
        parse=resolved_parse,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
    )


def run_check_file(
    path: Path | str,
    *,
    ruleset: RuleSet | None = None,
    encoding: str = "utf-8",
) -> CheckRunResult:
    """Read and lint a changelog file. I/O and decoding errors propagate."""
    source_path = Path(path)
    text = read_source(source_path, encoding=encoding)
    return run_check(text, ruleset=ruleset, path=source_path)


def read_source(path: Path, *, encoding: str = "utf-8") -> str:
    decoded = path.read_bytes().decode(encoding)
    return decoded[1:] if decoded.startswith(_BOM) else decoded


def _resolve_parse(
    text: str,
    *,
    path: Path | str | None,
    parse: ChangelogParseResult | None,
) -> ChangelogParseResult:
    if parse is not None:
        if path is not None:
            raise ValueError("Pass either parse or path, not both")
        return parse
    return parse_result(text, path=path)
