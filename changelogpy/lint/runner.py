"""Single-pass lint driver over a parsed changelog."""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
from operator import methodcaller
from pathlib import Path

from changelogpy.changelog.parsed import ParsedChangelog
from changelogpy.diagnostics import Diagnostic, sort_diagnostics
from changelogpy.lint.check import Check
from changelogpy.lint.checks import DEFAULT_CHECKS, validate_checks
from changelogpy.lint.ruleset import DEFAULT_RULESET, RuleSet

logger = logging.getLogger(__name__)


class Linter:
    """Runs every enabled check over one changelog in a fixed traversal.

    Order: the document, the unreleased section and its change groups, each release and
    its change groups in document order, every invalid-span marker, then `finalize`.
    Checks are created fresh for each `lint` call. A check that raises is logged and
    dropped for that run without affecting the others.
    """

    def __init__(
        self,
        ruleset: RuleSet = DEFAULT_RULESET,
        *,
        checks: Sequence[type[Check]] | None = None,
    ) -> None:
        resolved_checks = tuple(checks) if checks is not None else DEFAULT_CHECKS
        validate_checks(resolved_checks)
        self._ruleset = ruleset
        self._checks = tuple(check for check in resolved_checks if ruleset.is_enabled(check.rule))

    @property
    def ruleset(self) -> RuleSet:
        return self._ruleset

    def lint(self, changelog: ParsedChangelog) -> list[Diagnostic]:
        active = [check() for check in self._checks]
        logger.debug("Linting with %d checks", len(active))

        _visit(active, methodcaller("visit_changelog", changelog))
        unreleased = changelog.unreleased
        if unreleased is not None:
            _visit(active, methodcaller("visit_unreleased", unreleased))
            for changes in unreleased.changes:
                _visit(active, methodcaller("visit_changes", changes))
        for release in changelog.releases:
            _visit(active, methodcaller("visit_release", release))
            for changes in release.changes:
                _visit(active, methodcaller("visit_changes", changes))
        for invalid_span in changelog.invalid_spans:
            _visit(active, methodcaller("visit_invalid_span", invalid_span))
        _visit(active, methodcaller("finalize"))

        diagnostics: list[Diagnostic] = []
        _visit(active, lambda check: diagnostics.extend(check.diagnostics()))
        return diagnostics


def lint(
    changelog: ParsedChangelog,
    ruleset: RuleSet = DEFAULT_RULESET,
    *,
    path: Path | str | None = None,
) -> list[Diagnostic]:
    """Lint a parsed changelog; diagnostics are sorted by location and stamped with `path`."""
    diagnostics = sort_diagnostics(Linter(ruleset).lint(changelog))
    if path is not None:
        diagnostics = [diagnostic.with_path(path) for diagnostic in diagnostics]
    return diagnostics


def _visit(checks: list[Check], visit: Callable[[Check], object]) -> None:
    for check in list(checks):
        try:
            visit(check)
        except Exception:
            logger.exception(
                "Check %s (%s) failed; its diagnostics are dropped",
                type(check).__name__,
                check.rule.code,
            )
            checks.remove(check)
