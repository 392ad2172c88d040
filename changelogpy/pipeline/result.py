"""Parse and run result carriers for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from changelogpy.changelog import Changelog, ParsedChangelog, materialize
from changelogpy.diagnostics import Diagnostic
from changelogpy.text import Locator


@dataclass(slots=True)
class ChangelogParseResult:
    """Source text and its parsed changelog, with lazily built derived views."""

    source_text: str
    changelog: ParsedChangelog
    path: Path | None = None
    _locator: Locator | None = field(default=None, init=False, repr=False)
    _owned: Changelog | None = field(default=None, init=False, repr=False)

    def locator(self) -> Locator:
        if self._locator is None:
            self._locator = Locator(self.source_text)
        return self._locator

    def to_owned(self) -> Changelog:
        if self._owned is None:
            self._owned = materialize(self.changelog)
        return self._owned


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of linting one shared parse result."""

    parse: ChangelogParseResult
    diagnostics: list[Diagnostic]
    has_errors: bool

    def located_diagnostics(self) -> list[Diagnostic]:
        locator = self.parse.locator()
        return [diagnostic.locate(locator) for diagnostic in self.diagnostics]
