"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from changelogpy.diagnostics.codes import Rule, Severity
from changelogpy.text import Locator, Position, Span


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One rule violation, optionally located in the source and stamped with its file path.

    `location` is a `Span` as produced by the linter, a `Position` once resolved
    through `locate`, or `None` for document-level findings such as a missing title.
    """

    rule: Rule
    location: Span | Position | None = None
    path: Path | None = None

    @property
    def code(self) -> str:
        return self.rule.code

    @property
    def severity(self) -> Severity:
        return self.rule.severity

    @property
    def span(self) -> Span | None:
        location = self.location
        if location is None:
            return None
        if isinstance(location, Position):
            return Span(location.start.offset, location.end.offset)
        return location

    @property
    def line(self) -> int | None:
        if isinstance(self.location, Position):
            return self.location.start.line
        return None

    @property
    def column(self) -> int | None:
        if isinstance(self.location, Position):
            return self.location.start.column
        return None

    def message(self, source: str) -> str:
        """Render the rule's message with the covered source text substituted in."""
        template = self.rule.message
        if self.location is None:
            return template
        return template.replace("{}", source[self.location.as_slice()], 1)

    def locate(self, locator: Locator) -> Diagnostic:
        if isinstance(self.location, Span):
            return replace(self, location=locator.position(self.location))
        return self

    def with_path(self, path: Path | str | None) -> Diagnostic:
        return replace(self, path=Path(path) if path is not None else None)
