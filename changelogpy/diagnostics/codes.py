"""Lint rule catalogue: codes, documentation and message templates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Literal, TypeAlias

Severity: TypeAlias = Literal["error", "warning"]
RuleCategory: TypeAlias = Literal["structure", "content", "release", "links"]


@dataclass(frozen=True, slots=True)
class RuleSpec:
    code: str
    doc: str
    message: str
    category: RuleCategory
    severity: Severity = "error"


class Rule(Enum):
    """Closed set of lint rules, ordered by declaration.

    Message templates hold at most one `{}` placeholder, filled with the source text
    a diagnostic points at.
    """

    # E0xx structure
    MISSING_TITLE = RuleSpec(
        code="E001",
        doc="The document has no level 1 heading to use as its title.",
        message="Missing title",
        category="structure",
    )
    INVALID_TITLE = RuleSpec(
        code="E002",
        doc="The title is not plain text.",
        message="Invalid title `{}`",
        category="structure",
    )
    DUPLICATE_TITLE = RuleSpec(
        code="E003",
        doc="There is more than one level 1 heading in the document.",
        message="Duplicate title `{}`",
        category="structure",
    )
    INVALID_SECTION_HEADING = RuleSpec(
        code="E004",
        doc=(
            "A level 2 heading is neither an unreleased heading (`## [Unreleased]`) "
            "nor a release heading (`## [1.0.0] - 2025-01-01`)."
        ),
        message="Invalid heading `{}`",
        category="structure",
    )
    MISSING_UNRELEASED = RuleSpec(
        code="E005",
        doc="The document does not have an unreleased section.",
        message="Missing unreleased heading",
        category="structure",
    )
    DUPLICATE_UNRELEASED = RuleSpec(
        code="E006",
        doc="There is more than one unreleased section heading in the document.",
        message="Duplicate unreleased section `{}`",
        category="structure",
    )
    UNRELEASED_OUT_OF_ORDER = RuleSpec(
        code="E007",
        doc="The unreleased section must come before every release section.",
        message="Unreleased section `{}` is not the first section",
        category="structure",
    )
    # E1xx content
    EMPTY_SECTION = RuleSpec(
        code="E100",
        doc=(
            "A section is unexpectedly empty: a release with no change groups, "
            "or a change group with no entries."
        ),
        message="Empty section `{}`",
        category="content",
    )
    INVALID_CHANGE_TYPE = RuleSpec(
        code="E101",
        doc=(
            "The change group heading is not one of `Added`, `Changed`, `Deprecated`, "
            "`Fixed`, `Removed` or `Security`."
        ),
        message="Invalid change type `{}`",
        category="content",
    )
    DUPLICATE_CHANGE_TYPE = RuleSpec(
        code="E102",
        doc="There is more than one change group with the same change type in a section.",
        message="Duplicate change type `{}`",
        category="content",
    )
    # E2xx release
    INVALID_DATE = RuleSpec(
        code="E200",
        doc="The release date is not a calendar date in `YYYY-MM-DD` format.",
        message="Invalid date `{}`",
        category="release",
    )
    MISSING_DATE = RuleSpec(
        code="E201",
        doc="The release heading has no date.",
        message="Missing release date in `{}`",
        category="release",
    )
    INVALID_YANKED = RuleSpec(
        code="E202",
        doc="The yanked token does not match `[YANKED]`.",
        message="Invalid [YANKED] format `{}`",
        category="release",
    )
    DUPLICATE_VERSION = RuleSpec(
        code="E203",
        doc="More than one release section has the same version.",
        message="Duplicate version `{}`",
        category="release",
    )
    RELEASE_OUT_OF_ORDER = RuleSpec(
        code="E204",
        doc=(
            "Releases are not in reverse chronological order. Releases on the same date "
            "must be in descending version order."
        ),
        message="Release out of order `{}`",
        category="release",
    )
    # E3xx links
    UNDEFINED_LINK_REFERENCE = RuleSpec(
        code="E300",
        doc="A reference-style link has no matching link reference definition.",
        message="Undefined link reference `{}`",
        category="links",
    )

    @property
    def spec(self) -> RuleSpec:
        return self.value

    @property
    def code(self) -> str:
        return self.value.code

    @property
    def doc(self) -> str:
        return self.value.doc

    @property
    def message(self) -> str:
        return self.value.message

    @property
    def category(self) -> RuleCategory:
        return self.value.category

    @property
    def severity(self) -> Severity:
        return self.value.severity

    @classmethod
    def from_code(cls, code: str) -> Rule:
        rule = _RULES_BY_CODE.get(code.strip().upper())
        if rule is None:
            raise ValueError(f"Invalid rule code `{code}`")
        return rule


ALL_RULES: Final[tuple[Rule, ...]] = tuple(Rule)

_RULES_BY_CODE: Final[dict[str, Rule]] = {rule.code: rule for rule in ALL_RULES}
