from pathlib import Path

import pytest

from changelogpy.changelog import (
    InvalidSpan,
    ParsedChangelog,
    ParsedChanges,
    ParsedRelease,
    ParsedUnreleased,
    parse,
)
from changelogpy.diagnostics import Rule
from changelogpy.lint import (
    DEFAULT_CHECKS,
    Check,
    Linter,
    RuleSet,
    lint,
    validate_checks,
)
from changelogpy.lint.checks import EmptySection, InvalidDate, MissingTitle

from tests._shared_cases import (
    BROKEN_REFERENCE_CHANGELOG,
    LINT_CASES,
    MINIMAL_CHANGELOG,
)


class _ExplodingCheck(Check):
    rule = Rule.MISSING_TITLE

    def visit_release(self, release: ParsedRelease) -> None:
        raise RuntimeError("boom")


class _RecordingCheck(Check):
    rule = Rule.EMPTY_SECTION
    calls: list[str] = []

    def visit_changelog(self, changelog: ParsedChangelog) -> None:
        self.calls.append("changelog")

    def visit_unreleased(self, unreleased: ParsedUnreleased) -> None:
        self.calls.append("unreleased")

    def visit_release(self, release: ParsedRelease) -> None:
        self.calls.append(f"release {release.version.value}")

    def visit_changes(self, changes: ParsedChanges) -> None:
        self.calls.append(f"changes {changes.kind.value}")

    def visit_invalid_span(self, invalid_span: InvalidSpan) -> None:
        self.calls.append(f"invalid {invalid_span.kind}")

    def finalize(self) -> None:
        self.calls.append("finalize")


def test_minimal_changelog_lints_cleanly() -> None:
    assert lint(parse(MINIMAL_CHANGELOG)) == []


@pytest.mark.parametrize("case", LINT_CASES, ids=lambda case: case.name)
def test_shared_cases_lint_as_expected(case) -> None:
    diagnostics = lint(parse(case.source))

    assert (diagnostics == []) is case.lints_cleanly, [d.code for d in diagnostics]


def test_broken_reference_yields_one_diagnostic() -> None:
    diagnostics = lint(parse(BROKEN_REFERENCE_CHANGELOG))

    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.rule is Rule.UNDEFINED_LINK_REFERENCE
    assert diagnostic.message(BROKEN_REFERENCE_CHANGELOG) == "Undefined link reference `[#12345]`"


def test_lint_is_idempotent() -> None:
    changelog = parse("## [1.0.0] - nope\n\n## Notes\n\n- [x]\n\n[1.0.0]: https://example.org/\n")
    linter = Linter()

    first = linter.lint(changelog)
    second = linter.lint(changelog)

    assert first == second
    assert first


def test_lint_sorts_by_location_with_document_findings_first() -> None:
    source = "## Notes\n\n## [1.0.0] - nope\n\n[1.0.0]: https://example.org/\n"

    diagnostics = lint(parse(source))

    assert [diagnostic.code for diagnostic in diagnostics] == [
        "E001",
        "E005",
        "E004",
        "E100",
        "E200",
    ]


def test_lint_stamps_path() -> None:
    diagnostics = lint(parse(""), path="CHANGELOG.md")

    assert diagnostics
    assert all(diagnostic.path == Path("CHANGELOG.md") for diagnostic in diagnostics)


def test_ruleset_filters_checks() -> None:
    source = "## [1.0.0] - nope\n\n[1.0.0]: https://example.org/\n"

    diagnostics = lint(parse(source), RuleSet.from_codes(select=["E200"]))

    assert [diagnostic.code for diagnostic in diagnostics] == ["E200"]


def test_failing_check_is_isolated(caplog: pytest.LogCaptureFixture) -> None:
    source = "## [1.0.0] - nope\n\n[1.0.0]: https://example.org/\n"
    linter = Linter(checks=[_ExplodingCheck, InvalidDate])

    with caplog.at_level("ERROR", logger="changelogpy.lint.runner"):
        diagnostics = linter.lint(parse(source))

    assert [diagnostic.rule for diagnostic in diagnostics] == [Rule.INVALID_DATE]
    assert "_ExplodingCheck" in caplog.text


def test_traversal_order() -> None:
    source = (
        "## Notes\n\n"
        "## [Unreleased]\n\n### Added\n\n- a\n\n"
        "## [1.0.0] - 2025-01-01\n\n### Fixed\n\n- b\n\n"
        "[Unreleased]: https://example.org/\n[1.0.0]: https://example.org/\n"
    )
    _RecordingCheck.calls = []

    Linter(checks=[_RecordingCheck]).lint(parse(source))

    assert _RecordingCheck.calls == [
        "changelog",
        "unreleased",
        "changes Added",
        "release 1.0.0",
        "changes Fixed",
        "invalid invalid-section-heading",
        "finalize",
    ]


def test_default_checks_cover_every_rule_once() -> None:
    validate_checks(DEFAULT_CHECKS, exhaustive=True)

    assert [check.rule for check in DEFAULT_CHECKS] == list(Rule)


def test_validate_checks_rejects_two_checks_for_one_rule() -> None:
    class _OtherMissingTitle(Check):
        rule = Rule.MISSING_TITLE

    try:
        validate_checks([MissingTitle, _OtherMissingTitle])
    except ValueError as exc:
        assert "E001" in str(exc)
    else:
        raise AssertionError("Expected ValueError for two checks serving one rule")


def test_validate_checks_exhaustive_reports_missing_rules() -> None:
    with pytest.raises(ValueError, match="No check for rule"):
        validate_checks([EmptySection], exhaustive=True)
