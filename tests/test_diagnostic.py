from pathlib import Path

from changelogpy.diagnostics import Diagnostic, Rule, has_errors, sort_diagnostics
from changelogpy.text import Locator, Point, Span


def test_message_substitutes_located_source_text() -> None:
    source = "## [1.0.0] - 2025-13-01\n"
    diagnostic = Diagnostic(Rule.INVALID_DATE, Span(13, 23))

    assert diagnostic.message(source) == "Invalid date `2025-13-01`"


def test_message_without_location_is_the_template() -> None:
    assert Diagnostic(Rule.MISSING_TITLE).message("") == "Missing title"


def test_locate_resolves_line_and_column() -> None:
    source = "# Changelog\n\n## Notes\n"
    diagnostic = Diagnostic(Rule.INVALID_SECTION_HEADING, Span(13, 21))

    located = diagnostic.locate(Locator(source))

    assert located.line == 3
    assert located.column == 1
    assert located.span == Span(13, 21)
    assert located.message(source) == "Invalid heading `## Notes`"
    assert diagnostic.line is None
    assert located.locate(Locator(source)) is located


def test_locate_keeps_location_less_diagnostics() -> None:
    diagnostic = Diagnostic(Rule.MISSING_UNRELEASED)

    located = diagnostic.locate(Locator("text"))

    assert located.location is None
    assert located.line is None
    assert located.column is None


def test_with_path() -> None:
    diagnostic = Diagnostic(Rule.MISSING_TITLE).with_path("docs/CHANGELOG.md")

    assert diagnostic.path == Path("docs/CHANGELOG.md")
    assert diagnostic.with_path(None).path is None


def test_sort_diagnostics_is_stable_and_puts_document_findings_first() -> None:
    late = Diagnostic(Rule.INVALID_DATE, Span(20, 25))
    early = Diagnostic(Rule.INVALID_SECTION_HEADING, Span(0, 8))
    missing_title = Diagnostic(Rule.MISSING_TITLE)
    missing_unreleased = Diagnostic(Rule.MISSING_UNRELEASED)

    ordered = sort_diagnostics([late, missing_unreleased, early, missing_title])

    assert ordered == [missing_unreleased, missing_title, early, late]


def test_has_errors() -> None:
    assert has_errors([Diagnostic(Rule.MISSING_TITLE)])
    assert not has_errors([])


def test_position_location_round_trips_to_span() -> None:
    locator = Locator("abc\ndef\n")
    diagnostic = Diagnostic(Rule.INVALID_TITLE, locator.position(Span(4, 7)))

    assert diagnostic.span == Span(4, 7)
    assert diagnostic.line == 2
    assert locator.point(4) == Point(line=2, column=1, offset=4)
