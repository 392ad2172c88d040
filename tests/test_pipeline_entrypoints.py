from pathlib import Path

from changelogpy.lint import RuleSet
from changelogpy.pipeline import parse_result, read_source, run_check, run_check_file

from tests._shared_cases import BROKEN_REFERENCE_CHANGELOG, MINIMAL_CHANGELOG


def test_run_check_reuses_provided_parse_result() -> None:
    parsed = parse_result(MINIMAL_CHANGELOG)

    result = run_check("ignored", parse=parsed)

    assert result.parse is parsed
    assert result.diagnostics == []
    assert result.has_errors is False


def test_run_check_rejects_parse_with_path() -> None:
    parsed = parse_result(MINIMAL_CHANGELOG)

    try:
        run_check(MINIMAL_CHANGELOG, parse=parsed, path="CHANGELOG.md")
    except ValueError as exc:
        assert "Pass either parse or path, not both" in str(exc)
    else:
        raise AssertionError("Expected ValueError when passing parse and path together")


def test_run_check_reports_broken_reference() -> None:
    result = run_check(BROKEN_REFERENCE_CHANGELOG, path="CHANGELOG.md")

    assert result.has_errors is True
    assert [diagnostic.code for diagnostic in result.diagnostics] == ["E300"]
    assert result.diagnostics[0].path == Path("CHANGELOG.md")
    (located,) = result.located_diagnostics()
    assert (located.line, located.column) == (7, 12)


def test_run_check_honours_ruleset() -> None:
    result = run_check(BROKEN_REFERENCE_CHANGELOG, ruleset=RuleSet.from_codes(ignore=["E300"]))

    assert result.diagnostics == []


def test_parse_result_caches_derived_views() -> None:
    parsed = parse_result(MINIMAL_CHANGELOG, path="CHANGELOG.md")

    assert parsed.path == Path("CHANGELOG.md")
    assert parsed.locator() is parsed.locator()
    owned = parsed.to_owned()
    assert owned is parsed.to_owned()
    assert owned.title == "Changelog"


def test_run_check_file_strips_bom(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("\ufeff" + MINIMAL_CHANGELOG, encoding="utf-8")

    result = run_check_file(path)

    assert result.parse.source_text == MINIMAL_CHANGELOG
    assert result.parse.path == path
    assert result.diagnostics == []


def test_read_source_keeps_text_without_bom(tmp_path: Path) -> None:
    path = tmp_path / "CHANGES.md"
    path.write_text("# Changes\n", encoding="utf-8")

    assert read_source(path) == "# Changes\n"
