from pathlib import Path

import pytest

from changelogpy.config import (
    LintConfig,
    config_from_mapping,
    config_from_options,
    discover_config,
    load_config,
)
from changelogpy.diagnostics import ALL_RULES, Rule
from changelogpy.errors import ConfigError
from changelogpy.render import OutputFormat


def test_default_config_enables_all_rules_with_short_output() -> None:
    config = LintConfig()

    assert tuple(config.ruleset()) == ALL_RULES
    assert config.resolved_output_format is OutputFormat.SHORT


def test_merge_replaces_selection_and_accumulates_ignores() -> None:
    base = config_from_options(select=["E200", "E201"], ignore=["E001"], output_format="json")
    override = config_from_options(select=["E200", "E202"], ignore=["E202"])

    merged = base.merge(override)

    assert merged.select == frozenset({Rule.INVALID_DATE, Rule.INVALID_YANKED})
    assert merged.ignore == frozenset({Rule.MISSING_TITLE, Rule.INVALID_YANKED})
    assert merged.output_format is OutputFormat.JSON
    assert merged.ruleset().codes == ("E200",)


def test_config_from_mapping_accepts_both_format_spellings() -> None:
    dashed = config_from_mapping({"output-format": "full"}, source="test")
    underscored = config_from_mapping({"output_format": "jsonl"}, source="test")

    assert dashed.output_format is OutputFormat.FULL
    assert underscored.output_format is OutputFormat.JSONL


def test_config_from_mapping_rejects_unknown_keys_and_bad_values() -> None:
    with pytest.raises(ConfigError, match="unknown lint option"):
        config_from_mapping({"colour": True}, source="test")
    with pytest.raises(ConfigError, match="`select` must be a list"):
        config_from_mapping({"select": "E100"}, source="test")
    with pytest.raises(ConfigError, match="E999"):
        config_from_mapping({"ignore": ["E999"]}, source="test")
    with pytest.raises(ConfigError, match="invalid output format"):
        config_from_mapping({"output-format": "xml"}, source="test")


def test_load_config_from_tool_file(tmp_path: Path) -> None:
    path = tmp_path / "changelogpy.toml"
    path.write_text('[lint]\nselect = ["E1"]\n', encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)

    path.write_text('[lint]\nignore = ["e300"]\noutput-format = "full"\n', encoding="utf-8")

    config = load_config(path)

    assert config.ignore == frozenset({Rule.UNDEFINED_LINK_REFERENCE})
    assert config.output_format is OutputFormat.FULL


def test_load_config_from_pyproject(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool.changelogpy.lint]\nselect = ["E200"]\n', encoding="utf-8")

    config = load_config(path)

    assert config.ruleset().codes == ("E200",)


def test_load_config_pyproject_without_table_is_default(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert load_config(path) == LintConfig()


def test_load_config_reports_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "changelogpy.toml"
    path.write_text("[lint\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid TOML"):
        load_config(path)


def test_load_config_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot read configuration"):
        load_config(tmp_path / "missing.toml")


def test_discover_config_walks_up(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    (tmp_path / "pyproject.toml").write_text("[tool.changelogpy.lint]\n", encoding="utf-8")
    (tmp_path / "a" / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert discover_config(nested) == tmp_path / "pyproject.toml"

    (nested / "changelogpy.toml").write_text("[lint]\n", encoding="utf-8")

    assert discover_config(nested) == nested / "changelogpy.toml"
    assert discover_config(nested / "CHANGELOG.md") == nested / "changelogpy.toml"
