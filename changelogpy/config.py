"""Lint configuration from TOML files and command-line overrides.

Sources, lowest precedence first: built-in defaults, a configuration file, CLI flags.
A configuration file is either `changelogpy.toml` with a `[lint]` table or
`pyproject.toml` with a `[tool.changelogpy.lint]` table.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
import logging
from pathlib import Path
import tomllib
from typing import Any, Final

from changelogpy.diagnostics import ALL_RULES, Rule
from changelogpy.errors import ConfigError
from changelogpy.lint import RuleSet
from changelogpy.render import OutputFormat

logger = logging.getLogger(__name__)

CONFIG_FILENAME: Final = "changelogpy.toml"
PYPROJECT_FILENAME: Final = "pyproject.toml"

_KNOWN_KEYS: Final = frozenset({"select", "ignore", "output-format", "output_format"})


@dataclass(frozen=True, slots=True)
class LintConfig:
    """`select=None` means every rule; `output_format=None` means not set at this layer."""

    select: frozenset[Rule] | None = None
    ignore: frozenset[Rule] = frozenset()
    output_format: OutputFormat | None = None

    def merge(self, other: LintConfig) -> LintConfig:
        """Layer `other` on top: its selection and format win when set, ignores accumulate."""
        return LintConfig(
            select=other.select if other.select is not None else self.select,
            ignore=self.ignore | other.ignore,
            output_format=other.output_format if other.output_format is not None else self.output_format,
        )

    def ruleset(self) -> RuleSet:
        selected = self.select if self.select is not None else frozenset(ALL_RULES)
        return RuleSet.from_rules(selected - self.ignore)

    @property
    def resolved_output_format(self) -> OutputFormat:
        return self.output_format if self.output_format is not None else OutputFormat.SHORT


def config_from_options(
    *,
    select: Iterable[str] | None = None,
    ignore: Iterable[str] = (),
    output_format: str | None = None,
    source: str = "command line",
) -> LintConfig:
    return LintConfig(
        select=_rules(select, source=source, key="select") if select is not None else None,
        ignore=_rules(ignore, source=source, key="ignore"),
        output_format=_output_format(output_format, source=source) if output_format is not None else None,
    )


def config_from_mapping(table: Mapping[str, Any], *, source: str) -> LintConfig:
    unknown = sorted(set(table) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source}: unknown lint option(s): {', '.join(unknown)}")
    select = table.get("select")
    ignore = table.get("ignore", [])
    output_format = table.get("output-format", table.get("output_format"))
    if select is not None and not _is_string_list(select):
        raise ConfigError(f"{source}: `select` must be a list of rule codes")
    if not _is_string_list(ignore):
        raise ConfigError(f"{source}: `ignore` must be a list of rule codes")
    if output_format is not None and not isinstance(output_format, str):
        raise ConfigError(f"{source}: `output-format` must be a string")
    return config_from_options(select=select, ignore=ignore, output_format=output_format, source=source)


def load_config(path: Path) -> LintConfig:
    """Load the lint table from a config file; a pyproject without one yields the defaults."""
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"{path}: cannot read configuration ({exc.strerror or exc})") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML ({exc})") from exc

    table = _lint_table(document, path)
    if table is None:
        return LintConfig()
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: lint configuration must be a table")
    logger.debug("Loaded lint configuration from %s", path)
    return config_from_mapping(table, source=str(path))


def discover_config(start: Path) -> Path | None:
    """Nearest `changelogpy.toml`, or `pyproject.toml` with a changelogpy table, at or above `start`."""
    directory = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = candidate_dir / PYPROJECT_FILENAME
        if pyproject.is_file() and _declares_tool_table(pyproject):
            return pyproject
    return None


def _lint_table(document: Mapping[str, Any], path: Path) -> Any:
    if path.name == PYPROJECT_FILENAME:
        tool = document.get("tool", {})
        section = tool.get("changelogpy", {}) if isinstance(tool, dict) else {}
        return section.get("lint") if isinstance(section, dict) else None
    return document.get("lint")


def _declares_tool_table(pyproject: Path) -> bool:
    try:
        with pyproject.open("rb") as handle:
            document = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError):
        logger.debug("Skipping unreadable %s during config discovery", pyproject)
        return False
    tool = document.get("tool")
    return isinstance(tool, dict) and "changelogpy" in tool


def _is_string_list(value: object) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _rules(codes: Iterable[str], *, source: str, key: str) -> frozenset[Rule]:
    rules: set[Rule] = set()
    for code in codes:
        try:
            rules.add(Rule.from_code(code))
        except ValueError as exc:
            raise ConfigError(f"{source}: {key}: {exc}") from exc
    return frozenset(rules)


def _output_format(value: str, *, source: str) -> OutputFormat:
    try:
        return OutputFormat(value)
    except ValueError as exc:
        choices = ", ".join(option.value for option in OutputFormat)
        raise ConfigError(f"{source}: invalid output format `{value}` (expected one of {choices})") from exc
