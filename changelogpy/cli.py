"""`changelogpy` command line.

Exit codes: 0 when no diagnostics were reported, 1 when at least one was, 2 for usage,
configuration and I/O errors.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from changelogpy.config import (
    CONFIG_FILENAME,
    LintConfig,
    config_from_options,
    discover_config,
    load_config,
)
from changelogpy.diagnostics import ALL_RULES, Rule
from changelogpy.errors import ConfigError
from changelogpy.pipeline import run_check_file
from changelogpy.render import OutputFormat, render

logger = logging.getLogger(__name__)

DEFAULT_CHANGELOG = Path("CHANGELOG.md")

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")

    parser = argparse.ArgumentParser(prog="changelogpy", description="Lint Keep a Changelog documents")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", parents=[common], help="Lint a changelog")
    check.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=DEFAULT_CHANGELOG,
        help=f"Changelog to lint (default: {DEFAULT_CHANGELOG})",
    )
    check.add_argument(
        "--output-format",
        choices=[option.value for option in OutputFormat],
        default=None,
        help="Diagnostic output format (default: short)",
    )
    check.add_argument(
        "--select",
        action="append",
        default=None,
        metavar="CODES",
        help="Comma-separated rule codes to enable (repeatable; default: all rules)",
    )
    check.add_argument(
        "--ignore",
        action="append",
        default=None,
        metavar="CODES",
        help="Comma-separated rule codes to disable (repeatable)",
    )
    check.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Configuration file (default: nearest {CONFIG_FILENAME} or pyproject.toml)",
    )

    rule = subparsers.add_parser("rule", parents=[common], help="Explain lint rules")
    rule.add_argument("code", nargs="?", help="Rule code, e.g. E100")
    rule.add_argument("--all", action="store_true", help="Explain every rule")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    console = Console(highlight=False)
    errors = Console(stderr=True, highlight=False)

    if args.command == "rule":
        if args.all == (args.code is not None):
            parser.error("rule: pass exactly one of CODE or --all")
        return _explain(args.code, console=console, errors=errors)
    return _check(args, console=console, errors=errors)


def _check(args: argparse.Namespace, *, console: Console, errors: Console) -> int:
    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        _error(errors, str(exc))
        return EXIT_ERROR

    try:
        result = run_check_file(args.file, ruleset=config.ruleset())
    except OSError as exc:
        _error(errors, f"{args.file}: {exc.strerror or exc}")
        return EXIT_ERROR
    except UnicodeDecodeError as exc:
        _error(errors, f"{args.file}: not valid UTF-8 ({exc.reason})")
        return EXIT_ERROR

    render(
        result.diagnostics,
        source=result.parse.source_text,
        output_format=config.resolved_output_format,
        console=console,
        locator=result.parse.locator(),
    )
    return EXIT_DIAGNOSTICS if result.diagnostics else EXIT_OK


def _resolve_config(args: argparse.Namespace) -> LintConfig:
    config_path: Path | None = args.config
    if config_path is None:
        config_path = discover_config(Path.cwd())
    if config_path is not None:
        logger.debug("Using configuration file %s", config_path)
    file_config = load_config(config_path) if config_path is not None else LintConfig()
    cli_config = config_from_options(
        select=_split_codes(args.select) if args.select is not None else None,
        ignore=_split_codes(args.ignore or []),
        output_format=args.output_format,
    )
    return LintConfig().merge(file_config).merge(cli_config)


def _explain(code: str | None, *, console: Console, errors: Console) -> int:
    if code is None:
        rules: tuple[Rule, ...] = ALL_RULES
    else:
        try:
            rules = (Rule.from_code(code),)
        except ValueError as exc:
            _error(errors, str(exc))
            return EXIT_ERROR
    for index, rule in enumerate(rules):
        if index:
            console.print()
        console.print(Text(f"# {rule.code}", style="bold"), soft_wrap=True)
        console.print()
        console.print(Text(rule.doc), soft_wrap=True)
    return EXIT_OK


def _split_codes(values: Sequence[str]) -> list[str]:
    return [code.strip() for value in values for code in value.split(",") if code.strip()]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _error(console: Console, message: str) -> None:
    console.print(Text(f"error: {message}", style="bold red"), soft_wrap=True)


if __name__ == "__main__":
    raise SystemExit(main())
