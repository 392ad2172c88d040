"""Shared parse carrier and run entrypoints."""

from changelogpy.pipeline.entrypoints import (
    parse_result,
    read_source,
    run_check,
    run_check_file,
)
from changelogpy.pipeline.result import ChangelogParseResult, CheckRunResult

__all__ = [
    "ChangelogParseResult",
    "CheckRunResult",
    "parse_result",
    "read_source",
    "run_check",
    "run_check_file",
]
