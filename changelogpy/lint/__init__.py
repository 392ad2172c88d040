"""Lint engine, checks and rule selection."""

from changelogpy.lint.check import Check, InvalidSpanCheck
from changelogpy.lint.checks import DEFAULT_CHECKS, default_checks, validate_checks
from changelogpy.lint.ruleset import DEFAULT_RULESET, RuleSet
from changelogpy.lint.runner import Linter, lint

__all__ = [
    "DEFAULT_CHECKS",
    "DEFAULT_RULESET",
    "Check",
    "InvalidSpanCheck",
    "Linter",
    "RuleSet",
    "default_checks",
    "lint",
    "validate_checks",
]
