"""Diagnostics."""

from changelogpy.diagnostics.codes import ALL_RULES, Rule, RuleCategory, RuleSpec, Severity
from changelogpy.diagnostics.diagnostic import Diagnostic
from changelogpy.diagnostics.report import has_errors, sort_diagnostics

__all__ = [
    "ALL_RULES",
    "Diagnostic",
    "Rule",
    "RuleCategory",
    "RuleSpec",
    "Severity",
    "has_errors",
    "sort_diagnostics",
]
