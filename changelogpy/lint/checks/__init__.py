"""Built-in checks, one per rule."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from changelogpy.diagnostics import Rule
from changelogpy.lint.check import Check
from changelogpy.lint.checks.content import (
    CHANGE_TYPES,
    DuplicateChangeType,
    EmptySection,
    InvalidChangeType,
)
from changelogpy.lint.checks.links import UndefinedLinkReference
from changelogpy.lint.checks.releases import (
    DuplicateVersion,
    InvalidDate,
    InvalidYanked,
    MissingDate,
    ReleaseOutOfOrder,
    is_valid_date,
    parse_version,
)
from changelogpy.lint.checks.structure import (
    DuplicateTitle,
    DuplicateUnreleased,
    InvalidSectionHeading,
    InvalidTitle,
    MissingTitle,
    MissingUnreleased,
    UnreleasedOutOfOrder,
)


def default_checks() -> tuple[type[Check], ...]:
    checks: list[type[Check]] = [
        MissingTitle,
        InvalidTitle,
        DuplicateTitle,
        InvalidSectionHeading,
        MissingUnreleased,
        DuplicateUnreleased,
        UnreleasedOutOfOrder,
        EmptySection,
        InvalidChangeType,
        DuplicateChangeType,
        InvalidDate,
        MissingDate,
        InvalidYanked,
        DuplicateVersion,
        ReleaseOutOfOrder,
        UndefinedLinkReference,
    ]
    order = {rule: index for index, rule in enumerate(Rule)}
    return tuple(sorted(checks, key=lambda check: order[check.rule]))


def validate_checks(checks: Sequence[type[Check]], *, exhaustive: bool = False) -> None:
    """Each rule may be served by at most one check; `exhaustive` requires exactly one."""
    seen: dict[Rule, type[Check]] = {}
    for check in checks:
        rule = getattr(check, "rule", None)
        if not isinstance(rule, Rule):
            raise ValueError(f"Check `{check.__name__}` does not declare a rule.")
        if rule in seen:
            raise ValueError(
                f"Rule `{rule.code}` is served by both `{seen[rule].__name__}` and `{check.__name__}`."
            )
        seen[rule] = check
    if exhaustive:
        missing = [rule.code for rule in Rule if rule not in seen]
        if missing:
            raise ValueError(f"No check for rule(s): {', '.join(missing)}.")


DEFAULT_CHECKS: Final[tuple[type[Check], ...]] = default_checks()

__all__ = [
    "CHANGE_TYPES",
    "DEFAULT_CHECKS",
    "DuplicateChangeType",
    "DuplicateTitle",
    "DuplicateUnreleased",
    "DuplicateVersion",
    "EmptySection",
    "InvalidChangeType",
    "InvalidDate",
    "InvalidSectionHeading",
    "InvalidTitle",
    "InvalidYanked",
    "MissingDate",
    "MissingTitle",
    "MissingUnreleased",
    "ReleaseOutOfOrder",
    "UndefinedLinkReference",
    "UnreleasedOutOfOrder",
    "default_checks",
    "is_valid_date",
    "parse_version",
    "validate_checks",
]
