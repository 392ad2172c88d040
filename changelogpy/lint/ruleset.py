"""Rule selection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Final

from changelogpy.diagnostics import ALL_RULES, Rule


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Immutable subset of the rule catalogue."""

    rules: frozenset[Rule]

    @staticmethod
    def all() -> RuleSet:
        return RuleSet(frozenset(ALL_RULES))

    @staticmethod
    def from_rules(rules: Iterable[Rule]) -> RuleSet:
        return RuleSet(frozenset(rules))

    @staticmethod
    def from_codes(select: Iterable[str] | None = None, ignore: Iterable[str] = ()) -> RuleSet:
        """Select rules by code, then remove ignored ones. `select=None` selects every rule.

        Raises ValueError for an unknown code.
        """
        selected = (
            frozenset(ALL_RULES)
            if select is None
            else frozenset(Rule.from_code(code) for code in select)
        )
        ignored = frozenset(Rule.from_code(code) for code in ignore)
        return RuleSet(selected - ignored)

    def is_enabled(self, rule: Rule) -> bool:
        return rule in self.rules

    def __contains__(self, rule: object) -> bool:
        return rule in self.rules

    def __iter__(self) -> Iterator[Rule]:
        """Enabled rules in declaration order."""
        return (rule for rule in ALL_RULES if rule in self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(rule.code for rule in self)


DEFAULT_RULESET: Final[RuleSet] = RuleSet.all()
"""Every rule enabled; shared by all default linters."""
