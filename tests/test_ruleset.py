import pytest

from changelogpy.diagnostics import ALL_RULES, Rule
from changelogpy.lint import DEFAULT_RULESET, RuleSet


def test_default_ruleset_enables_every_rule() -> None:
    assert len(DEFAULT_RULESET) == len(ALL_RULES)
    assert tuple(DEFAULT_RULESET) == ALL_RULES
    assert all(DEFAULT_RULESET.is_enabled(rule) for rule in ALL_RULES)


def test_ruleset_from_codes_selects_then_ignores() -> None:
    ruleset = RuleSet.from_codes(select=["E200", "E201", "E202"], ignore=["E201"])

    assert ruleset.codes == ("E200", "E202")
    assert Rule.INVALID_DATE in ruleset
    assert Rule.MISSING_DATE not in ruleset


def test_ruleset_ignore_without_select_starts_from_all() -> None:
    ruleset = RuleSet.from_codes(ignore=["E001"])

    assert len(ruleset) == len(ALL_RULES) - 1
    assert not ruleset.is_enabled(Rule.MISSING_TITLE)


def test_ruleset_iterates_in_declaration_order() -> None:
    ruleset = RuleSet.from_rules([Rule.UNDEFINED_LINK_REFERENCE, Rule.MISSING_TITLE])

    assert list(ruleset) == [Rule.MISSING_TITLE, Rule.UNDEFINED_LINK_REFERENCE]


def test_ruleset_rejects_unknown_codes() -> None:
    with pytest.raises(ValueError):
        RuleSet.from_codes(select=["E000"])
    with pytest.raises(ValueError):
        RuleSet.from_codes(ignore=["nope"])


def test_empty_ruleset_enables_nothing() -> None:
    ruleset = RuleSet.from_codes(select=[])

    assert len(ruleset) == 0
    assert ruleset.codes == ()
