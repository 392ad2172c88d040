import itertools
import re

import pytest

from changelogpy.diagnostics import ALL_RULES, Rule


def test_rule_codes_are_unique() -> None:
    for first, second in itertools.combinations(ALL_RULES, 2):
        assert first.code != second.code


def test_rule_codes_follow_family_order() -> None:
    codes = [rule.code for rule in ALL_RULES]

    assert codes == sorted(codes)
    assert all(re.fullmatch(r"E[0-3][0-9]{2}", code) for code in codes)


def test_rule_families_match_categories() -> None:
    families = {"0": "structure", "1": "content", "2": "release", "3": "links"}

    for rule in ALL_RULES:
        assert rule.category == families[rule.code[1]]


def test_rule_messages_have_at_most_one_placeholder() -> None:
    for rule in ALL_RULES:
        assert rule.message.count("{}") <= 1
        assert rule.doc


def test_rule_from_code_is_case_insensitive() -> None:
    assert Rule.from_code("E100") is Rule.EMPTY_SECTION
    assert Rule.from_code(" e300 ") is Rule.UNDEFINED_LINK_REFERENCE


def test_rule_from_code_rejects_unknown_codes() -> None:
    with pytest.raises(ValueError, match="Invalid rule code `E999`"):
        Rule.from_code("E999")


def test_rules_default_to_error_severity() -> None:
    assert {rule.severity for rule in ALL_RULES} == {"error"}
    assert Rule.INVALID_DATE.spec.code == "E200"
