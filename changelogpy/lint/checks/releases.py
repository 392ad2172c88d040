"""Release heading checks."""

from __future__ import annotations

from datetime import date
from itertools import pairwise
import re
from typing import Final

from packaging.version import InvalidVersion, Version

from changelogpy.changelog.owned import YANKED_MARKER
from changelogpy.changelog.parsed import ParsedRelease
from changelogpy.diagnostics import Rule
from changelogpy.lint.check import Check

_DATE_PATTERN: Final = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# `1.0.0-rc.1+build.5`; build metadata plays no part in ordering
_SEMVER_PATTERN: Final = re.compile(
    r"v?(?P<release>[0-9]+(?:\.[0-9]+)*)(?:-(?P<pre>[0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?"
)
_PRE_RELEASE_HEAD: Final = re.compile(r"(?P<label>[A-Za-z]*)(?P<number>[0-9]*)")
_PRE_RELEASE_PHASES: Final = {
    "alpha": "a",
    "a": "a",
    "beta": "b",
    "b": "b",
    "rc": "rc",
    "c": "rc",
    "pre": "rc",
    "preview": "rc",
}


def is_valid_date(value: str) -> bool:
    """`YYYY-MM-DD` with zero-padded ASCII digits naming a real calendar day."""
    if _DATE_PATTERN.fullmatch(value) is None:
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


class InvalidDate(Check):
    rule = Rule.INVALID_DATE

    def visit_release(self, release: ParsedRelease) -> None:
        if release.date is not None and not is_valid_date(release.date.value):
            self.report(release.date.span)


class MissingDate(Check):
    rule = Rule.MISSING_DATE

    def visit_release(self, release: ParsedRelease) -> None:
        if release.date is None:
            self.report(release.heading_span)


class InvalidYanked(Check):
    rule = Rule.INVALID_YANKED

    def visit_release(self, release: ParsedRelease) -> None:
        if release.yanked is not None and release.yanked.value != YANKED_MARKER:
            self.report(release.yanked.span)


class DuplicateVersion(Check):
    """Exact string comparison; `1.0` and `1.0.0` are different versions here."""

    rule = Rule.DUPLICATE_VERSION

    def __init__(self) -> None:
        super().__init__()
        self._seen: set[str] = set()

    def visit_release(self, release: ParsedRelease) -> None:
        version = release.version.value
        if version in self._seen:
            self.report(release.version.span)
        else:
            self._seen.add(version)


class ReleaseOutOfOrder(Check):
    """Releases must run newest first: by date, then by version for equal dates.

    Only neighbouring releases are compared, so an inversion that spans a release
    which is in order with both of its neighbours is not reported. Versions are read
    as PEP 440 first, then as semver with the pre-release mapped onto a PEP 440 phase
    (`1.0.0-alpha.beta` sorts as `1.0.0a0`). Pairs where either version is neither
    are skipped.
    """

    rule = Rule.RELEASE_OUT_OF_ORDER

    def __init__(self) -> None:
        super().__init__()
        self._releases: list[ParsedRelease] = []

    def visit_release(self, release: ParsedRelease) -> None:
        self._releases.append(release)

    def finalize(self) -> None:
        for previous, current in pairwise(self._releases):
            if _is_out_of_order(previous, current):
                self.report(current.heading_span)


def _is_out_of_order(previous: ParsedRelease, current: ParsedRelease) -> bool:
    previous_version = parse_version(previous.version.value)
    current_version = parse_version(current.version.value)
    if previous_version is None or current_version is None:
        return False
    order = _compare_dates(
        current.date.value if current.date is not None else None,
        previous.date.value if previous.date is not None else None,
    )
    if order != 0:
        return order > 0
    return current_version > previous_version


def parse_version(value: str) -> Version | None:
    """Read a release version as PEP 440, falling back to semver; None when it is neither.

    A semver pre-release takes its phase from the label of the first identifier
    (`alpha`, `beta`, `rc` and their short forms) and its number from the first
    digits found. Unknown labels become a development release, which sorts below
    every other pre-release of the same version.
    """
    try:
        return Version(value)
    except InvalidVersion:
        pass
    match = _SEMVER_PATTERN.fullmatch(value)
    if match is None:
        return None
    normalized = match["release"]
    if match["pre"]:
        identifiers = match["pre"].replace("-", ".").split(".")
        head = _PRE_RELEASE_HEAD.fullmatch(identifiers[0])
        label = head["label"].lower() if head is not None else ""
        numbers = [head["number"]] if head is not None and head["number"] else []
        numbers.extend(identifier for identifier in identifiers[1:] if identifier.isdigit())
        number = int(numbers[0]) if numbers else 0
        phase = _PRE_RELEASE_PHASES.get(label)
        normalized += f"{phase}{number}" if phase is not None else f".dev{number}"
    return Version(normalized)


def _compare_dates(current: str | None, previous: str | None) -> int:
    """Undated releases sort before every dated one."""
    if current is None and previous is None:
        return 0
    if current is None:
        return -1
    if previous is None:
        return 1
    return (current > previous) - (current < previous)
