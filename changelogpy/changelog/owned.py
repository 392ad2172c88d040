"""Span-free changelog model for consumers that outlive the source text."""

from __future__ import annotations

from dataclasses import dataclass

from changelogpy.changelog.parsed import (
    ParsedChangelog,
    ParsedChanges,
    ParsedRelease,
    ParsedUnreleased,
)

YANKED_MARKER = "[YANKED]"


@dataclass(frozen=True, slots=True)
class Changes:
    kind: str
    items: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Unreleased:
    url: str | None = None
    changes: tuple[Changes, ...] = ()


@dataclass(frozen=True, slots=True)
class Release:
    version: str
    url: str | None = None
    date: str | None = None
    yanked: bool = False
    changes: tuple[Changes, ...] = ()


@dataclass(frozen=True, slots=True)
class Changelog:
    title: str | None = None
    unreleased: Unreleased | None = None
    releases: tuple[Release, ...] = ()


def materialize(parsed: ParsedChangelog) -> Changelog:
    """Copy the parsed IR into the owned model, dropping spans and invalid-span markers."""
    return Changelog(
        title=parsed.title.value if parsed.title is not None else None,
        unreleased=_unreleased(parsed.unreleased) if parsed.unreleased is not None else None,
        releases=tuple(_release(release) for release in parsed.releases),
    )


def _unreleased(unreleased: ParsedUnreleased) -> Unreleased:
    return Unreleased(
        url=unreleased.url,
        changes=tuple(_changes(changes) for changes in unreleased.changes),
    )


def _release(release: ParsedRelease) -> Release:
    return Release(
        version=release.version.value,
        url=release.url,
        date=release.date.value if release.date is not None else None,
        yanked=release.yanked is not None and release.yanked.value == YANKED_MARKER,
        changes=tuple(_changes(changes) for changes in release.changes),
    )


def _changes(changes: ParsedChanges) -> Changes:
    return Changes(kind=changes.kind.value, items=tuple(item.value for item in changes.items))
