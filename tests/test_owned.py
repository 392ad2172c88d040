from changelogpy.changelog import Changelog, Changes, Release, Unreleased, materialize, parse

from tests._shared_cases import FULL_CHANGELOG


def test_materialize_full_changelog() -> None:
    owned = materialize(parse(FULL_CHANGELOG))

    assert owned == Changelog(
        title="Changelog",
        unreleased=Unreleased(
            url="https://example.org/compare/v1.1.0...HEAD",
            changes=(Changes(kind="Added", items=("Dark mode.",)),),
        ),
        releases=(
            Release(
                version="1.1.0",
                url="https://example.org/compare/v1.0.0...v1.1.0",
                date="2025-06-01",
                yanked=False,
                changes=(
                    Changes(kind="Added", items=("Export to CSV.", "Import from CSV.")),
                    Changes(kind="Fixed", items=("Crash on empty input.",)),
                ),
            ),
            Release(
                version="1.0.0",
                url="https://example.org/releases/v1.0.0",
                date="2025-01-01",
                yanked=True,
                changes=(Changes(kind="Removed", items=("Legacy API.",)),),
            ),
        ),
    )


def test_materialize_empty_document() -> None:
    assert materialize(parse("")) == Changelog()


def test_malformed_yanked_marker_is_not_yanked() -> None:
    source = "## [1.0.0] - 2025-01-01 (yanked)\n\n[1.0.0]: https://example.org/\n"

    (release,) = materialize(parse(source)).releases

    assert release.yanked is False
    assert release.date == "2025-01-01"
