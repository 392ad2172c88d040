from changelogpy.text import Locator, Point, Span


def test_locator_points_are_one_based() -> None:
    locator = Locator("# Changelog\n\n## [Unreleased]\n")

    assert locator.point(0) == Point(line=1, column=1, offset=0)
    assert locator.point(13) == Point(line=3, column=1, offset=13)
    assert locator.point(16) == Point(line=3, column=4, offset=16)


def test_locator_position_covers_span() -> None:
    source = "# Changelog\n\n## [Unreleased]\n"
    locator = Locator(source)

    position = locator.position(Span(17, 27))

    assert position.start == Point(line=3, column=5, offset=17)
    assert position.end == Point(line=3, column=15, offset=27)
    assert source[position.as_slice()] == "Unreleased"


def test_locator_lines_exclude_terminators() -> None:
    locator = Locator("first\r\nsecond\nthird")

    assert locator.lines == 3
    assert locator.line(1) == "first"
    assert locator.line(2) == "second"
    assert locator.line(3) == "third"
    assert locator.line(0) is None
    assert locator.line(4) is None


def test_locator_trailing_newline_does_not_add_a_line() -> None:
    assert Locator("a\n").lines == 1
    assert Locator("a\n\n").lines == 2
    assert Locator("").lines == 1
    assert Locator("").line(1) == ""


def test_locator_clamps_offsets_to_the_document() -> None:
    locator = Locator("ab\ncd")

    assert locator.point(-5) == Point(line=1, column=1, offset=0)
    assert locator.point(99) == Point(line=2, column=3, offset=5)
