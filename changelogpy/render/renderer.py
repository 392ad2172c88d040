"""Diagnostic output in short, full, JSON and JSON Lines formats."""

from __future__ import annotations

from collections.abc import Sequence
import json
from typing import Any

from rich.console import Console
from rich.text import Text

from changelogpy.diagnostics import Diagnostic
from changelogpy.render.formats import OutputFormat
from changelogpy.text import Locator, Point, Position

NO_PATH = "-"


def render(
    diagnostics: Sequence[Diagnostic],
    *,
    source: str,
    output_format: OutputFormat = OutputFormat.SHORT,
    console: Console | None = None,
    locator: Locator | None = None,
) -> None:
    console = console if console is not None else Console(highlight=False)
    locator = locator if locator is not None else Locator(source)
    located = [diagnostic.locate(locator) for diagnostic in diagnostics]

    if output_format is OutputFormat.JSON:
        payload = [diagnostic_to_dict(diagnostic, source) for diagnostic in located]
        console.out(json.dumps(payload, indent=2), highlight=False)
        return
    if output_format is OutputFormat.JSONL:
        for diagnostic in located:
            console.out(json.dumps(diagnostic_to_dict(diagnostic, source)), highlight=False)
        return

    for diagnostic in located:
        console.print(short_line(diagnostic, source), soft_wrap=True)
        if output_format is OutputFormat.FULL:
            context = context_lines(diagnostic, locator)
            if context is not None:
                console.print(context, soft_wrap=True)
                console.print()


def short_line(diagnostic: Diagnostic, source: str) -> Text:
    """`path:line:column: CODE message`; location-less diagnostics point at 1:1."""
    path = str(diagnostic.path) if diagnostic.path is not None else NO_PATH
    line = diagnostic.line or 1
    column = diagnostic.column or 1
    text = Text()
    text.append(f"{path}:{line}:{column}:", style="bold")
    text.append(" ")
    text.append(diagnostic.code, style="bold red")
    text.append(" ")
    text.append(diagnostic.message(source))
    return text


def context_lines(diagnostic: Diagnostic, locator: Locator) -> Text | None:
    """The diagnostic's line between its neighbours, with a caret under the located text."""
    location = diagnostic.location
    if not isinstance(location, Position):
        return None
    start = location.start
    current = locator.line(start.line) or ""
    first = max(start.line - 1, 1)
    last = min(start.line + 1, locator.lines)
    width = len(str(last))

    text = Text()
    for number in range(first, last + 1):
        text.append(f"{number:>{width}} | ", style="blue")
        text.append(locator.line(number) or "")
        text.append("\n")
        if number == start.line:
            caret_width = _caret_width(start, location.end, current)
            text.append(f"{'':>{width}} | ", style="blue")
            text.append(" " * (start.column - 1))
            text.append("^" * caret_width + f" {diagnostic.code}", style="bold red")
            text.append("\n")
    text.rstrip()
    return text


def _caret_width(start: Point, end: Point, line: str) -> int:
    if end.line == start.line:
        return max(end.column - start.column, 1)
    return max(len(line) - start.column + 1, 1)


def diagnostic_to_dict(diagnostic: Diagnostic, source: str) -> dict[str, Any]:
    location = diagnostic.location
    position: dict[str, Any] | None = None
    if isinstance(location, Position):
        position = {
            "start": _point_to_dict(location.start),
            "end": _point_to_dict(location.end),
        }
    return {
        "code": diagnostic.code,
        "message": diagnostic.message(source),
        "path": str(diagnostic.path) if diagnostic.path is not None else None,
        "position": position,
    }


def _point_to_dict(point: Point) -> dict[str, int]:
    return {"line": point.line, "column": point.column, "offset": point.offset}
