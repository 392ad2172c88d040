"""Diagnostic rendering."""

from changelogpy.render.formats import OutputFormat
from changelogpy.render.renderer import (
    context_lines,
    diagnostic_to_dict,
    render,
    short_line,
)

__all__ = [
    "OutputFormat",
    "context_lines",
    "diagnostic_to_dict",
    "render",
    "short_line",
]
