"""Link checks."""

from __future__ import annotations

from changelogpy.changelog.parsed import InvalidSpanKind
from changelogpy.diagnostics import Rule
from changelogpy.lint.check import InvalidSpanCheck


class UndefinedLinkReference(InvalidSpanCheck):
    """A `[label]` reference with no `[label]: url` definition anywhere in the document."""

    rule = Rule.UNDEFINED_LINK_REFERENCE
    marker = InvalidSpanKind.UNDEFINED_LINK_REFERENCE
