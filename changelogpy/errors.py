"""Error types raised outside the lint data flow."""


class ParseError(Exception):
    """Reserved for unrecoverable parse failures.

    Parsing a string never raises this today: every string is a Markdown document and
    structural problems are reported as invalid-span markers instead.
    """


class ConfigError(ValueError):
    """Invalid configuration file or value."""
