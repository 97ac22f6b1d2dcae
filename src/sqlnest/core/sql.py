"""Helper utilities for constructing SQL literal tokens.

All quoting of textual values goes through this module so that the escaping
rules live in a single place.  Two escaping modes exist: the standard SQL mode
which doubles embedded single quotes, and the backslash mode understood by
MySQL and BigQuery style dialects.
"""

from __future__ import annotations

from collections.abc import Iterable

NULL_LITERAL = "NULL"


def escape_literal(value: str) -> str:
    """Escape a string so it can safely be inserted as a standard SQL literal."""

    return value.replace("'", "''")


def escape_literal_backslash(value: str) -> str:
    """Escape a string using backslash escapes instead of doubled quotes."""

    return value.replace("\\", "\\\\").replace("'", "\\'")


def format_literal(value: object, *, escape_quotes: bool = False) -> str:
    """Return ``value`` formatted as a quoted SQL literal.

    ``escape_quotes`` selects the backslash escaping mode.
    """

    escape = escape_literal_backslash if escape_quotes else escape_literal
    return "'{}'".format(escape(str(value)))


def format_literal_list(tokens: Iterable[object]) -> str:
    """Return already rendered ``tokens`` formatted for ``IN`` style expressions."""

    return "({})".format(", ".join(str(token) for token in tokens))
