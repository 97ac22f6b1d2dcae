"""Conversion of column references into SQL identifiers."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ClauseContractError
from .types import ColumnRef


@dataclass(frozen=True)
class ColumnPath:
    """A column reference split into its optional table qualifier and name.

    Column references are frequently written with a ``table.column`` syntax.
    Insert column lists never use table qualifiers, so the callers that render
    them need the bare name while predicates keep the qualifier.
    """

    table: str | None
    name: str


def parse_column_path(path: str) -> ColumnPath:
    """Return the :class:`ColumnPath` describing ``path``."""

    table, _, name = path.strip().rpartition(".")
    return ColumnPath(table=table or None, name=name)


def _column_path(column: ColumnRef) -> ColumnPath:
    raw = column if isinstance(column, str) else getattr(column, "name", None)
    if not isinstance(raw, str):
        raise ClauseContractError(f"Cannot use {column!r} as a column reference")

    path = parse_column_path(raw)
    if not path.name:
        raise ClauseContractError(f"Column reference {column!r} has no name")
    return path


def column_to_sql(column: ColumnRef) -> str:
    """Default insert column converter: render the unqualified column name."""

    return _column_path(column).name


def qualified_column_to_sql(column: ColumnRef) -> str:
    """Column converter keeping the ``table.column`` qualifier, if any."""

    path = _column_path(column)
    return f"{path.table}.{path.name}" if path.table else path.name
