"""Leaf predicates and shorthands for building boolean clause trees."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .clauses import ComboCondition, NestableClause, NotCondition
from .columns import qualified_column_to_sql
from .exceptions import ClauseContractError
from .sql import format_literal_list
from .types import ColumnRef, ComparisonOperator, Renderable
from .values import to_sql_literal
from .writer import SqlWriter, render_to_string

_COMPARISON_OPERATORS = {"=", "<>", "!=", ">", "<", ">=", "<=", "LIKE", "NOT LIKE"}


def _column_sql(column: ColumnRef | Renderable) -> str | Renderable:
    """Return ``column`` as an identifier unless it already renders itself."""

    if isinstance(column, Renderable):
        return column
    return qualified_column_to_sql(column)


class BinaryCondition(NestableClause):
    """Comparison of a column against a value, rendered as ``(left op right)``."""

    def __init__(
        self,
        operator: ComparisonOperator,
        left: ColumnRef | Renderable,
        right: Any,
        *,
        disable_parens: bool = False,
    ) -> None:
        super().__init__(disable_parens=disable_parens)
        normalized = operator.upper()
        if normalized not in _COMPARISON_OPERATORS:
            raise ClauseContractError(f"Unsupported operator: {operator}")
        self.operator = normalized
        self.left = _column_sql(left)
        self.right = to_sql_literal(right)

    def render(self, sink: SqlWriter) -> None:
        buffered = SqlWriter()
        self.open_paren(buffered)
        buffered.append(self.left).append(f" {self.operator} ").append(self.right)
        self.close_paren(buffered)
        sink.append(buffered.getvalue())


def equal_to(left: ColumnRef | Renderable, right: Any) -> BinaryCondition:
    return BinaryCondition("=", left, right)


def not_equal_to(left: ColumnRef | Renderable, right: Any) -> BinaryCondition:
    return BinaryCondition("<>", left, right)


def less_than(left: ColumnRef | Renderable, right: Any) -> BinaryCondition:
    return BinaryCondition("<", left, right)


def greater_than(left: ColumnRef | Renderable, right: Any) -> BinaryCondition:
    return BinaryCondition(">", left, right)


def like(left: ColumnRef | Renderable, pattern: str) -> BinaryCondition:
    return BinaryCondition("LIKE", left, pattern)


class InCondition(NestableClause):
    """Membership test ``(column IN (v1, v2))``.

    Without any values the condition is empty, so an enclosing group drops it
    instead of rendering the invalid ``IN ()``.
    """

    def __init__(
        self,
        column: ColumnRef | Renderable,
        values: Iterable[Any],
        *,
        negate: bool = False,
        disable_parens: bool = False,
    ) -> None:
        super().__init__(disable_parens=disable_parens)
        if values is None:
            raise ClauseContractError("IN style conditions require a value collection")
        self.column = _column_sql(column)
        self.values = [to_sql_literal(value) for value in values]
        self.negate = negate

    def is_empty(self) -> bool:
        return not self.values

    def render(self, sink: SqlWriter) -> None:
        if self.is_empty():
            return
        op = "NOT IN" if self.negate else "IN"
        buffered = SqlWriter()
        self.open_paren(buffered)
        buffered.append(self.column).append(f" {op} ")
        buffered.append(format_literal_list(render_to_string(value) for value in self.values))
        self.close_paren(buffered)
        sink.append(buffered.getvalue())


class IsNullCondition(NestableClause):
    """Null test ``(column IS NULL)`` or ``(column IS NOT NULL)``."""

    def __init__(
        self,
        column: ColumnRef | Renderable,
        *,
        negate: bool = False,
        disable_parens: bool = False,
    ) -> None:
        super().__init__(disable_parens=disable_parens)
        self.column = _column_sql(column)
        self.negate = negate

    def render(self, sink: SqlWriter) -> None:
        buffered = SqlWriter()
        self.open_paren(buffered)
        buffered.append(self.column).append(" IS NOT NULL" if self.negate else " IS NULL")
        self.close_paren(buffered)
        sink.append(buffered.getvalue())


def and_(*conditions: NestableClause) -> ComboCondition:
    return ComboCondition("AND", *conditions)


def or_(*conditions: NestableClause) -> ComboCondition:
    return ComboCondition("OR", *conditions)


def not_(condition: NestableClause | None) -> NotCondition:
    return NotCondition(condition)
