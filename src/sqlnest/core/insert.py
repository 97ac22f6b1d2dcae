"""Multi-row ``INSERT`` statements built from a grid of application values."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .clauses import ClauseList, SqlText
from .columns import column_to_sql
from .dates import DEFAULT_DATE_FORMAT
from .exceptions import ClauseContractError
from .types import ColumnConverter, ColumnRef, LiteralConverter, Renderable
from .values import ValueConverter, to_sql_literal
from .writer import SqlWriter, render_to_string

logger = logging.getLogger(__name__)


class InsertMultipleValuesQuery:
    """``INSERT INTO table (...) VALUES (...), (...)`` for many rows at once."""

    def __init__(
        self,
        table: str,
        *,
        date_format: str = DEFAULT_DATE_FORMAT,
        tz: str | None = None,
        escape_quotes: bool = False,
        literal_converter: LiteralConverter = to_sql_literal,
        column_converter: ColumnConverter = column_to_sql,
    ) -> None:
        if not table:
            raise ClauseContractError("table must be a non-empty table name")
        self.table = table
        self.column_converter = column_converter
        self.value_converter = ValueConverter(
            date_format=date_format,
            tz=tz,
            escape_quotes=escape_quotes,
            fallback=literal_converter,
        )
        self.columns: ClauseList[SqlText] = ClauseList()
        self.query_values: ClauseList[ClauseList[Renderable]] | None = None

    def build(
        self,
        columns: Sequence[ColumnRef],
        rows: Sequence[Sequence[Any]],
    ) -> InsertMultipleValuesQuery:
        """Convert ``columns`` and every cell of ``rows`` into SQL tokens.

        Neither argument is modified.  Rows are expected to have one value per
        column; mismatches are logged but not rejected.
        """

        if not columns:
            raise ClauseContractError("columns must contain at least one column")
        if rows is None:
            raise ClauseContractError("rows must be a sequence of value rows")

        rendered_columns: ClauseList[SqlText] = ClauseList(
            ",", (SqlText(self.column_converter(column)) for column in columns)
        )

        grid: ClauseList[ClauseList[Renderable]] = ClauseList(",")
        for idx, row in enumerate(rows):
            if row is None:
                raise ClauseContractError(f"row {idx} is None")
            if len(row) != len(columns):
                logger.warning(
                    f"Row {idx} has {len(row)} values for {len(columns)} columns"
                )
            grid.add(ClauseList(",", (self.value_converter(value) for value in row)))

        self.columns = rendered_columns
        self.query_values = grid
        logger.debug(
            f"Built {len(grid)} value rows for {len(rendered_columns)} columns of {self.table}"
        )
        return self

    def get_query_values(self) -> ClauseList[ClauseList[Renderable]] | None:
        return self.query_values

    def get_value_converter(self) -> ValueConverter:
        return self.value_converter

    def set_need_escape_quotes(self, need_escape_quotes: bool) -> None:
        """Select backslash escaping for literals produced by later ``build`` calls."""

        self.value_converter.escape_quotes = need_escape_quotes

    def values_sql(self) -> str:
        """Return the ``VALUES (...),(...)`` fragment."""

        if self.query_values is None:
            raise ClauseContractError("build() must be called before rendering")

        values = ",".join(
            "({})".format(",".join(render_to_string(token) for token in row))
            for row in self.query_values
        )
        return f"VALUES {values}"

    def render(self, sink: SqlWriter) -> None:
        values = self.values_sql()
        sink.append(f"INSERT INTO {self.table} (").append(self.columns).append(") ")
        sink.append(values)

    def __str__(self) -> str:
        return render_to_string(self)
