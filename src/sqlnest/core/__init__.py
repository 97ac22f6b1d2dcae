from .clauses import ClauseList, ComboCondition, CustomCondition, NestableClause, NotCondition, SqlText
from .columns import ColumnPath, column_to_sql, parse_column_path, qualified_column_to_sql
from .conditions import (
    BinaryCondition,
    InCondition,
    IsNullCondition,
    and_,
    equal_to,
    greater_than,
    less_than,
    like,
    not_,
    not_equal_to,
    or_,
)
from .dates import DEFAULT_DATE_FORMAT
from .exceptions import ClauseContractError
from .insert import InsertMultipleValuesQuery
from .types import ColumnRef, ComboOperator, ComparisonOperator, Renderable
from .values import NULL_VALUE, ValueConverter, ValueObject, to_sql_literal
from .writer import SqlWriter, render_to_string

__all__ = [
    "BinaryCondition",
    "ClauseContractError",
    "ClauseList",
    "ColumnPath",
    "ColumnRef",
    "ComboCondition",
    "ComboOperator",
    "ComparisonOperator",
    "CustomCondition",
    "DEFAULT_DATE_FORMAT",
    "InCondition",
    "InsertMultipleValuesQuery",
    "IsNullCondition",
    "NULL_VALUE",
    "NestableClause",
    "NotCondition",
    "Renderable",
    "SqlText",
    "SqlWriter",
    "ValueConverter",
    "ValueObject",
    "and_",
    "column_to_sql",
    "equal_to",
    "greater_than",
    "less_than",
    "like",
    "not_",
    "not_equal_to",
    "or_",
    "parse_column_path",
    "qualified_column_to_sql",
    "render_to_string",
    "to_sql_literal",
]
