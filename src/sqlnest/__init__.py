"""Public package API."""

from importlib import metadata

from .core import (
    ClauseContractError,
    ClauseList,
    ComboCondition,
    CustomCondition,
    InsertMultipleValuesQuery,
    NestableClause,
    NotCondition,
    SqlText,
    SqlWriter,
    ValueConverter,
    ValueObject,
    and_,
    not_,
    or_,
)
from .core.conditions import BinaryCondition, InCondition, IsNullCondition
from .core.types import ComboOperator, ComparisonOperator, Renderable

__all__ = [
    "BinaryCondition",
    "ClauseContractError",
    "ClauseList",
    "ComboCondition",
    "ComboOperator",
    "ComparisonOperator",
    "CustomCondition",
    "InCondition",
    "InsertMultipleValuesQuery",
    "IsNullCondition",
    "NestableClause",
    "NotCondition",
    "Renderable",
    "SqlText",
    "SqlWriter",
    "ValueConverter",
    "ValueObject",
    "and_",
    "not_",
    "or_",
]

try:
    __version__ = metadata.version("sqlnest")
except (
    metadata.PackageNotFoundError
):  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"
