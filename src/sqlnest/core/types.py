"""Public contracts shared by the clause and value renderers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Literal, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from .writer import SqlWriter

__all__ = [
    "ColumnConverter",
    "ColumnRef",
    "ComboOperator",
    "ComparisonOperator",
    "HasName",
    "LiteralConverter",
    "Renderable",
]

ComparisonOperator = Literal["=", "<>", "!=", ">", "<", ">=", "<=", "LIKE", "NOT LIKE"]
ComboOperator = Literal["AND", "OR"]


@runtime_checkable
class Renderable(Protocol):
    """Anything that can write its exact SQL text to a :class:`SqlWriter`."""

    def render(self, sink: SqlWriter) -> None: ...


@runtime_checkable
class HasName(Protocol):
    """Column metadata object exposing the column identifier as ``name``."""

    name: str


ColumnRef = Union[str, HasName]
ColumnConverter = Callable[[ColumnRef], str]


class LiteralConverter(Protocol):
    """Generic fallback turning an arbitrary value into a literal token."""

    def __call__(self, value: Any, *, escape_quotes: bool = False) -> Renderable: ...
