"""Nestable clauses and the rules for combining them.

A clause is expected to be combined with other clauses at a peer level (for
instance the conditions of a ``WHERE`` tree).  Each clause therefore needs to
delimit itself so that concatenating it with siblings never changes operator
precedence, and clauses holding a variable number of children need to report
when they would render nothing at all so that the parent can drop them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .exceptions import ClauseContractError
from .types import ComboOperator, Renderable
from .writer import SqlWriter

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Renderable)


class ClauseList(Generic[T]):
    """Ordered sequence of renderables joined by ``delimiter`` when rendered."""

    def __init__(self, delimiter: str = ",", items: Iterable[T] = ()) -> None:
        self.delimiter = delimiter
        self._items: list[T] = list(items)

    def add(self, item: T) -> ClauseList[T]:
        if item is None:
            raise ClauseContractError("Cannot add None to a clause list")
        self._items.append(item)
        return self

    def extend(self, items: Iterable[T]) -> ClauseList[T]:
        for item in items:
            self.add(item)
        return self

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def render(self, sink: SqlWriter) -> None:
        for idx, item in enumerate(self._items):
            if idx:
                sink.append(self.delimiter)
            sink.append(item)

    def __str__(self) -> str:
        return SqlWriter().append(self).getvalue()

    def __repr__(self) -> str:
        return f"ClauseList({self.delimiter!r}, {self._items!r})"


class NestableClause:
    """Base class for clauses which are nested within, or combined with, peers."""

    def __init__(self, *, disable_parens: bool = False) -> None:
        self.disable_parens = disable_parens

    def set_disable_parens(self, disable_parens: bool) -> NestableClause:
        """Control whether this clause wraps itself in parentheses.

        Disabling the parentheses may change the meaning of the generated query
        and should only be used when a non-standard dialect needs direct
        control over the wrapping parentheses.
        """

        self.disable_parens = disable_parens
        return self

    def is_empty(self) -> bool:
        """Return ``True`` iff rendering this clause would produce no output."""

        return False

    def has_parens(self) -> bool:
        """Return ``True`` iff the rendered clause is wrapped in parentheses."""

        return not self.is_empty() and not self.disable_parens

    @staticmethod
    def is_empty_group(clauses: ClauseList[NestableClause]) -> bool:
        """Return ``True`` iff every clause in ``clauses`` is empty."""

        _require_clauses(clauses)
        for clause in clauses:
            if not clause.is_empty():
                return False
        return True

    @staticmethod
    def group_has_parens(clauses: ClauseList[NestableClause]) -> bool:
        """Return ``True`` iff rendering ``clauses`` shows surrounding parentheses.

        A child's own parentheses are visible through the group.  Without any,
        the group wraps itself as soon as more than one child renders output.
        """

        _require_clauses(clauses)
        non_empty = 0
        for clause in clauses:
            if clause.has_parens():
                return True
            if not clause.is_empty():
                non_empty += 1
        return non_empty > 1

    def open_paren(self, sink: SqlWriter) -> None:
        if not self.disable_parens:
            sink.append("(")

    def close_paren(self, sink: SqlWriter) -> None:
        if not self.disable_parens:
            sink.append(")")

    def append_if_not_null(self, sink: SqlWriter, obj: str | Renderable | None) -> None:
        """Append ``obj`` wrapped in this clause's parentheses, if present."""

        if obj is None:
            return
        buffered = SqlWriter()
        self.open_paren(buffered)
        buffered.append(obj)
        self.close_paren(buffered)
        sink.append(buffered.getvalue())

    def render_group(self, sink: SqlWriter, clauses: ClauseList[NestableClause]) -> None:
        """Append the non-empty ``clauses``, parenthesized when there are several."""

        _require_clauses(clauses)
        # the common case has no empty children, so test before copying
        if any(clause.is_empty() for clause in clauses):
            filtered: ClauseList[NestableClause] = ClauseList(
                clauses.delimiter, (clause for clause in clauses if not clause.is_empty())
            )
            logger.debug(
                f"Dropped {len(clauses) - len(filtered)} empty clause(s) from group"
            )
            clauses = filtered

        buffered = SqlWriter()
        if len(clauses) > 1 and not self.disable_parens:
            buffered.append("(").append(clauses).append(")")
        else:
            buffered.append(clauses)
        sink.append(buffered.getvalue())

    def render(self, sink: SqlWriter) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return SqlWriter().append(self).getvalue()


def _require_clauses(clauses: ClauseList[NestableClause] | None) -> None:
    if clauses is None:
        raise ClauseContractError("A clause list is required")


class SqlText(NestableClause):
    """Verbatim SQL fragment, used as-is without any wrapping parentheses."""

    def __init__(self, text: str) -> None:
        super().__init__(disable_parens=True)
        if text is None:
            raise ClauseContractError("SQL text must not be None")
        self.text = text

    def is_empty(self) -> bool:
        return not self.text

    def has_parens(self) -> bool:
        return False

    def render(self, sink: SqlWriter) -> None:
        sink.append(self.text)

    def __repr__(self) -> str:
        return f"SqlText({self.text!r})"


class CustomCondition(NestableClause):
    """Optional single custom fragment wrapped in parentheses."""

    def __init__(self, condition: str | Renderable | None, *, disable_parens: bool = False) -> None:
        super().__init__(disable_parens=disable_parens)
        self.condition = condition

    def is_empty(self) -> bool:
        if isinstance(self.condition, str):
            return not self.condition
        return self.condition is None

    def render(self, sink: SqlWriter) -> None:
        if self.is_empty():
            return
        self.append_if_not_null(sink, self.condition)


class ComboCondition(NestableClause):
    """Conditions joined by ``AND`` or ``OR``, skipping the empty ones."""

    def __init__(
        self,
        operator: ComboOperator,
        *conditions: NestableClause,
        disable_parens: bool = False,
    ) -> None:
        super().__init__(disable_parens=disable_parens)
        normalized = operator.upper()
        if normalized not in {"AND", "OR"}:
            raise ClauseContractError(f"Unsupported combining operator: {operator}")
        self.operator = normalized
        self.conditions: ClauseList[NestableClause] = ClauseList(f" {normalized} ")
        for condition in conditions:
            self.add_condition(condition)

    def add_condition(self, condition: NestableClause) -> ComboCondition:
        if not isinstance(condition, NestableClause):
            raise ClauseContractError(
                f"Expected a NestableClause, got {type(condition).__name__}"
            )
        self.conditions.add(condition)
        return self

    def is_empty(self) -> bool:
        return self.is_empty_group(self.conditions)

    def has_parens(self) -> bool:
        if self.disable_parens:
            # only a lone child can still show its own parentheses
            non_empty = [c for c in self.conditions if not c.is_empty()]
            return len(non_empty) == 1 and non_empty[0].has_parens()
        return self.group_has_parens(self.conditions)

    def render(self, sink: SqlWriter) -> None:
        self.render_group(sink, self.conditions)


class NotCondition(NestableClause):
    """Negation of a single nested condition, rendered as ``(NOT child)``."""

    def __init__(self, condition: NestableClause | None, *, disable_parens: bool = False) -> None:
        super().__init__(disable_parens=disable_parens)
        self.condition = condition

    def is_empty(self) -> bool:
        return self.condition is None or self.condition.is_empty()

    def render(self, sink: SqlWriter) -> None:
        if self.is_empty():
            return
        buffered = SqlWriter()
        self.open_paren(buffered)
        buffered.append("NOT ")
        if self.condition.has_parens():
            buffered.append(self.condition)
        else:
            buffered.append("(").append(self.condition).append(")")
        self.close_paren(buffered)
        sink.append(buffered.getvalue())
