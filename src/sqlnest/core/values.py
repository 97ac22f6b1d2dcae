"""Conversion of application values into SQL literal tokens."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import pandas as pd

from .dates import DEFAULT_DATE_FORMAT, format_temporal, is_temporal
from .sql import NULL_LITERAL, format_literal
from .types import LiteralConverter, Renderable
from .writer import SqlWriter


@dataclass(frozen=True)
class ValueObject:
    """An already rendered SQL literal token such as ``'abc'``, ``12`` or ``NULL``."""

    token: str

    def render(self, sink: SqlWriter) -> None:
        sink.append(self.token)

    def __str__(self) -> str:
        return self.token


NULL_VALUE = ValueObject(NULL_LITERAL)


def _is_null(value: Any) -> bool:
    return value is None or (pd.api.types.is_scalar(value) and bool(pd.isna(value)))


def to_sql_literal(value: Any, *, escape_quotes: bool = False) -> Renderable:
    """Return the natural SQL literal for ``value``.

    Renderable objects are passed through unchanged, nulls (``None``, ``NaN``,
    ``NaT``) become ``NULL``, booleans become ``TRUE``/``FALSE`` and numbers are
    used as-is, except infinities which become the quoted ``'Infinity'`` and
    ``'-Infinity'`` float inputs.  Any other value is quoted as text.
    """

    if isinstance(value, Renderable):
        return value
    if _is_null(value):
        return NULL_VALUE
    if pd.api.types.is_bool(value):
        return ValueObject("TRUE" if value else "FALSE")
    if pd.api.types.is_number(value):
        if (pd.api.types.is_float(value) or isinstance(value, Decimal)) and math.isinf(value):
            return ValueObject(format_literal("Infinity" if value > 0 else "-Infinity"))
        return ValueObject(str(value))
    if isinstance(value, (bytes, bytearray)):
        return ValueObject("X'{}'".format(bytes(value).hex().upper()))
    return ValueObject(format_literal(value, escape_quotes=escape_quotes))


class ValueConverter:
    """Callable turning one application value into a literal token.

    The checks are applied in order: temporal values are formatted with
    ``date_format`` and quoted, strings are quoted after escaping (an empty
    string is treated as a missing value and becomes ``NULL``), and everything
    else is handed to ``fallback``.
    """

    def __init__(
        self,
        *,
        date_format: str = DEFAULT_DATE_FORMAT,
        tz: str | None = None,
        escape_quotes: bool = False,
        fallback: LiteralConverter = to_sql_literal,
    ) -> None:
        self.date_format = date_format
        self.tz = tz
        self.escape_quotes = escape_quotes
        self.fallback = fallback

    def __call__(self, value: Any) -> Renderable:
        if is_temporal(value):
            if _is_null(value):
                return NULL_VALUE
            formatted = format_temporal(value, self.date_format, self.tz)
            return ValueObject(format_literal(formatted, escape_quotes=self.escape_quotes))

        if isinstance(value, str):
            if not value:
                return NULL_VALUE
            return ValueObject(format_literal(value, escape_quotes=self.escape_quotes))

        return self.fallback(value, escape_quotes=self.escape_quotes)
