"""Tests for the value-to-literal conversion policy."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any

import numpy as np
import pandas as pd
import pytest

from sqlnest import SqlText, ValueConverter, ValueObject
from sqlnest.core.values import NULL_VALUE, to_sql_literal
from sqlnest.core.writer import render_to_string


@pytest.fixture
def convert() -> ValueConverter:
    return ValueConverter()


def test_empty_string_becomes_null(convert: ValueConverter) -> None:
    assert convert("") == NULL_VALUE
    assert str(convert("")) == "NULL"


def test_string_quotes_are_escaped(convert: ValueConverter) -> None:
    assert str(convert("O'Brien")) == "'O''Brien'"
    assert str(convert("a\\b")) == "'a\\b'"


def test_backslash_escaping_mode() -> None:
    convert = ValueConverter(escape_quotes=True)
    assert str(convert("O'Brien")) == "'O\\'Brien'"
    assert str(convert("a\\b")) == "'a\\\\b'"


def test_datetime_uses_default_format(convert: ValueConverter) -> None:
    assert str(convert(datetime(2020, 1, 1, 0, 0, 0))) == "'2020-01-01 00:00:00'"
    assert str(convert(datetime(2021, 12, 31, 23, 5, 9, 123456))) == "'2021-12-31 23:05:09'"


def test_plain_date_is_midnight(convert: ValueConverter) -> None:
    assert str(convert(date(2020, 2, 29))) == "'2020-02-29 00:00:00'"


def test_custom_date_format() -> None:
    convert = ValueConverter(date_format="%d/%m/%Y")
    assert str(convert(pd.Timestamp("2024-03-05 10:00"))) == "'05/03/2024'"


def test_timezone_aware_values_are_converted() -> None:
    convert = ValueConverter(tz="America/New_York")
    value = pd.Timestamp("2024-01-01 12:00", tz="UTC")
    assert str(convert(value)) == "'2024-01-01 07:00:00'"
    # naive values are formatted unchanged
    assert str(convert(datetime(2024, 1, 1, 12))) == "'2024-01-01 12:00:00'"


def test_null_markers(convert: ValueConverter) -> None:
    assert convert(None) == NULL_VALUE
    assert convert(pd.NaT) == NULL_VALUE
    assert convert(float("nan")) == NULL_VALUE


def test_generic_values(convert: ValueConverter) -> None:
    assert str(convert(True)) == "TRUE"
    assert str(convert(False)) == "FALSE"
    assert str(convert(42)) == "42"
    assert str(convert(-1.5)) == "-1.5"
    assert str(convert(Decimal("2.50"))) == "2.50"
    assert str(convert(b"\x01\xff")) == "X'01FF'"


def test_other_objects_are_quoted_as_text(convert: ValueConverter) -> None:
    class _Code:
        def __str__(self) -> str:
            return "it's"

    assert str(convert(_Code())) == "'it''s'"


def test_prebuilt_literals_pass_through(convert: ValueConverter) -> None:
    token = ValueObject("CURRENT_TIMESTAMP")
    text = SqlText("DEFAULT")
    assert convert(token) is token
    assert convert(text) is text
    assert render_to_string(convert(text)) == "DEFAULT"


def test_fallback_receives_escape_flag() -> None:
    seen: list[tuple[Any, bool]] = []

    def fallback(value: Any, *, escape_quotes: bool = False) -> ValueObject:
        seen.append((value, escape_quotes))
        return ValueObject("?")

    convert = ValueConverter(escape_quotes=True, fallback=fallback)
    assert str(convert(7)) == "?"
    # strings and dates never reach the fallback
    convert("x")
    convert(date(2020, 1, 1))
    assert seen == [(7, True)]


def test_to_sql_literal_keeps_empty_strings() -> None:
    assert str(to_sql_literal("")) == "''"
    assert str(to_sql_literal("it's", escape_quotes=True)) == "'it\\'s'"


def test_numpy_datetimes_use_date_format(convert: ValueConverter) -> None:
    assert str(convert(np.datetime64("2020-01-01T00:00:00"))) == "'2020-01-01 00:00:00'"
    assert str(convert(np.datetime64("2020-01-01"))) == "'2020-01-01 00:00:00'"
    assert convert(np.datetime64("NaT")) == NULL_VALUE


def test_early_years_keep_four_digits(convert: ValueConverter) -> None:
    assert str(convert(date(1, 1, 1))) == "'0001-01-01 00:00:00'"
    assert str(convert(datetime(999, 12, 31, 23, 59, 59))) == "'0999-12-31 23:59:59'"


def test_infinities_become_float_inputs(convert: ValueConverter) -> None:
    assert str(convert(float("inf"))) == "'Infinity'"
    assert str(convert(float("-inf"))) == "'-Infinity'"
    assert str(convert(np.float64("inf"))) == "'Infinity'"
    assert str(convert(Decimal("-Infinity"))) == "'-Infinity'"
