from __future__ import annotations

import pytest

from sqlnest import ClauseContractError
from sqlnest.core.columns import ColumnPath, column_to_sql, parse_column_path, qualified_column_to_sql


def test_parse_column_path() -> None:
    assert parse_column_path("users.email") == ColumnPath(table="users", name="email")
    assert parse_column_path("app.users.email") == ColumnPath(table="app.users", name="email")
    assert parse_column_path("email") == ColumnPath(table=None, name="email")


def test_column_converters() -> None:
    assert column_to_sql("users.email") == "email"
    assert qualified_column_to_sql("users.email") == "users.email"
    assert qualified_column_to_sql(" email ") == "email"


@pytest.mark.parametrize("column", ["", "users.", None, 3])
def test_column_converters_reject_bad_references(column: object) -> None:
    with pytest.raises(ClauseContractError):
        column_to_sql(column)  # type: ignore[arg-type]
