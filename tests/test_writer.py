from __future__ import annotations

import pytest

from sqlnest import ClauseContractError, ClauseList, SqlText, SqlWriter
from sqlnest.core.writer import render_to_string


class _Broken:
    def render(self, sink: SqlWriter) -> None:
        sink.append("(half")
        raise RuntimeError("boom")


def test_append_chains_strings_and_renderables() -> None:
    sink = SqlWriter().append("SELECT * FROM t WHERE ").append(SqlText("a = 1"))
    assert sink.getvalue() == "SELECT * FROM t WHERE a = 1"
    assert str(sink) == sink.getvalue()


def test_failed_render_leaves_writer_untouched() -> None:
    sink = SqlWriter().append("WHERE ")
    with pytest.raises(RuntimeError):
        sink.append(_Broken())
    assert sink.getvalue() == "WHERE "


@pytest.mark.parametrize("value", [None, 42, object()])
def test_append_rejects_non_renderables(value: object) -> None:
    with pytest.raises(ClauseContractError):
        SqlWriter().append(value)  # type: ignore[arg-type]


def test_clause_list_rendering() -> None:
    items = ClauseList(", ", [SqlText("a"), SqlText("b"), SqlText("a")])
    assert render_to_string(items) == "a, b, a"
    assert render_to_string(ClauseList()) == ""
    assert len(items.add(SqlText("c"))) == 4


def test_clause_list_rejects_none() -> None:
    with pytest.raises(ClauseContractError):
        ClauseList().add(None)  # type: ignore[arg-type]
