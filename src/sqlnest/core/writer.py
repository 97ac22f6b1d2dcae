"""The appendable text sink every clause renders into."""

from __future__ import annotations

from .exceptions import ClauseContractError
from .types import Renderable


class SqlWriter:
    """Collects SQL text fragments in order.

    Renderable objects are rendered into a private writer first and only
    committed once their rendering completed, so a failure half way through a
    nested clause never leaves partial SQL in this writer.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, obj: str | Renderable) -> SqlWriter:
        if isinstance(obj, str):
            self._parts.append(obj)
            return self
        if obj is None or not isinstance(obj, Renderable):
            raise ClauseContractError(
                f"Cannot append {type(obj).__name__} to a SQL writer"
            )

        buffered = SqlWriter()
        obj.render(buffered)
        self._parts.extend(buffered._parts)
        return self

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.getvalue()


def render_to_string(obj: str | Renderable) -> str:
    """Render ``obj`` into a fresh writer and return the text."""

    return SqlWriter().append(obj).getvalue()
