"""Helpers for turning temporal values into SQL date literals."""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any

import numpy as np
import pandas as pd

# equivalent of the ``yyyy-MM-dd HH:mm:ss`` pattern
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_DIRECTIVE_PATTERN = re.compile(r"%.")


def is_temporal(value: Any) -> bool:
    """Return ``True`` for dates, datetimes, pandas/numpy timestamps and ``NaT``."""

    return value is pd.NaT or isinstance(value, (date, pd.Timestamp, np.datetime64))


def _to_datetime(value: date | pd.Timestamp | np.datetime64) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        # plain dates outside the nanosecond timestamp range stay representable
        return datetime.combine(value, time())
    return pd.Timestamp(value)


def format_temporal(
    value: date | pd.Timestamp | np.datetime64,
    date_format: str = DEFAULT_DATE_FORMAT,
    tz: str | None = None,
) -> str:
    """Return ``value`` formatted with the ``strftime`` style ``date_format``.

    Plain dates are treated as midnight.  When ``tz`` is given, timezone aware
    values are converted to it first; naive values are formatted as they are.
    ``%Y`` always yields at least four digits, whatever the platform's
    ``strftime`` does for early years.
    """

    ts = _to_datetime(value)
    if tz is not None and ts.tzinfo is not None:
        ts = pd.Timestamp(ts).tz_convert(tz)

    year = f"{ts.year:04d}"
    pattern = _DIRECTIVE_PATTERN.sub(
        lambda match: year if match.group() == "%Y" else match.group(), date_format
    )
    return ts.strftime(pattern)
