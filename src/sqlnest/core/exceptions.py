"""Errors raised when the clause and value contracts are violated."""

from __future__ import annotations


class ClauseContractError(ValueError):
    """Raised when required structural input is missing or malformed.

    These are programming errors on the caller's side (for instance passing
    ``None`` where a clause list is required, or rendering an insert query
    before its values were built).  They are raised before anything is written
    to the caller's sink.
    """
