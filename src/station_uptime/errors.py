"""Failure taxonomy — one externally observable outcome for every violation.

Grammar, referential, cardinality and ordering violations all surface as
``MalformedInputError``.  The ``reason`` and ``line_number`` are kept for
diagnostics (DEBUG logging) only; callers at the process / HTTP boundary map
every instance to the same uniform failure signal.
"""

from __future__ import annotations

FAILURE_TOKEN = "ERROR"
"""The single diagnostic token emitted on any failure."""


class MalformedInputError(ValueError):
    """Input is malformed or the computation precondition does not hold."""

    def __init__(self, reason: str, line_number: int | None = None) -> None:
        self.reason = reason
        self.line_number = line_number
        if line_number is None:
            super().__init__(reason)
        else:
            super().__init__(f"line {line_number}: {reason}")
