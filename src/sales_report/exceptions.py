"""
Exceptions raised while constructing a report specification.
"""

from __future__ import annotations

from datetime import date


class ReportSpecError(Exception):
    """Base class for report specification errors."""

    pass


class InvalidInput(ReportSpecError, ValueError):
    """Raised immediately when a setter receives an unusable value."""

    pass


class MissingField(ReportSpecError):
    """Raised by ``build()`` when a required field was never provided.

    Parameters
    ----------
    field : str
        Name of the missing field: ``"format"``, ``"period"``,
        ``"columns"``, ``"headerText"``, ``"footerText"`` or ``"chartType"``.
    """

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"Missing required field: {field}")


class InvalidRange(ReportSpecError, ValueError):
    """Raised by ``build()`` when the period starts after it ends."""

    def __init__(self, start: date, end: date):
        self.start = start
        self.end = end
        super().__init__(f"start_date ({start}) must be on or before end_date ({end})")


class StageError(ReportSpecError, RuntimeError):
    """Raised when a construction step is taken out of protocol order."""

    pass


__all__ = [
    "ReportSpecError",
    "InvalidInput",
    "MissingField",
    "InvalidRange",
    "StageError",
]
