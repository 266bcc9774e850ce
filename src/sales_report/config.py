"""
Configuration classes for sales report specifications.

Holds the enumerations recognised by the builder and the immutable
ReportSpec produced at finalization. Uses Pydantic for validation and
immutability.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, field_validator, model_validator


# =============================================================================
# Enums
# =============================================================================


class ReportFormat(str, Enum):
    """Output formats a report can be produced in."""

    PDF = "pdf"
    SPREADSHEET = "spreadsheet"
    HTML = "html"


class Orientation(str, Enum):
    """Page orientation."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class PageSize(str, Enum):
    """Supported paper sizes."""

    A4 = "A4"
    LETTER = "letter"


# =============================================================================
# Report specification
# =============================================================================


class ReportSpec(BaseModel):
    """
    Fully configured, immutable report specification.

    Instances are normally produced by ``ReportSpecBuilder``; constructing
    one directly still enforces the model-level invariants (non-blank
    title, at least one column, ordered period).

    Attributes
    ----------
    title : str
        Report title, already trimmed.
    format : ReportFormat
        Output format.
    start_date, end_date : date
        Inclusive reporting period.
    columns : tuple[str, ...]
        Column names in insertion order, duplicates preserved.
    filters : tuple[str, ...]
        Filter expressions in insertion order.
    """

    title: str
    format: ReportFormat
    start_date: date
    end_date: date

    include_header: bool = False
    header_text: str | None = None

    include_footer: bool = False
    footer_text: str | None = None

    include_charts: bool = False
    chart_type: str | None = None

    include_summary: bool = False

    columns: tuple[str, ...]
    filters: tuple[str, ...] = ()

    sort_by: str | None = None
    group_by: str | None = None
    include_totals: bool = False

    orientation: Orientation | None = None
    page_size: PageSize | None = None
    include_page_numbers: bool = False

    company_logo_path: str | None = None
    watermark_text: str | None = None

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v

    @field_validator("columns")
    @classmethod
    def columns_not_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("at least one column is required")
        return v

    @model_validator(mode="after")
    def period_ordered(self) -> ReportSpec:
        if self.start_date > self.end_date:
            raise ValueError(
                f"start_date {self.start_date} is after end_date {self.end_date}"
            )
        return self

    @property
    def period_days(self) -> int:
        """Number of days covered by the period, both ends included."""
        return (self.end_date - self.start_date).days + 1

    @property
    def has_layout(self) -> bool:
        """Whether an explicit page layout was configured."""
        return self.orientation is not None or self.page_size is not None


__all__ = [
    "ReportFormat",
    "Orientation",
    "PageSize",
    "ReportSpec",
]
