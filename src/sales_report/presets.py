"""
Preset factories for common report configurations.

Each preset runs the mandatory builder steps and returns the optional
stage, so callers only add columns and extras before building.
"""

from __future__ import annotations

from datetime import date

from .builders import OptionalStage, ReportSpecBuilder
from .config import Orientation, PageSize, ReportFormat
from .settings import get_settings


def standard_pdf(title: str, start: date, end: date) -> OptionalStage:
    """PDF with default header and footer, portrait A4 and page numbers."""
    settings = get_settings()
    return (
        ReportSpecBuilder.create()
        .with_title(title)
        .with_format(ReportFormat.PDF)
        .for_period(start, end)
        .with_header(settings.default_header_text)
        .with_footer(settings.default_footer_text)
        .layout(Orientation.PORTRAIT, PageSize.A4, page_numbers=True)
    )


def standard_spreadsheet(title: str, start: date, end: date) -> OptionalStage:
    """Spreadsheet with no extras."""
    return (
        ReportSpecBuilder.create()
        .with_title(title)
        .with_format(ReportFormat.SPREADSHEET)
        .for_period(start, end)
    )


__all__ = [
    "standard_pdf",
    "standard_spreadsheet",
]
