"""
Base classes for report specification builders.

Provides the builder protocol and the mutable accumulator shared by every
stage handle of a single construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Protocol, TypeVar, runtime_checkable

from ..config import Orientation, PageSize, ReportFormat

T = TypeVar("T", covariant=True)


@runtime_checkable
class BuilderProtocol(Protocol[T]):
    """Protocol for builders that finish with a validated value.

    Only the final stage of a staged builder satisfies this protocol.
    """

    def build(self) -> T:
        """Build and return the finished object."""
        ...


@dataclass
class SectionState:
    """Toggle plus text for a header or footer."""

    enabled: bool = False
    text: str | None = None


@dataclass
class ChartState:
    """Toggle plus chart kind."""

    enabled: bool = False
    chart_type: str | None = None


@dataclass
class LayoutState:
    """Page layout, always replaced as a whole."""

    orientation: Orientation | None = None
    page_size: PageSize | None = None
    page_numbers: bool = False


@dataclass
class ReportState:
    """
    Mutable accumulator for one report construction.

    No cross-field validation happens here; ``ReportSpecBuilder`` checks
    the accumulated state only when building.

    Attributes
    ----------
    columns : list[str]
        Column names in insertion order.
    filters : list[str]
        Filter expressions in insertion order.
    header, footer : SectionState
        Header and footer toggles with their text.
    charts : ChartState
        Chart toggle with its chart kind.
    layout : LayoutState
        Orientation, page size and page numbering.
    """

    title: str | None = None
    format: ReportFormat | None = None
    start_date: date | None = None
    end_date: date | None = None

    header: SectionState = field(default_factory=SectionState)
    footer: SectionState = field(default_factory=SectionState)
    charts: ChartState = field(default_factory=ChartState)
    include_summary: bool = False

    columns: list[str] = field(default_factory=list)
    filters: list[str] = field(default_factory=list)

    sort_by: str | None = None
    group_by: str | None = None
    include_totals: bool = False

    layout: LayoutState = field(default_factory=LayoutState)
    company_logo_path: str | None = None
    watermark_text: str | None = None

    def snapshot(self) -> dict[str, Any]:
        """Return the current values as flat ``ReportSpec`` fields.

        Sequences are copied into tuples, so the result shares no mutable
        state with the accumulator.
        """
        return {
            "title": self.title,
            "format": self.format,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "include_header": self.header.enabled,
            "header_text": self.header.text,
            "include_footer": self.footer.enabled,
            "footer_text": self.footer.text,
            "include_charts": self.charts.enabled,
            "chart_type": self.charts.chart_type,
            "include_summary": self.include_summary,
            "columns": tuple(self.columns),
            "filters": tuple(self.filters),
            "sort_by": self.sort_by,
            "group_by": self.group_by,
            "include_totals": self.include_totals,
            "orientation": self.layout.orientation,
            "page_size": self.layout.page_size,
            "include_page_numbers": self.layout.page_numbers,
            "company_logo_path": self.company_logo_path,
            "watermark_text": self.watermark_text,
        }


__all__ = [
    "BuilderProtocol",
    "SectionState",
    "ChartState",
    "LayoutState",
    "ReportState",
]
