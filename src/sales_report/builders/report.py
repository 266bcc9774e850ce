"""
Staged builder for ReportSpec objects.

Construction follows a fixed protocol: title, then format, then period,
then any number of optional calls in any order, then ``build()``. Each
mandatory step returns a narrower handle exposing only the next legal
operation, so out-of-order calls fail with ``AttributeError`` at runtime
and are flagged by type checkers. All handles of one construction share a
single ``ReportState``.
"""

from __future__ import annotations

import copy
from datetime import date, datetime
from enum import Enum
from typing import TypeVar

from loguru import logger

from ..config import Orientation, PageSize, ReportFormat, ReportSpec
from ..exceptions import InvalidInput, InvalidRange, MissingField, ReportSpecError, StageError
from .base import LayoutState, ReportState

E = TypeVar("E", bound=Enum)


def _is_blank(text: str | None) -> bool:
    return text is None or not str(text).strip()


def _coerce_enum(enum_cls: type[E], value: E | str, name: str) -> E:
    """Coerce a raw value to ``enum_cls``, raising InvalidInput if unknown."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidInput(f"Unknown {name} {value!r}; expected one of: {allowed}") from None


def _coerce_date(value: date | None, name: str) -> date | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidInput(f"{name} must be a date, got {type(value).__name__}")


class _MandatoryStage:
    """Single-use handle for one mandatory construction step."""

    _step: str = ""

    def __init__(self, state: ReportState) -> None:
        self._state = state
        self._consumed = False

    def _advance(self) -> None:
        if self._consumed:
            raise StageError(
                f"{self._step}() was already called on this handle; "
                "continue from the handle it returned"
            )
        self._consumed = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(consumed={self._consumed})"


class TitleStage(_MandatoryStage):
    """Initial stage: only the title can be set."""

    _step = "with_title"

    def with_title(self, title: str) -> FormatStage:
        """Set the report title.

        Parameters
        ----------
        title : str
            Non-blank title. Surrounding whitespace is trimmed.

        Returns
        -------
        FormatStage
            Handle for the next step.

        Raises
        ------
        InvalidInput
            If the title is empty or whitespace only.
        """
        if not isinstance(title, str) or not title.strip():
            raise InvalidInput("Title is required and must not be blank")
        self._advance()
        self._state.title = title.strip()
        logger.debug(f"Report title set to {self._state.title!r}")
        return FormatStage(self._state)


class FormatStage(_MandatoryStage):
    """Second stage: only the output format can be set."""

    _step = "with_format"

    def with_format(self, fmt: ReportFormat | str | None) -> PeriodStage:
        """Set the output format (``ReportFormat`` or its value, e.g. ``"pdf"``)."""
        value = None if fmt is None else _coerce_enum(ReportFormat, fmt, "format")
        self._advance()
        self._state.format = value
        logger.debug(f"Report format set to {value}")
        return PeriodStage(self._state)


class PeriodStage(_MandatoryStage):
    """Third stage: only the reporting period can be set."""

    _step = "for_period"

    def for_period(self, start: date | None, end: date | None) -> OptionalStage:
        """Set the inclusive reporting period.

        The range itself is checked by ``build()``. Datetimes are narrowed
        to their date.
        """
        start_date = _coerce_date(start, "start")
        end_date = _coerce_date(end, "end")
        self._advance()
        self._state.start_date = start_date
        self._state.end_date = end_date
        logger.debug(f"Report period set to {start_date} .. {end_date}")
        return OptionalStage(self._state)


class OptionalStage:
    """
    Final stage: optional configuration in any order, then ``build()``.

    Every method returns this same handle. Single-value options are
    overwritten by later calls; columns and filters are appended.

    Examples
    --------
    >>> spec = (ReportSpecBuilder.create()
    ...     .with_title("Monthly Sales")
    ...     .with_format(ReportFormat.PDF)
    ...     .for_period(date(2024, 1, 1), date(2024, 1, 31))
    ...     .add_columns("Product", "Qty", "Value")
    ...     .with_charts("Bar")
    ...     .build())
    """

    def __init__(self, state: ReportState) -> None:
        self._state = state

    @property
    def state(self) -> ReportState:
        """Copy of the accumulated state, for inspection."""
        return copy.deepcopy(self._state)

    # Header / footer / charts
    def with_header(self, text: str) -> OptionalStage:
        """Include a header with the given text."""
        self._state.header.enabled = True
        self._state.header.text = text
        return self

    def with_footer(self, text: str) -> OptionalStage:
        """Include a footer with the given text."""
        self._state.footer.enabled = True
        self._state.footer.text = text
        return self

    def with_charts(self, chart_type: str) -> OptionalStage:
        """Include charts of the given kind (e.g. ``"Bar"``)."""
        self._state.charts.enabled = True
        self._state.charts.chart_type = chart_type
        return self

    def with_summary(self) -> OptionalStage:
        self._state.include_summary = True
        return self

    # Columns and filters
    def add_column(self, name: str) -> OptionalStage:
        """Append one column; duplicates are kept."""
        self._state.columns.append(name)
        return self

    def add_columns(self, *names: str) -> OptionalStage:
        """Append columns in the given order."""
        self._state.columns.extend(names)
        return self

    def add_filter(self, expr: str) -> OptionalStage:
        """Append one filter expression (e.g. ``"Status=Active"``)."""
        self._state.filters.append(expr)
        return self

    def add_filters(self, *exprs: str) -> OptionalStage:
        """Append filter expressions in the given order."""
        self._state.filters.extend(exprs)
        return self

    # Ordering and aggregation
    def sort_by(self, field: str) -> OptionalStage:
        """Set the sort field, replacing any previous one."""
        if self._state.sort_by is not None:
            logger.debug(f"Replacing sort_by {self._state.sort_by!r} with {field!r}")
        self._state.sort_by = field
        return self

    def group_by(self, field: str) -> OptionalStage:
        """Set the grouping field, replacing any previous one."""
        if self._state.group_by is not None:
            logger.debug(f"Replacing group_by {self._state.group_by!r} with {field!r}")
        self._state.group_by = field
        return self

    def with_totals(self) -> OptionalStage:
        self._state.include_totals = True
        return self

    # Page layout and branding
    def layout(
        self,
        orientation: Orientation | str,
        page_size: PageSize | str,
        page_numbers: bool = False,
    ) -> OptionalStage:
        """Set orientation, page size and page numbering together.

        A later call replaces all three values; nothing is merged.
        """
        self._state.layout = LayoutState(
            orientation=_coerce_enum(Orientation, orientation, "orientation"),
            page_size=_coerce_enum(PageSize, page_size, "page size"),
            page_numbers=bool(page_numbers),
        )
        return self

    def with_company_logo(self, path: str) -> OptionalStage:
        """Set the company logo path."""
        self._state.company_logo_path = path
        return self

    def with_watermark(self, text: str) -> OptionalStage:
        """Set the watermark text."""
        self._state.watermark_text = text
        return self

    # Finalization
    def _validate(self) -> None:
        s = self._state
        if s.format is None:
            raise MissingField("format", "Format is required")
        if s.start_date is None or s.end_date is None:
            raise MissingField("period", "Both start and end dates are required")
        if s.start_date > s.end_date:
            raise InvalidRange(s.start_date, s.end_date)
        if not s.columns:
            raise MissingField("columns", "At least one column is required")
        if s.header.enabled and _is_blank(s.header.text):
            raise MissingField("headerText", "Header text is required when the header is enabled")
        if s.footer.enabled and _is_blank(s.footer.text):
            raise MissingField("footerText", "Footer text is required when the footer is enabled")
        if s.charts.enabled and _is_blank(s.charts.chart_type):
            raise MissingField("chartType", "Chart type is required when charts are enabled")

    def build(self) -> ReportSpec:
        """Validate the accumulated state and build the ReportSpec.

        The builder is left unchanged whether or not this succeeds, so the
        caller can fix a failure on this handle and call ``build()`` again.
        Each successful call returns an independent snapshot.

        Raises
        ------
        MissingField
            If format, period or columns are missing, or an enabled header,
            footer or chart has no text.
        InvalidRange
            If the period starts after it ends.
        """
        try:
            self._validate()
        except ReportSpecError as e:
            logger.debug(f"Rejected report {self._state.title!r}: {e}")
            raise

        spec = ReportSpec(**self._state.snapshot())
        logger.info(
            f"Built report {spec.title!r} ({spec.format.value}, "
            f"{len(spec.columns)} columns, {spec.period_days} days)"
        )
        return spec

    def __repr__(self) -> str:
        return f"OptionalStage(title={self._state.title!r})"


class ReportSpecBuilder:
    """
    Entry point for staged ReportSpec construction.

    Examples
    --------
    >>> spec = (ReportSpecBuilder.create()
    ...     .with_title("Quarterly Report")
    ...     .with_format("spreadsheet")
    ...     .for_period(date(2024, 1, 1), date(2024, 3, 31))
    ...     .add_columns("Seller", "Region", "Total")
    ...     .group_by("Region")
    ...     .with_totals()
    ...     .build())
    """

    @staticmethod
    def create() -> TitleStage:
        """Start a new construction with a fresh accumulator."""
        return TitleStage(ReportState())


__all__ = [
    "ReportSpecBuilder",
    "TitleStage",
    "FormatStage",
    "PeriodStage",
    "OptionalStage",
]
