"""
Rendering of finished report specifications.

Produces a plain-text preview or a portable HTML fragment from a
ReportSpec. The spec is only read, never modified.
"""

from __future__ import annotations

import html
import sys
from typing import TextIO

from loguru import logger

from ..config import ReportFormat, ReportSpec
from ..settings import Settings, get_settings


class ReportRenderer:
    """
    Render ReportSpec objects as text or HTML.

    Parameters
    ----------
    settings : Settings, optional
        Rendering settings; defaults to the cached application settings.

    Examples
    --------
    >>> renderer = ReportRenderer()
    >>> print(renderer.render_text(spec))
    >>> fragment = renderer.render_html(spec)
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def _period(self, spec: ReportSpec) -> str:
        fmt = self.settings.date_format
        return f"{spec.start_date.strftime(fmt)} to {spec.end_date.strftime(fmt)}"

    def render_text(self, spec: ReportSpec) -> str:
        """
        Render a plain-text preview of the report.

        Parameters
        ----------
        spec : ReportSpec
            Finished report specification.

        Returns
        -------
        str
            Multi-line text, newline terminated.
        """
        lines = [
            "",
            f"=== Generating Report: {spec.title} ===",
            f"Format: {spec.format.value.upper()}",
            f"Period: {self._period(spec)}",
        ]

        if spec.include_header:
            lines.append(f"Header: {spec.header_text}")
        if spec.include_charts:
            lines.append(f"Chart: {spec.chart_type}")

        lines.append(f"Columns: {', '.join(spec.columns)}")

        if spec.filters:
            lines.append(f"Filters: {', '.join(spec.filters)}")
        if spec.group_by:
            lines.append(f"Grouped by: {spec.group_by}")
        if spec.include_footer:
            lines.append(f"Footer: {spec.footer_text}")

        lines.append("Report generated successfully!")
        return "\n".join(lines) + "\n"

    def render_html(self, spec: ReportSpec) -> str:
        """Render the report as a self-contained HTML fragment."""
        esc = html.escape
        css = esc(self.settings.html_css_class)

        parts = [f'<section class="{css}">']
        if spec.include_header:
            parts.append(f'<header class="report-header">{esc(spec.header_text or "")}</header>')
        parts.append(f"<h1>{esc(spec.title)}</h1>")
        parts.append(
            f'<div class="meta">Format: {esc(spec.format.value)} | '
            f"Period: {esc(self._period(spec))}</div>"
        )
        if spec.company_logo_path:
            parts.append(f'<img class="logo" src="{esc(spec.company_logo_path)}" alt="logo">')
        if spec.watermark_text:
            parts.append(f'<div class="watermark">{esc(spec.watermark_text)}</div>')

        header_cells = "".join(f"<th>{esc(c)}</th>" for c in spec.columns)
        parts.append(f"<table><thead><tr>{header_cells}</tr></thead></table>")

        details = []
        if spec.filters:
            details.append(f"<li>Filters: {esc(', '.join(spec.filters))}</li>")
        if spec.sort_by:
            details.append(f"<li>Sorted by: {esc(spec.sort_by)}</li>")
        if spec.group_by:
            details.append(f"<li>Grouped by: {esc(spec.group_by)}</li>")
        if spec.include_charts:
            details.append(f"<li>Chart: {esc(spec.chart_type or '')}</li>")
        if spec.include_summary:
            details.append("<li>Summary included</li>")
        if spec.include_totals:
            details.append("<li>Totals included</li>")
        if spec.has_layout:
            orientation = spec.orientation.value if spec.orientation else "default"
            page_size = spec.page_size.value if spec.page_size else "default"
            numbering = ", numbered pages" if spec.include_page_numbers else ""
            details.append(f"<li>Layout: {esc(orientation)}, {esc(page_size)}{numbering}</li>")
        if details:
            parts.append('<ul class="details">' + "".join(details) + "</ul>")

        if spec.include_footer:
            parts.append(f'<footer class="report-footer">{esc(spec.footer_text or "")}</footer>')
        parts.append("</section>")
        return "\n".join(parts)

    def render(self, spec: ReportSpec) -> str:
        """Render in the form matching the report's format."""
        if spec.format is ReportFormat.HTML:
            return self.render_html(spec)
        return self.render_text(spec)

    def generate(self, spec: ReportSpec, file: TextIO | None = None) -> None:
        """Write the text preview to ``file`` (stdout by default)."""
        out = file if file is not None else sys.stdout
        out.write(self.render_text(spec))
        logger.info(f"Generated report {spec.title!r}")


__all__ = ["ReportRenderer"]
