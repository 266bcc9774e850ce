"""
Tests for the report renderer.

Tests cover:
- Plain-text preview layout
- HTML fragment content and escaping
- Format dispatch
- Writing to a stream
"""

import io
from datetime import date

import pytest

from sales_report import (
    Orientation,
    PageSize,
    ReportFormat,
    ReportRenderer,
    ReportSpecBuilder,
    Settings,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def renderer():
    return ReportRenderer(Settings())


@pytest.fixture
def full_spec():
    return (
        ReportSpecBuilder.create()
        .with_title("Monthly Sales")
        .with_format(ReportFormat.PDF)
        .for_period(date(2024, 1, 1), date(2024, 1, 31))
        .with_header("Sales Report")
        .with_footer("Confidential")
        .add_columns("Product", "Quantity", "Value")
        .add_filter("Status=Active")
        .with_charts("Bar")
        .with_summary()
        .group_by("Category")
        .with_totals()
        .layout(Orientation.PORTRAIT, PageSize.A4, page_numbers=True)
        .with_company_logo("logo.png")
        .with_watermark("Confidential")
        .build()
    )


@pytest.fixture
def minimal_spec():
    return (
        ReportSpecBuilder.create()
        .with_title("Plain")
        .with_format(ReportFormat.SPREADSHEET)
        .for_period(date(2024, 1, 1), date(2024, 3, 31))
        .add_column("Total")
        .build()
    )


# =============================================================================
# Text rendering
# =============================================================================


class TestRenderText:
    def test_full_report(self, renderer, full_spec):
        text = renderer.render_text(full_spec)

        assert text.splitlines() == [
            "",
            "=== Generating Report: Monthly Sales ===",
            "Format: PDF",
            "Period: 01/01/2024 to 31/01/2024",
            "Header: Sales Report",
            "Chart: Bar",
            "Columns: Product, Quantity, Value",
            "Filters: Status=Active",
            "Grouped by: Category",
            "Footer: Confidential",
            "Report generated successfully!",
        ]

    def test_optional_lines_omitted(self, renderer, minimal_spec):
        text = renderer.render_text(minimal_spec)

        assert "Header:" not in text
        assert "Chart:" not in text
        assert "Filters:" not in text
        assert "Grouped by:" not in text
        assert "Footer:" not in text
        assert "Columns: Total" in text

    def test_date_format_from_settings(self, minimal_spec):
        renderer = ReportRenderer(Settings(date_format="%Y-%m-%d"))

        assert "Period: 2024-01-01 to 2024-03-31" in renderer.render_text(minimal_spec)


# =============================================================================
# HTML rendering
# =============================================================================


class TestRenderHtml:
    def test_contains_sections(self, renderer, full_spec):
        fragment = renderer.render_html(full_spec)

        assert fragment.startswith('<section class="sales-report">')
        assert fragment.endswith("</section>")
        assert "<h1>Monthly Sales</h1>" in fragment
        assert "<th>Product</th><th>Quantity</th><th>Value</th>" in fragment
        assert '<header class="report-header">Sales Report</header>' in fragment
        assert '<footer class="report-footer">Confidential</footer>' in fragment
        assert "Layout: portrait, A4, numbered pages" in fragment
        assert "Summary included" in fragment
        assert "Totals included" in fragment
        assert 'src="logo.png"' in fragment

    def test_user_text_escaped(self, renderer):
        spec = (
            ReportSpecBuilder.create()
            .with_title("<script>alert(1)</script>")
            .with_format("html")
            .for_period(date(2024, 1, 1), date(2024, 1, 2))
            .add_column("A & B")
            .build()
        )

        fragment = renderer.render_html(spec)

        assert "<script>" not in fragment
        assert "&lt;script&gt;" in fragment
        assert "<th>A &amp; B</th>" in fragment

    def test_minimal_has_no_details(self, renderer, minimal_spec):
        fragment = renderer.render_html(minimal_spec)

        assert "<ul" not in fragment
        assert "<header" not in fragment


# =============================================================================
# Dispatch and output
# =============================================================================


class TestRenderDispatch:
    def test_html_format_renders_html(self, renderer):
        spec = (
            ReportSpecBuilder.create()
            .with_title("Web")
            .with_format(ReportFormat.HTML)
            .for_period(date(2024, 1, 1), date(2024, 1, 2))
            .add_column("A")
            .build()
        )

        assert renderer.render(spec).startswith("<section")

    def test_other_formats_render_text(self, renderer, full_spec, minimal_spec):
        assert renderer.render(full_spec) == renderer.render_text(full_spec)
        assert renderer.render(minimal_spec) == renderer.render_text(minimal_spec)

    def test_generate_writes_to_stream(self, renderer, full_spec):
        buffer = io.StringIO()

        renderer.generate(full_spec, file=buffer)

        assert buffer.getvalue() == renderer.render_text(full_spec)

    def test_generate_defaults_to_stdout(self, renderer, minimal_spec, capsys):
        renderer.generate(minimal_spec)

        assert "=== Generating Report: Plain ===" in capsys.readouterr().out

    def test_render_does_not_modify_spec(self, renderer, full_spec):
        before = full_spec.model_dump()

        renderer.render_text(full_spec)
        renderer.render_html(full_spec)

        assert full_spec.model_dump() == before
