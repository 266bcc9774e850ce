"""
Sales Report Examples
=====================

Builds three reports with the staged builder and presets, then renders
each one:

1. Monthly PDF from the standard PDF preset, with charts and branding
2. Quarterly spreadsheet grouped by region
3. Yearly PDF switched to landscape layout
"""

from datetime import date

from loguru import logger
logger.enable("sales_report")

from sales_report import (
    Orientation,
    PageSize,
    ReportRenderer,
    standard_pdf,
    standard_spreadsheet,
)


def main():
    renderer = ReportRenderer()

    monthly = (
        standard_pdf("Monthly Sales", date(2024, 1, 1), date(2024, 1, 31))
        .add_columns("Product", "Quantity", "Value")
        .add_filter("Status=Active")
        .with_charts("Bar")
        .with_summary()
        .group_by("Category")
        .with_totals()
        .with_company_logo("logo.png")
        .with_watermark("Confidential")
        .build()
    )
    renderer.generate(monthly)

    quarterly = (
        standard_spreadsheet("Quarterly Report", date(2024, 1, 1), date(2024, 3, 31))
        .add_columns("Seller", "Region", "Total")
        .with_charts("Line")
        .group_by("Region")
        .with_totals()
        .build()
    )
    renderer.generate(quarterly)

    yearly = (
        standard_pdf("Yearly Sales", date(2024, 1, 1), date(2024, 12, 31))
        .add_columns("Product", "Quantity", "Value")
        .with_charts("Pie")
        .with_totals()
        .layout(Orientation.LANDSCAPE, PageSize.A4)
        .build()
    )
    renderer.generate(yearly)


if __name__ == "__main__":
    main()
