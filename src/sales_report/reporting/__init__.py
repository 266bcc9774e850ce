"""
Reporting module for finished report specifications.

Renders ReportSpec objects as text previews or HTML fragments.

Usage:
    from sales_report.reporting import ReportRenderer

    renderer = ReportRenderer()
    renderer.generate(spec)
"""

from .renderer import ReportRenderer

__all__ = ["ReportRenderer"]
