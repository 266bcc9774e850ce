"""
Pytest configuration and fixtures for sales_report tests.
"""

from datetime import date

import pytest

from sales_report import ReportFormat, ReportSpecBuilder
from sales_report.settings import get_settings


@pytest.fixture
def january():
    """Start and end of January 2024."""
    return date(2024, 1, 1), date(2024, 1, 31)


@pytest.fixture
def optional_stage(january):
    """Builder past all mandatory steps, with nothing optional set."""
    start, end = january
    return (
        ReportSpecBuilder.create()
        .with_title("Monthly Sales")
        .with_format(ReportFormat.PDF)
        .for_period(start, end)
    )


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env overrides in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
