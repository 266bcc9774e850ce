"""
Sales Report

Staged, validating construction of immutable sales report specifications,
with preset configurations and text/HTML rendering.
"""

from loguru import logger

from .config import (
    # Enums
    ReportFormat,
    Orientation,
    PageSize,
    # Result
    ReportSpec,
)

from .exceptions import (
    ReportSpecError,
    InvalidInput,
    MissingField,
    InvalidRange,
    StageError,
)

from .builders import (
    ReportSpecBuilder,
    TitleStage,
    FormatStage,
    PeriodStage,
    OptionalStage,
)

from .presets import (
    standard_pdf,
    standard_spreadsheet,
)

from .settings import Settings, get_settings

from .reporting import ReportRenderer

# Library code stays quiet until the application opts in
logger.disable("sales_report")

__version__ = "0.1.0"

__all__ = [
    # Enums
    "ReportFormat",
    "Orientation",
    "PageSize",
    # Result
    "ReportSpec",
    # Errors
    "ReportSpecError",
    "InvalidInput",
    "MissingField",
    "InvalidRange",
    "StageError",
    # Builders
    "ReportSpecBuilder",
    "TitleStage",
    "FormatStage",
    "PeriodStage",
    "OptionalStage",
    # Presets
    "standard_pdf",
    "standard_spreadsheet",
    # Settings
    "Settings",
    "get_settings",
    # Rendering
    "ReportRenderer",
]
