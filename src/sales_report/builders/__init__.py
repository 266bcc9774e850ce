"""
Builder classes for report specifications.

Provides a staged fluent API for constructing ReportSpec objects.

This subpackage is organized as:
- base: Builder protocol and the mutable accumulator
- report: ReportSpecBuilder and its stage handles

All public builders are re-exported from this module for convenience.
"""

from __future__ import annotations

# Base utilities
from .base import (
    BuilderProtocol,
    ReportState,
)

# Staged report builder
from .report import (
    ReportSpecBuilder,
    TitleStage,
    FormatStage,
    PeriodStage,
    OptionalStage,
)


__all__ = [
    # Base utilities
    "BuilderProtocol",
    "ReportState",
    # Report builder
    "ReportSpecBuilder",
    "TitleStage",
    "FormatStage",
    "PeriodStage",
    "OptionalStage",
]
