"""Immutable derived values produced by the engine. Never persisted."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ROIResult:
    """Return on investment for a single operation."""

    roi_percent_1y: float
    roi_percent_3y: float
    roi_value_1y: float
    roi_value_3y: float
    payback_months: float
    total_investment: float


@dataclass(frozen=True)
class ReportSummary:
    """Costs and ROI folded over every operation in a report."""

    current_cost: float
    future_cost: float
    savings: float
    investment: float
    roi_1y: float
    roi_3y: float


@dataclass(frozen=True)
class ProjectionPoint:
    """Single month in the cumulative savings projection."""

    month: int
    label: str
    savings: int
    net: int
    investment: int
