"""Report-level payback and cumulative savings projection."""

from __future__ import annotations

import math

from roi_engine.engine.formulas import PAYBACK_CAP_MONTHS, calculate_total_summary
from roi_engine.engine.result import ProjectionPoint
from roi_engine.models import Report

DEFAULT_PROJECTION_MONTHS = 36


def _round_half_up(value: float) -> int:
    """Nearest integer, halves towards +inf (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def calculate_summary_payback_months(report: Report) -> float:
    """Payback of the aggregate investment; 0 for an empty report, 99 if savings never cover it."""
    if not report.operations:
        return 0.0
    summary = calculate_total_summary(report)
    monthly_savings = summary.savings / 12
    if monthly_savings <= 0:
        return PAYBACK_CAP_MONTHS
    return min(max(summary.investment / monthly_savings, 0.0), PAYBACK_CAP_MONTHS)


def project_cumulative_savings(
    report: Report,
    months: int = DEFAULT_PROJECTION_MONTHS,
) -> list[ProjectionPoint]:
    """Cumulative savings vs. upfront investment for month 0..``months``."""
    if not report.operations:
        return []
    if months < 0:
        raise ValueError(f"months cannot be negative, got {months}")

    summary = calculate_total_summary(report)
    monthly_savings = summary.savings / 12
    investment = summary.investment

    points: list[ProjectionPoint] = []
    for month in range(months + 1):
        cumulative = monthly_savings * month
        points.append(
            ProjectionPoint(
                month=month,
                label="Start" if month == 0 else f"M{month}",
                savings=_round_half_up(cumulative),
                net=_round_half_up(cumulative - investment),
                investment=_round_half_up(investment),
            )
        )
    return points


def format_compact(value: float) -> str:
    """Short money label: 1.2M, 35K, 950."""
    if abs(value) >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if abs(value) >= 1_000:
        return f"{value / 1_000:.0f}K"
    return f"{value:.0f}"
