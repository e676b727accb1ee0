"""Report-bound calculation facade.

Wraps the pure formulas with the enclosing report supplied implicitly, so
callers that render a whole report do not thread it through every call.
Nothing is cached: every call recomputes from the report it was built with.
"""

from __future__ import annotations

import logging
from typing import Optional

from roi_engine.engine import formulas, projection
from roi_engine.engine.result import ProjectionPoint, ReportSummary, ROIResult
from roi_engine.models import Operation, Report

logger = logging.getLogger(__name__)


class ROICalculator:
    """Stateless engine over a single report snapshot."""

    def __init__(self, report: Report) -> None:
        self.report = report

    def op_annual(self, op: Operation) -> float:
        return formulas.calculate_op_annual(op)

    def loc_annual(self, op: Operation) -> float:
        return formulas.calculate_loc_annual(op)

    def token_costs_annual(self, op: Operation, input_share: Optional[float] = None) -> float:
        return formulas.calculate_token_costs_annual(op, input_share=input_share)

    def annual_cost(self, op: Operation) -> float:
        return formulas.calculate_annual_cost(op)

    def future_cost(self, op: Operation) -> float:
        return formulas.calculate_future_cost(op)

    def transformation_investment(self, op: Operation) -> float:
        return formulas.calculate_transformation_investment(op, self.report)

    def roi(self, op: Operation) -> ROIResult:
        return formulas.calculate_roi(op, self.report)

    def operation_results(self) -> list[tuple[Operation, ROIResult]]:
        """ROI for every operation, in display order."""
        results = [(op, self.roi(op)) for op in self.report.operations]
        logger.debug(
            "Calculated ROI for %d operations in report %s",
            len(results),
            self.report.report_number,
        )
        return results

    def summary(self) -> ReportSummary:
        return formulas.calculate_total_summary(self.report)

    def payback_months(self) -> float:
        return projection.calculate_summary_payback_months(self.report)

    def projection(self, months: int = projection.DEFAULT_PROJECTION_MONTHS) -> list[ProjectionPoint]:
        return projection.project_cumulative_savings(self.report, months=months)
