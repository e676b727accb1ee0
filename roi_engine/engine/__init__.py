from .result import ProjectionPoint, ReportSummary, ROIResult
from .formulas import (
    EMPLOYER_COST_MULTIPLIER,
    PAYBACK_CAP_MONTHS,
    WORKING_DAYS_PER_YEAR,
    calculate_annual_cost,
    calculate_future_cost,
    calculate_hiring_annual,
    calculate_hiring_investment,
    calculate_loc_annual,
    calculate_op_annual,
    calculate_payback_months,
    calculate_roi,
    calculate_token_costs_annual,
    calculate_total_summary,
    calculate_transformation_investment,
)
from .projection import (
    DEFAULT_PROJECTION_MONTHS,
    calculate_summary_payback_months,
    format_compact,
    project_cumulative_savings,
)
from .calculator import ROICalculator

__all__ = [
    "ProjectionPoint",
    "ReportSummary",
    "ROIResult",
    "EMPLOYER_COST_MULTIPLIER",
    "PAYBACK_CAP_MONTHS",
    "WORKING_DAYS_PER_YEAR",
    "calculate_annual_cost",
    "calculate_future_cost",
    "calculate_hiring_annual",
    "calculate_hiring_investment",
    "calculate_loc_annual",
    "calculate_op_annual",
    "calculate_payback_months",
    "calculate_roi",
    "calculate_token_costs_annual",
    "calculate_total_summary",
    "calculate_transformation_investment",
    "DEFAULT_PROJECTION_MONTHS",
    "calculate_summary_payback_months",
    "format_compact",
    "project_cumulative_savings",
    "ROICalculator",
]
