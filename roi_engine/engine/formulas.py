"""Cost and ROI formulas for automating manual operations.

Each function is a pure calculation with no side effects. All monetary
values are in the report currency. An extension flagged as enabled whose
sub-record is missing contributes zero instead of failing, so every function
here is total over well-typed input.
"""

from __future__ import annotations

from typing import Optional

from roi_engine.engine.result import ReportSummary, ROIResult
from roi_engine.models import FrequencyUnit, Operation, Report, TimeUnit

WORKING_DAYS_PER_YEAR = 252
EMPLOYER_COST_MULTIPLIER = 1.204
PAYBACK_CAP_MONTHS = 99.0
TOKENS_PER_PRICE_UNIT = 1_000_000

_EXECUTIONS_PER_YEAR = {
    FrequencyUnit.DAY: WORKING_DAYS_PER_YEAR,
    FrequencyUnit.WEEK: 52,
    FrequencyUnit.MONTH: 12,
    FrequencyUnit.YEAR: 1,
}


def calculate_op_annual(op: Operation) -> float:
    """Annual labor cost = executions/yr x hours/execution x rate x headcount [x 1.204]"""
    executions_per_year = op.frequency * _EXECUTIONS_PER_YEAR[op.frequency_unit]
    hours_per_execution = op.time_per_execution
    if op.time_unit == TimeUnit.MINUTES:
        hours_per_execution = op.time_per_execution / 60

    cost = executions_per_year * hours_per_execution * op.avg_hourly_rate * op.employee_count
    if op.employer_cost_enabled:
        cost *= EMPLOYER_COST_MULTIPLIER
    return cost


def calculate_loc_annual(op: Operation) -> float:
    """LOC = sum(events_per_month x 12 x avg_cost_per_event)"""
    if not op.loc_enabled or not op.loc_actions:
        return 0.0
    return sum(a.events_per_month * 12 * a.avg_cost_per_event for a in op.loc_actions)


def calculate_token_costs_annual(op: Operation, input_share: Optional[float] = None) -> float:
    """Annual AI inference spend.

    Tokens are split between input and output pricing using ``input_share``
    (falls back to the record's ``input_token_share``, 0.7 by default).
    """
    tc = op.token_costs
    if not op.token_costs_enabled or tc is None:
        return 0.0
    share = tc.input_token_share if input_share is None else input_share

    total_tokens = tc.monthly_api_calls * 12 * tc.avg_tokens_per_call
    input_tokens = total_tokens * share
    output_tokens = total_tokens * (1 - share)
    input_cost = input_tokens / TOKENS_PER_PRICE_UNIT * tc.input_price_per_m_token
    output_cost = output_tokens / TOKENS_PER_PRICE_UNIT * tc.output_price_per_m_token
    return input_cost + output_cost


def calculate_annual_cost(op: Operation) -> float:
    """Current-state baseline: labor + LOC + tokens."""
    return calculate_op_annual(op) + calculate_loc_annual(op) + calculate_token_costs_annual(op)


def calculate_hiring_annual(op: Operation) -> float:
    """Recurring cost of new hires = (gross + employer gross) x 12 x count"""
    h = op.hiring
    if not op.hiring_enabled or h is None:
        return 0.0
    employer = h.employee_gross * EMPLOYER_COST_MULTIPLIER if h.use_standard_employer_cost else h.employer_gross
    return (h.employee_gross + employer) * 12 * h.count


def calculate_hiring_investment(op: Operation) -> float:
    """One-time hiring costs: recruitment, onboarding, new-hire errors, bad hires."""
    h = op.hiring
    if not op.hiring_enabled or h is None:
        return 0.0
    return (
        h.recruitment_cost
        + h.onboarding_cost
        + h.new_employee_errors_cost
        + h.bad_recruitment_cost
    )


def calculate_future_cost(op: Operation) -> float:
    """Post-automation annual cost.

    Efficiency gain removes labor and LOC cost but not token cost: inference
    keeps being billed after the process is automated, so it carries over
    unchanged.
    """
    remaining = 1 - op.efficiency_gain
    labor_future = calculate_op_annual(op) * remaining
    loc_future = calculate_loc_annual(op) * remaining
    return (
        labor_future
        + loc_future
        + calculate_token_costs_annual(op)
        + calculate_hiring_annual(op)
    )


def calculate_transformation_investment(op: Operation, report: Report) -> float:
    """Automation investment attributed to ``op``.

    With an explicit report-level ``est_transformation_cost`` the total is
    split in proportion to each operation's labor cost (a zero total gives this
    operation the whole amount). Otherwise it is a fixed fraction of the
    operation's own labor cost.
    """
    settings = report.settings
    op_annual = calculate_op_annual(op)

    if settings.est_transformation_cost > 0:
        total_opex = sum(calculate_op_annual(o) for o in report.operations)
        share = op_annual / total_opex if total_opex > 0 else 1.0
        return settings.est_transformation_cost * share
    return op_annual * settings.transformation_cost_factor


def _roi_percent(value: float, investment: float) -> float:
    if investment <= 0:
        return 0.0
    return value / investment * 100


def calculate_payback_months(investment: float, annual_savings: float) -> float:
    """Months until savings cover the investment, within [0, 99]; 99 means never."""
    if annual_savings <= 0:
        return PAYBACK_CAP_MONTHS
    months = investment / (annual_savings / 12)
    return min(max(months, 0.0), PAYBACK_CAP_MONTHS)


def calculate_roi(op: Operation, report: Report) -> ROIResult:
    annual_savings = calculate_annual_cost(op) - calculate_future_cost(op)
    total_investment = calculate_hiring_investment(op) + calculate_transformation_investment(op, report)

    roi_value_1y = annual_savings - total_investment
    roi_value_3y = annual_savings * 3 - total_investment

    return ROIResult(
        roi_percent_1y=_roi_percent(roi_value_1y, total_investment),
        roi_percent_3y=_roi_percent(roi_value_3y, total_investment),
        roi_value_1y=roi_value_1y,
        roi_value_3y=roi_value_3y,
        payback_months=calculate_payback_months(total_investment, annual_savings),
        total_investment=total_investment,
    )


def calculate_total_summary(report: Report) -> ReportSummary:
    """Fold the per-operation formulas over the whole report.

    Investment here is transformation investment only; one-time hiring costs
    stay in the per-operation ROI.
    """
    ops = report.operations
    current_cost = sum(calculate_annual_cost(op) for op in ops)
    future_cost = sum(calculate_future_cost(op) for op in ops)
    savings = current_cost - future_cost
    investment = sum(calculate_transformation_investment(op, report) for op in ops)

    return ReportSummary(
        current_cost=current_cost,
        future_cost=future_cost,
        savings=savings,
        investment=investment,
        roi_1y=_roi_percent(savings - investment, investment),
        roi_3y=_roi_percent(savings * 3 - investment, investment),
    )
