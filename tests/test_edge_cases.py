"""Edge case tests -- zero inputs, invariants across a spread of operations."""

import itertools
import math

import pytest

from roi_engine.engine.formulas import (
    calculate_annual_cost,
    calculate_future_cost,
    calculate_op_annual,
    calculate_roi,
    calculate_token_costs_annual,
    calculate_total_summary,
)
from roi_engine.models import LOCAction
from tests.conftest import make_op, make_report


def spread_of_operations():
    """Operations covering zero, small, large and extension-heavy inputs."""
    loc = [LOCAction(id="loc", name="Reklamacje", events_per_month=4, avg_cost_per_event=300)]
    ops = []
    for i, (freq, gain, tokens, hiring, use_loc) in enumerate(
        itertools.product([0, 1, 20], [0.0, 0.5, 1.0], [False, True], [False, True], [False, True])
    ):
        ops.append(
            make_op(
                f"op-{i}",
                frequency=freq,
                efficiency_gain=gain,
                token_costs_enabled=tokens,
                hiring_enabled=hiring,
                loc_enabled=use_loc,
                loc_actions=loc if use_loc else [],
            )
        )
    return ops


OPERATIONS = spread_of_operations()


class TestInvariants:
    @pytest.mark.parametrize("op", OPERATIONS, ids=lambda op: op.id)
    def test_annual_cost_covers_labor(self, op):
        assert calculate_annual_cost(op) >= calculate_op_annual(op)

    @pytest.mark.parametrize("op", OPERATIONS, ids=lambda op: op.id)
    def test_payback_within_bounds(self, op):
        for factor in (0, 0.15, 10):
            report = make_report(*OPERATIONS, transformation_cost_factor=factor)
            assert 0 <= calculate_roi(op, report).payback_months <= 99

    @pytest.mark.parametrize("op", OPERATIONS, ids=lambda op: op.id)
    def test_results_are_finite(self, op):
        report = make_report(op, est_transformation_cost=10_000)
        result = calculate_roi(op, report)
        for value in (
            result.roi_percent_1y,
            result.roi_percent_3y,
            result.roi_value_1y,
            result.roi_value_3y,
            result.payback_months,
            result.total_investment,
        ):
            assert math.isfinite(value)

    def test_full_efficiency_leaves_only_token_costs(self):
        for op in OPERATIONS:
            if op.efficiency_gain == 1.0 and not op.hiring_enabled:
                assert calculate_future_cost(op) == calculate_token_costs_annual(op)


class TestZeroInputs:
    def test_zero_frequency_is_free(self):
        op = make_op(frequency=0, employee_count=5, avg_hourly_rate=200)
        assert calculate_op_annual(op) == 0.0

    def test_zero_time_is_free(self):
        op = make_op(time_per_execution=0, employee_count=5, avg_hourly_rate=200)
        assert calculate_op_annual(op) == 0.0

    def test_zero_cost_operation_roi(self):
        op = make_op(frequency=0)
        result = calculate_roi(op, make_report(op))
        assert result.total_investment == 0
        assert result.roi_percent_1y == 0
        assert result.payback_months == 99

    def test_summary_of_empty_report(self, empty_report):
        summary = calculate_total_summary(empty_report)
        assert summary.current_cost == 0
        assert summary.future_cost == 0
        assert summary.savings == 0
        assert summary.investment == 0
        assert summary.roi_1y == 0
        assert summary.roi_3y == 0

    def test_summary_with_explicit_cost_and_no_labor(self):
        op = make_op(frequency=0)
        summary = calculate_total_summary(make_report(op, est_transformation_cost=10_000))
        # the only operation takes the whole explicit budget
        assert summary.investment == pytest.approx(10_000)
        assert summary.roi_1y == pytest.approx(-100)
