"""Shared test fixtures for the ROI engine test suite."""

from datetime import datetime, timezone
from itertools import count

import pytest

from roi_engine.models import Report, build_operation, new_report
from roi_engine.persistence import InMemoryAdapter
from roi_engine.store import ReportStore

FIXED_NOW = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)


def make_op(op_id="op-1", **overrides):
    """Default operation with a stable id and the given overrides."""
    return build_operation(op_id, overrides)


def make_report(*operations, **settings):
    """Report holding ``operations``; keyword args override settings."""
    report = new_report("report-1", sequence=1, now=FIXED_NOW)
    return report.model_copy(
        update={
            "operations": list(operations),
            "settings": report.settings.merged(settings),
        }
    )


@pytest.fixture
def invoicing_op():
    """Daily 30-minute task for two people at 50/h with employer cost."""
    return make_op(
        "op-invoicing",
        name="Fakturowanie",
        employee_count=2,
        avg_hourly_rate=50,
        employer_cost_enabled=True,
        frequency=1,
        frequency_unit="day",
        time_per_execution=30,
        time_unit="minutes",
        efficiency_gain=0.7,
    )


@pytest.fixture
def id_factory():
    seq = count(1)
    return lambda: f"id-{next(seq)}"


@pytest.fixture
def adapter():
    return InMemoryAdapter()


@pytest.fixture
def store(adapter, id_factory) -> ReportStore:
    return ReportStore(
        adapter=adapter,
        namespace="test-roi",
        clock=lambda: FIXED_NOW,
        id_factory=id_factory,
    )


@pytest.fixture
def empty_report() -> Report:
    return make_report()
