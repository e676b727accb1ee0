"""Report aggregate, report-wide settings and the persisted store state."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import Field

from .base import DocumentModel
from .enums import Currency, Language
from .operation import Operation


class TransformationBreakdown(DocumentModel):
    """People/process/tech split of the transformation budget (informational)."""

    people_percent: float = 30
    process_percent: float = 5
    tech_percent: float = 65


class GlobalSettings(DocumentModel):
    language: Language = Language.PL
    inflation_rate: float = 0.042
    start_date: str
    end_date: str
    est_transformation_cost: float = 0
    min_transformation_cost: float = 20_000
    implementation_duration_days: int = 275
    transformation_cost_factor: float = 0.15
    breakdown: TransformationBreakdown = Field(default_factory=TransformationBreakdown)


class Report(DocumentModel):
    """Root persisted aggregate: client info, settings and operations in display order."""

    id: str
    report_number: str
    report_date: str
    client_name: str = ""
    currency: Currency = Currency.PLN
    settings: GlobalSettings
    operations: list[Operation] = Field(default_factory=list)

    def find_operation(self, operation_id: str) -> Optional[Operation]:
        return next((op for op in self.operations if op.id == operation_id), None)


class ROIState(DocumentModel):
    """Everything the store persists under its namespace."""

    report: Report
    saved_reports: list[Report] = Field(default_factory=list)
    version: int = Field(default=0, ge=0)


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def default_settings(now: Optional[datetime] = None) -> GlobalSettings:
    """Settings a new report starts with: work begins in a week and runs 275 days."""
    now = now or _utcnow()
    return GlobalSettings(
        start_date=(now + timedelta(days=7)).isoformat(),
        end_date=(now + timedelta(days=282)).isoformat(),
    )


def format_report_number(year: int, sequence: int) -> str:
    return f"R-{year}-{sequence:03d}"


def new_report(report_id: str, sequence: int = 1, now: Optional[datetime] = None) -> Report:
    """Empty report with default settings, numbered ``R-<year>-<sequence>``."""
    now = now or _utcnow()
    return Report(
        id=report_id,
        report_number=format_report_number(now.year, sequence),
        report_date=now.date().isoformat(),
        settings=default_settings(now),
    )
