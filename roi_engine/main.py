"""CLI entry point: recompute ROI for a stored report.

Usage:
    python -m roi_engine.main --report data/report.json
    python -m roi_engine.main --report .roi_data/vantage-roi-calculator.json --output roi.json
    python -m roi_engine.main --report data/report.json --months 24
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

from roi_engine.config import get_settings
from roi_engine.engine import ROICalculator, format_compact
from roi_engine.models import Report, ROIState

logger = logging.getLogger(__name__)


def read_report(path: Path) -> Report:
    """Accept a bare report, a store state or a persisted ``{"state": ...}`` file."""
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    if isinstance(raw, dict) and isinstance(raw.get("state"), dict):
        raw = raw["state"]
    if isinstance(raw, dict) and "report" in raw:
        return ROIState.model_validate(raw).report
    return Report.model_validate(raw)


def build_export(report: Report, months: int) -> dict[str, Any]:
    calculator = ROICalculator(report)
    return {
        "report": report.to_document(),
        "operations": [
            {
                "id": op.id,
                "name": op.name,
                "annual_cost": calculator.annual_cost(op),
                "future_cost": calculator.future_cost(op),
                "investment": calculator.transformation_investment(op),
                "roi": asdict(result),
            }
            for op, result in calculator.operation_results()
        ],
        "summary": asdict(calculator.summary()),
        "payback_months": calculator.payback_months(),
        "projection": [asdict(p) for p in calculator.projection(months)],
    }


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="ROI Engine: recompute report projections")
    parser.add_argument(
        "--report",
        type=str,
        required=True,
        help="Report JSON (bare report, store state or persisted namespace file)",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Output JSON file path",
    )
    parser.add_argument(
        "--months",
        type=int,
        default=36,
        help="Projection horizon in months (default 36)",
    )

    args = parser.parse_args(argv)
    if args.months < 0:
        parser.error("--months cannot be negative")

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    report = read_report(Path(args.report))
    export = build_export(report, args.months)
    currency = report.currency.value

    logger.info("=== ROI Report %s: %s ===", report.report_number, report.client_name or "-")
    for entry in export["operations"]:
        roi = entry["roi"]
        logger.info(
            "  %s: cost=%s -> %s %s, ROI 1Y=%.0f%%, 3Y=%.0f%%, payback=%.1f mo",
            entry["name"],
            format_compact(entry["annual_cost"]),
            format_compact(entry["future_cost"]),
            currency,
            roi["roi_percent_1y"],
            roi["roi_percent_3y"],
            roi["payback_months"],
        )

    summary = export["summary"]
    logger.info(
        "Total: current=%s, future=%s, savings=%s, investment=%s %s",
        format_compact(summary["current_cost"]),
        format_compact(summary["future_cost"]),
        format_compact(summary["savings"]),
        format_compact(summary["investment"]),
        currency,
    )
    logger.info(
        "ROI 1Y=%.0f%%, 3Y=%.0f%%, payback=%.1f months",
        summary["roi_1y"],
        summary["roi_3y"],
        export["payback_months"],
    )

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(export, f, ensure_ascii=False, indent=2, default=str)
        logger.info("Output written to %s", args.output)


if __name__ == "__main__":
    main()
