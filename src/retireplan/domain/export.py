"""Export of projection results."""

import csv
import json
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

from retireplan.domain.entities import RetirementReport, SimulationDataPoint
from retireplan.domain.scoring import get_score_grade

SIMULATION_COLUMNS = ("age", "year", "assets", "income", "expense")


def export_simulation_csv(
    simulation: Sequence[SimulationDataPoint], csv_file_path: str
) -> int:
    """Write projection rows to a CSV file.

    Returns:
        Number of data rows written
    """
    path = Path(csv_file_path)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=SIMULATION_COLUMNS)
        writer.writeheader()
        for point in simulation:
            writer.writerow(asdict(point))
    return len(simulation)


def report_to_dict(report: RetirementReport) -> dict:
    """Convert a report into JSON-compatible primitives."""
    totals = report.totals
    return {
        "as_of": report.as_of.isoformat(),
        "assumptions": asdict(report.params),
        "monthly_totals": {
            "income": float(totals.income),
            "expense": float(totals.expense),
            "real_estate": float(totals.real_estate),
            "asset": float(totals.asset),
            "debt": float(totals.debt),
            "pension": float(totals.pension),
        },
        "net_worth": float(report.net_worth),
        "depletion_age": report.depletion_age,
        "scores": {
            name: {"score": value, "grade": get_score_grade(value).grade}
            for name, value in asdict(report.scores).items()
        },
        "simulation": [asdict(point) for point in report.simulation],
    }


def export_report_json(report: RetirementReport, indent: int = 2) -> str:
    """Serialize a report as a JSON string."""
    return json.dumps(report_to_dict(report), indent=indent)
