# pure formatting: reports and statistics in, printable lines out

from __future__ import annotations
from typing import Iterable, List
from .models import EmptyStatistics, Report, Statistics

TABLE_RULE = "+------------+------------------+-------------+-------------+"
ROW_FORMAT = "| {:<10} | {:<16} | {:<11} | {:<11} |"
EXTREME_FORMAT = "{:<10} | {:<16} | {:<11} | {:<11}"


def format_row(report: Report) -> str:
    return ROW_FORMAT.format(report.date, report.location,
                             report.formatted_temperature(), report.condition)


def format_table(reports: Iterable[Report]) -> List[str]:
    # sorted by date string, stable for equal dates
    ordered = sorted(reports, key=lambda r: r.date)
    lines = [
        "",
        f"Total Weather Reports: {len(ordered)}",
        "",
        TABLE_RULE,
        ROW_FORMAT.format("Date", "Location", "Temperature", "Condition"),
        TABLE_RULE,
    ]
    lines.extend(format_row(r) for r in ordered)
    lines.append(TABLE_RULE)
    return lines


def format_extreme(label: str, report: Report) -> str:
    return f"{label}: " + EXTREME_FORMAT.format(
        report.date, report.location, report.formatted_temperature(), report.condition
    )


def format_statistics(stats: Statistics) -> List[str]:
    if isinstance(stats, EmptyStatistics):
        return ["", "No weather reports available for statistics."]

    return [
        "",
        "=== Weather Statistics ===",
        f"Average Temperature: {stats.average:.2f}{stats.dominant_unit.value}",
        "",
        format_extreme("Hottest day", stats.hottest),
        format_extreme("Coldest day", stats.coldest),
        "",
        f"Unique Weather Conditions: {stats.condition_count}",
        "Conditions: " + ", ".join(stats.unique_conditions),
    ]
