# business rules over the in-memory report collection
# everything here is pure: inputs are never mutated, new lists and reports are returned

from __future__ import annotations
import logging
from collections import Counter
from typing import Callable, Iterable, List, Optional, Tuple
from .models import EmptyStatistics, Report, ReportStatistics, Statistics, Unit, average

logger = logging.getLogger(__name__)

Predicate = Callable[[Report], bool]


# unit conversion, rounding is python's round() (half to even)
def celsius_to_fahrenheit(celsius: int) -> int:
    return round(celsius * 9 / 5 + 32)


def fahrenheit_to_celsius(fahrenheit: int) -> int:
    return round((fahrenheit - 32) * 5 / 9)


_CONVERSIONS = {
    (Unit.CELSIUS, Unit.FAHRENHEIT): celsius_to_fahrenheit,
    (Unit.FAHRENHEIT, Unit.CELSIUS): fahrenheit_to_celsius,
}


def convert_unit(report: Report, target: Unit) -> Report:
    # same report back when already in target or when the pairing is unknown
    convert = _CONVERSIONS.get((report.unit, target))
    if convert is None:
        return report
    return Report(
        date=report.date,
        location=report.location,
        temperature=convert(report.temperature),
        condition=report.condition,
        unit=target,
    )


def transform_reports(reports: Iterable[Report], target: Unit) -> List[Report]:
    transformed = [convert_unit(r, target) for r in reports]
    logger.info("Converted %d reports to %s", len(transformed), target.label)
    return transformed


# statistics
def temperatures(reports: Iterable[Report]) -> List[int]:
    return [r.temperature for r in reports]


def find_extremes(reports: List[Report]) -> Tuple[Optional[Report], Optional[Report]]:
    # (hottest, coldest); max() and min() keep the first report on ties
    if not reports:
        return None, None
    hottest = max(reports, key=lambda r: r.temperature)
    coldest = min(reports, key=lambda r: r.temperature)
    return hottest, coldest


def unique_conditions(reports: Iterable[Report]) -> List[str]:
    return sorted({r.condition for r in reports})


def dominant_unit(reports: Iterable[Report]) -> Unit:
    # Counter keeps first-seen order, and most_common() is stable, so ties go to the first unit seen
    counts = Counter(r.unit for r in reports)
    if not counts:
        return Unit.CELSIUS
    unit, _ = counts.most_common(1)[0]
    return unit


def compute_statistics(reports: List[Report]) -> Statistics:
    if not reports:
        return EmptyStatistics()

    hottest, coldest = find_extremes(reports)
    conditions = unique_conditions(reports)
    return ReportStatistics(
        average=average(temperatures(reports)),
        hottest=hottest,
        coldest=coldest,
        unique_conditions=conditions,
        condition_count=len(conditions),
        dominant_unit=dominant_unit(reports),
    )


# filters, both compare raw values and keep the original order
def condition_predicate(target: str) -> Predicate:
    return lambda r: r.condition == target


def temperature_range_predicate(low: int, high: int) -> Predicate:
    return lambda r: low <= r.temperature <= high


def filter_reports(reports: Iterable[Report], predicate: Predicate) -> List[Report]:
    return [r for r in reports if predicate(r)]


def filter_by_condition(reports: Iterable[Report], target: str) -> List[Report]:
    return filter_reports(reports, condition_predicate(target))


def filter_by_temperature_range(reports: Iterable[Report], low: int, high: int) -> List[Report]:
    return filter_reports(reports, temperature_range_predicate(low, high))
