# value objects and the average helper shared by the service and the display

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class Unit(str, Enum):
    # the value is the symbol printed right after a temperature
    CELSIUS = "°C"
    FAHRENHEIT = "°F"

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Report:
    # immutable value object for a single observation, temperature is always in `unit`
    date: str
    location: str
    temperature: int
    condition: str
    unit: Unit = Unit.CELSIUS

    def formatted_temperature(self) -> str:
        return f"{self.temperature}{self.unit.value}"


@dataclass(frozen=True)
class EmptyStatistics:
    # returned instead of ReportStatistics when there is nothing to summarize
    pass


@dataclass(frozen=True)
class ReportStatistics:
    # output value object consumed by the statistics display
    average: float
    hottest: Report
    coldest: Report
    unique_conditions: List[str]
    condition_count: int
    dominant_unit: Unit


Statistics = Union[EmptyStatistics, ReportStatistics]


def average(values: List[int]) -> float:
    # simple average that returns 0 on empty input to avoid zero division
    return sum(values) / len(values) if values else 0
