# interactive loop: read a choice, call the service, print the result, repeat.
# input and output are plain callables (input/print by default) so tests can script a session.

from __future__ import annotations
import logging
from typing import Callable, List, Optional, Sequence
from . import service
from .display import format_statistics, format_table
from .loader import parse_int
from .models import Report, Unit

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

MAIN_MENU = (
    "",
    "=== Weather Report System ===",
    "1. View Weather Reports",
    "2. Transform Weather Report",
    "3. Filter Weather Reports",
    "4. Weather Statistics",
    "5. Save and Exit",
)
TRANSFORM_OPTIONS = ("", "Transformation Options:", "1. Convert Celsius to Fahrenheit",
                     "2. Convert Fahrenheit to Celsius")
FILTER_OPTIONS = ("", "Filter Options:", "1. Filter by Condition", "2. Filter by Temperature Range")

# transform sub-menu choice -> target unit
TRANSFORM_TARGETS = {"1": Unit.FAHRENHEIT, "2": Unit.CELSIUS}


def save_reports(reports: Sequence[Report]) -> None:
    # saving is optional and intentionally not implemented, nothing is written back
    logger.debug("Save requested for %d reports, nothing written", len(reports))


class ReportMenu:
    # the current collection is the only state and is passed from one iteration to the next

    def __init__(self, read: Reader = input, write: Writer = print,
                 save: Callable[[Sequence[Report]], None] = save_reports):
        self.read = read
        self.write = write
        self.save = save

    def _lines(self, lines: Sequence[str]) -> None:
        for line in lines:
            self.write(line)

    def prompt_int(self, prompt: str) -> int:
        # re-prompt until the answer parses as an integer
        while True:
            answer = self.read(prompt)
            try:
                return parse_int(answer)
            except ValueError:
                self.write("Invalid input. Please enter a valid integer.")

    def view(self, reports: List[Report]) -> List[Report]:
        if not reports:
            self._lines(["", "No weather reports available."])
        else:
            self._lines(format_table(reports))
        return reports

    def transform(self, reports: List[Report]) -> List[Report]:
        if not reports:
            self._lines(["", "No weather reports available to transform."])
            return reports

        self._lines(TRANSFORM_OPTIONS)
        target = TRANSFORM_TARGETS.get(self.read("Enter your choice (1-2): ").strip())
        if target is None:
            self.write("Invalid choice. No transformation applied.")
            return reports

        transformed = service.transform_reports(reports, target)
        self._lines(["", f"Temperatures converted to {target.label}."])
        self.view(transformed)
        return transformed

    def filter(self, reports: List[Report]) -> List[Report]:
        if not reports:
            self._lines(["", "No weather reports available to filter."])
            return reports

        unit = service.dominant_unit(reports).value
        self._lines(FILTER_OPTIONS)
        choice = self.read("Enter your choice (1-2): ").strip()

        if choice == "1":
            condition = self.read("Enter weather condition: ")
            matches = service.filter_by_condition(reports, condition)
            if not matches:
                self._lines(["", f"No reports found for condition: {condition}"])
            else:
                self._lines(["", f"Filtered reports for condition: {condition}"])
                self.view(matches)
        elif choice == "2":
            low = self.prompt_int(f"Enter minimum temperature({unit}): ")
            high = self.prompt_int(f"Enter maximum temperature({unit}): ")
            matches = service.filter_by_temperature_range(reports, low, high)
            if not matches:
                self._lines(["", f"No reports found in temperature range ({unit}): {low} to {high}"])
            else:
                self._lines(["", f"Filtered reports for temperature range ({unit}): {low} to {high}"])
                self.view(matches)
        else:
            self.write("Invalid choice.")
        return reports

    def statistics(self, reports: List[Report]) -> List[Report]:
        if not reports:
            self._lines(["", "No weather reports available."])
        else:
            self._lines(format_statistics(service.compute_statistics(reports)))
        return reports

    def handle(self, choice: str, reports: List[Report]) -> Optional[List[Report]]:
        # returns the next collection, or None when the user chose to exit
        handlers = {
            "1": self.view,
            "2": self.transform,
            "3": self.filter,
            "4": self.statistics,
        }
        if choice == "5":
            self.save(reports)
            self._lines(["", "Thank you for using the Weather Report System. Goodbye!"])
            return None

        handler = handlers.get(choice)
        if handler is None:
            self.write("Invalid option. Try again.")
            return reports
        return handler(reports)

    def run(self, reports: List[Report]) -> List[Report]:
        # loop until exit or end of input, returns the final collection
        current = list(reports)
        while True:
            self._lines(MAIN_MENU)
            try:
                choice = self.read("Enter your choice (1-5): ").strip()
                following = self.handle(choice, current)
            except EOFError:
                logger.info("End of input, leaving the menu")
                return current
            if following is None:
                return current
            current = following
