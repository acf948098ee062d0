# drive the menu with scripted answers and capture everything it writes

from typing import List
import pytest
from weatherreport.display import format_row
from weatherreport.menu import ReportMenu, save_reports
from weatherreport.models import Report, Unit

REPORTS = [
    Report("2024-01-03", "Montreal", -5, "Snow"),
    Report("2024-01-01", "Toronto", 2, "Cloudy"),
    Report("2024-01-02", "Vancouver", 8, "Rain"),
]


class Session:
    # answers are handed out in order, running out behaves like EOF on stdin
    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.output: List[str] = []
        self.saved = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def menu(self) -> ReportMenu:
        return ReportMenu(read=self.read, write=self.output.append, save=self.saved.append)

    def run(self, reports=REPORTS):
        return self.menu().run(reports)


def test_exit_saves_and_says_goodbye():
    session = Session("5")
    final = session.run()
    assert final == REPORTS
    assert session.saved == [REPORTS]
    assert session.output[-1] == "Thank you for using the Weather Report System. Goodbye!"
    assert "=== Weather Report System ===" in session.output


def test_end_of_input_leaves_loop_without_saving():
    session = Session()
    assert session.run() == REPORTS
    assert session.saved == []


def test_invalid_option_redisplays_menu():
    session = Session("9", "abc", "5")
    assert session.run() == REPORTS
    assert session.output.count("Invalid option. Try again.") == 2
    assert session.output.count("=== Weather Report System ===") == 3


def test_view_prints_sorted_table():
    session = Session("1", "5")
    session.run()
    assert "Total Weather Reports: 3" in session.output
    rows = [line for line in session.output if line.startswith("| 2024")]
    assert rows == [format_row(REPORTS[1]), format_row(REPORTS[2]), format_row(REPORTS[0])]


def test_view_empty():
    session = Session("1", "5")
    session.run([])
    assert "No weather reports available." in session.output


def test_transform_replaces_collection():
    session = Session("2", "1", "4", "5")
    final = session.run()
    assert [r.temperature for r in final] == [23, 36, 46]
    assert all(r.unit is Unit.FAHRENHEIT for r in final)
    assert "Temperatures converted to Fahrenheit." in session.output
    # statistics after the transform report the new unit
    assert "Average Temperature: 35.00°F" in session.output
    # the caller's list is not touched
    assert REPORTS[0].temperature == -5


def test_transform_back_to_celsius():
    session = Session("2", "1", "2", "2", "5")
    final = session.run()
    assert "Temperatures converted to Celsius." in session.output
    assert [r.temperature for r in final] == [-5, 2, 8]


def test_transform_invalid_choice_keeps_collection():
    session = Session("2", "3", "5")
    assert session.run() == REPORTS
    assert "Invalid choice. No transformation applied." in session.output


def test_transform_empty():
    session = Session("2", "5")
    assert session.run([]) == []
    assert "No weather reports available to transform." in session.output


def test_filter_by_condition():
    session = Session("3", "1", "Rain", "5")
    session.run()
    assert "Filtered reports for condition: Rain" in session.output
    assert format_row(REPORTS[2]) in session.output
    assert format_row(REPORTS[0]) not in session.output


def test_filter_by_condition_no_match():
    session = Session("3", "1", "Hail", "5")
    session.run()
    assert "No reports found for condition: Hail" in session.output


def test_filter_by_range_reprompts_on_bad_integer():
    session = Session("3", "2", "low", "-5", "2.5", "2", "5")
    final = session.run()
    assert final == REPORTS
    assert session.output.count("Invalid input. Please enter a valid integer.") == 2
    assert session.prompts.count("Enter minimum temperature(°C): ") == 2
    assert session.prompts.count("Enter maximum temperature(°C): ") == 2
    assert "Filtered reports for temperature range (°C): -5 to 2" in session.output
    assert format_row(REPORTS[2]) not in session.output


def test_filter_by_range_no_match():
    session = Session("3", "2", "30", "40", "5")
    session.run()
    assert "No reports found in temperature range (°C): 30 to 40" in session.output


def test_filter_invalid_choice_and_empty():
    session = Session("3", "7", "5")
    session.run()
    assert "Invalid choice." in session.output

    empty = Session("3", "5")
    empty.run([])
    assert "No weather reports available to filter." in empty.output


def test_statistics():
    session = Session("4", "5")
    session.run()
    assert "=== Weather Statistics ===" in session.output
    assert "Average Temperature: 1.67°C" in session.output
    assert "Unique Weather Conditions: 3" in session.output
    assert "Conditions: Cloudy, Rain, Snow" in session.output


def test_statistics_empty():
    session = Session("4", "5")
    session.run([])
    assert "No weather reports available." in session.output


def test_prompt_int_loops_instead_of_recursing():
    # many bad answers in a row must not hit the recursion limit
    session = Session(*(["x"] * 5000 + ["12"]))
    assert session.menu().prompt_int("n: ") == 12


def test_save_reports_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    save_reports(REPORTS)
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("choice", [" 4 ", "4\n"])
def test_menu_choice_ignores_surrounding_whitespace(choice):
    session = Session(choice, "5")
    session.run()
    assert "=== Weather Statistics ===" in session.output


def test_filter_by_range_uses_fahrenheit_after_transform():
    session = Session("2", "1", "3", "2", "20", "40", "5")
    final = session.run()
    assert "Enter minimum temperature(°F): " in session.prompts
    assert "Enter maximum temperature(°F): " in session.prompts
    assert "Filtered reports for temperature range (°F): 20 to 40" in session.output
    # 23°F and 36°F are in range, 46°F is not
    assert format_row(final[0]) in session.output
    assert format_row(final[1]) in session.output
    assert format_row(final[2]) not in session.output
