# boundary for file input
# reading and parsing live here, so the rest of the code only deals with Report values

from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import List, Optional, Union
from .models import Report, Unit

logger = logging.getLogger(__name__)

# same acceptance as a strict integer parse: optional sign, digits, nothing else
INTEGER_RE = re.compile(r"[+-]?[0-9]+")

FIELD_COUNT = 4


class ReportParseError(ValueError):
    # single error type used to propagate clear messages from this layer
    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


def parse_int(text: str) -> int:
    if not INTEGER_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def strip_terminator(line: str) -> str:
    # drop one trailing \n or \r\n, nothing else
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def decode_line(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ReportParseError(f"line is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc


def parse_line(line: str) -> Report:
    # date,location,temperature,condition -> Report, fields are not trimmed
    fields = strip_terminator(line).split(",")
    if len(fields) != FIELD_COUNT:
        raise ReportParseError(f"expected {FIELD_COUNT} comma-separated fields, got {len(fields)}")

    date, location, temp, condition = fields
    try:
        temperature = parse_int(temp)
    except ValueError as exc:
        raise ReportParseError(f"temperature is not an integer: {temp!r}") from exc

    return Report(date=date, location=location, temperature=temperature,
                  condition=condition, unit=Unit.CELSIUS)


def load_reports(path: Union[str, Path], strict: bool = False) -> List[Report]:
    # a missing file is an empty collection, not an error
    path = Path(path)
    if not path.exists():
        logger.info("No report file at %s, starting with no reports", path)
        return []

    reports: List[Report] = []
    skipped = 0
    # read bytes and decode per line so one bad line cannot abort the whole load
    with path.open("rb") as fh:
        for number, raw in enumerate(fh, start=1):
            line = raw.decode("utf-8", errors="replace")
            try:
                reports.append(parse_line(decode_line(raw)))
            except ReportParseError as exc:
                if strict:
                    raise ReportParseError(
                        f"{path}:{number}: {exc}", line_number=number, line=strip_terminator(line)
                    ) from exc
                skipped += 1
                logger.warning("Skipping line %d of %s: %s", number, path, exc)

    logger.info("Loaded %d reports from %s (%d skipped)", len(reports), path, skipped)
    return reports
