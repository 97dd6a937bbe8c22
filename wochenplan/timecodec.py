"""Conversion between raw spreadsheet time cells and 12-hour display strings."""

import datetime
import math
import re
from dataclasses import dataclass
from typing import Optional, Union

MINUTES_PER_DAY = 24 * 60

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})(?:\s*([AaPp])\.?[Mm]\.?)?$")
_DISPLAY_RE = re.compile(r"^(\d{1,2}):(\d{2}) (AM|PM)$")


@dataclass(frozen=True)
class ClockTime:
    """A cell that already carries hour and minute (time, datetime, 'HH:MM')."""
    hour: int
    minute: int

    def hours(self) -> float:
        return self.hour + self.minute / 60.0


@dataclass(frozen=True)
class DayFraction:
    """A numeric cell holding a fraction of a day (0.5 = 12:00)."""
    value: float

    def hours(self) -> float:
        # The integer part of a serial date-time is the date, not the time.
        return (self.value % 1.0) * 24.0


RawTime = Union[ClockTime, DayFraction]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _parse_clock_string(text: str) -> Optional[ClockTime]:
    match = _CLOCK_RE.match(text.strip())
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    period = match.group(3)
    if period:
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12
        if period.upper() == "P":
            hour += 12
    if hour > 23 or minute > 59:
        return None
    return ClockTime(hour, minute)


def classify(raw) -> Optional[RawTime]:
    """Resolve a raw cell value into one of the two time encodings.

    openpyxl hands back datetime.time for h:mm cells, datetime.datetime for
    full date-time cells, datetime.timedelta for [h]:mm cells and plain
    floats for cells without a time number format.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, datetime.datetime):
        return ClockTime(raw.hour, raw.minute)
    if isinstance(raw, datetime.time):
        return ClockTime(raw.hour, raw.minute)
    if isinstance(raw, datetime.timedelta):
        return DayFraction(raw.total_seconds() / 86400.0)
    if isinstance(raw, (int, float)):
        if math.isnan(raw) or math.isinf(raw):
            return None
        return DayFraction(float(raw))
    if isinstance(raw, str):
        return _parse_clock_string(raw)
    return None


def format_display(hour: int, minute: int) -> str:
    period = "AM" if hour < 12 else "PM"
    if hour == 0:
        display_hour = 12
    elif hour > 12:
        display_hour = hour - 12
    else:
        display_hour = hour
    return f"{display_hour}:{minute:02d} {period}"


def decode(raw) -> Optional[str]:
    """Convert a raw cell value to 'H:MM AM/PM'.

    Returns None for empty cells (None, blank strings, 0) and for values
    that are neither a time nor a day fraction. Callers treat None as
    "no time recorded".
    """
    if not raw or (isinstance(raw, str) and not raw.strip()):
        return None

    value = classify(raw)
    if value is None:
        return None

    hours = value.hours()
    hour = int(math.floor(hours))
    minute = _round_half_up((hours - hour) * 60)
    if minute == 60:
        hour += 1
        minute = 0
    hour %= 24

    return format_display(hour, minute)


def to_minutes(display: str) -> int:
    """Minutes since midnight for a decoded display string. 12:00 AM is 0."""
    match = _DISPLAY_RE.match(display.strip()) if display else None
    if not match:
        raise ValueError(f"Invalid display time: {display!r}")

    hour, minute, period = int(match.group(1)), int(match.group(2)), match.group(3)
    if not 1 <= hour <= 12 or minute > 59:
        raise ValueError(f"Invalid display time: {display!r}")

    total = (hour % 12) * 60 + minute
    if period == "PM":
        total += 12 * 60
    return total
