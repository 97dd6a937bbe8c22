"""Alternating week types and week navigation."""

import datetime
from dataclasses import dataclass, replace
from typing import Tuple, Union

from .model import WEEK_TYPES

# First day of week type 1 of the first cycle
WEEK_ANCHOR = datetime.date(2025, 9, 13)

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

DateLike = Union[datetime.date, datetime.datetime]


def _as_date(value: DateLike) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def _week_number(day: DateLike, anchor: DateLike) -> int:
    # Floor division keeps the alternation consistent before the anchor
    elapsed_days = (_as_date(day) - _as_date(anchor)).days
    return elapsed_days // 7


def current_week_type(today: DateLike, anchor: DateLike = WEEK_ANCHOR) -> int:
    """1 or 2, alternating every 7 days from the anchor."""
    return (_week_number(today, anchor) % 2) + 1


def week_start(today: DateLike, anchor: DateLike = WEEK_ANCHOR) -> datetime.date:
    """Most recent cycle boundary at or before `today`."""
    return _as_date(anchor) + datetime.timedelta(days=7 * _week_number(today, anchor))


def week_bounds(start: DateLike) -> Tuple[datetime.date, datetime.date]:
    start = _as_date(start)
    return start, start + datetime.timedelta(days=6)


def is_current_week(start: DateLike, today: DateLike) -> bool:
    first, last = week_bounds(start)
    return first <= _as_date(today) <= last


def current_weekday_index(today: DateLike) -> int:
    """Monday=0 .. Friday=4, -1 on weekends."""
    weekday = _as_date(today).weekday()
    return weekday if weekday <= 4 else -1


def format_date_range(start: DateLike) -> str:
    """E.g. 'September 13, 2025 - September 19, 2025'."""
    first, last = week_bounds(start)
    return f"{_format_long(first)} - {_format_long(last)}"


def _format_long(day: datetime.date) -> str:
    return f"{MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"


@dataclass(frozen=True)
class WeekCursor:
    """The week currently on display."""
    week_start: datetime.date
    week_type: int


def jump_to_today(today: DateLike, anchor: DateLike = WEEK_ANCHOR) -> WeekCursor:
    return WeekCursor(
        week_start=week_start(today, anchor),
        week_type=current_week_type(today, anchor),
    )


def navigate(cursor: WeekCursor, direction: int, anchor: DateLike = WEEK_ANCHOR) -> WeekCursor:
    """Move the cursor one week back (-1) or forward (+1)."""
    if direction not in (-1, 1):
        raise ValueError(f"Direction must be -1 or +1, got {direction!r}")
    new_start = cursor.week_start + datetime.timedelta(days=7 * direction)
    return WeekCursor(week_start=new_start, week_type=current_week_type(new_start, anchor))


def select_week_type(cursor: WeekCursor, week_type: int) -> WeekCursor:
    """Show the other week's rows without moving the date range."""
    if week_type not in WEEK_TYPES:
        raise ValueError(f"Week type must be 1 or 2, got {week_type!r}")
    return replace(cursor, week_type=week_type)
