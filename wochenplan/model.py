"""Data model for the bi-weekly work-location schedule."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
WEEK_TYPES = (1, 2)

OFFICE = "office"
REMOTE = "remote"


def classify_location(location: str) -> str:
    """'office' for an exact (case-insensitive, trimmed) match, else 'remote'."""
    if location is not None and str(location).strip().lower() == OFFICE:
        return OFFICE
    return REMOTE


@dataclass(frozen=True)
class WorkBlock:
    start_time: str
    end_time: str
    location: str
    block: int  # 1-based row position within the week band

    @property
    def is_office(self) -> bool:
        return classify_location(self.location) == OFFICE

    @property
    def kind(self) -> str:
        return classify_location(self.location)

    def to_dict(self) -> dict:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "location": self.location,
            "block": self.block,
        }


DaySchedule = Tuple[WorkBlock, ...]


class EmployeeWeek(Mapping):
    """Weekday -> blocks for one week.

    Every weekday is present; a day without work maps to an empty tuple.
    Block order is sheet-row order and is never re-sorted by time.
    """

    def __init__(self, days: Optional[Dict[str, Iterable[WorkBlock]]] = None):
        days = days or {}
        unknown = set(days) - set(WEEKDAYS)
        if unknown:
            raise KeyError(f"Unknown weekday(s): {', '.join(sorted(unknown))}")
        self._days = {day: tuple(days.get(day, ())) for day in WEEKDAYS}

    def __getitem__(self, day: str) -> DaySchedule:
        return self._days[day]

    def __iter__(self) -> Iterator[str]:
        return iter(WEEKDAYS)

    def __len__(self) -> int:
        return len(WEEKDAYS)

    def __eq__(self, other) -> bool:
        if isinstance(other, EmployeeWeek):
            return self._days == other._days
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self._days[day] for day in WEEKDAYS))

    def __repr__(self) -> str:
        return f"EmployeeWeek({self.to_dict()!r})"

    def blocks(self) -> Iterator[Tuple[str, WorkBlock]]:
        for day in WEEKDAYS:
            for block in self._days[day]:
                yield day, block

    def to_dict(self) -> Dict[str, List[dict]]:
        """Sparse form: only days that have blocks."""
        return {
            day: [b.to_dict() for b in blocks]
            for day, blocks in self._days.items()
            if blocks
        }


EMPTY_WEEK = EmployeeWeek()


def has_data(week: EmployeeWeek) -> bool:
    return any(week[day] for day in WEEKDAYS)


def office_only(week: EmployeeWeek) -> EmployeeWeek:
    """A new week holding only the office blocks of `week`."""
    return EmployeeWeek({
        day: [b for b in week[day] if b.is_office]
        for day in WEEKDAYS
    })


def has_office_hours(week: EmployeeWeek) -> bool:
    return any(b.is_office for _, b in week.blocks())


def _check_week_type(week_type: int) -> None:
    if week_type not in WEEK_TYPES:
        raise ValueError(f"Week type must be 1 or 2, got {week_type!r}")


@dataclass(frozen=True)
class EmployeeRecord:
    name: str
    sheet_name: str = ""
    week1: EmployeeWeek = field(default=EMPTY_WEEK)
    week2: EmployeeWeek = field(default=EMPTY_WEEK)

    def week(self, week_type: int) -> EmployeeWeek:
        _check_week_type(week_type)
        return self.week1 if week_type == 1 else self.week2

    def to_dict(self) -> dict:
        return {
            "sheetName": self.sheet_name,
            "week1": self.week1.to_dict(),
            "week2": self.week2.to_dict(),
        }


class ScheduleModel(Mapping):
    """Employee name -> EmployeeRecord. Built once per load, read-only after."""

    def __init__(self, records: Iterable[EmployeeRecord] = ()):
        employees: Dict[str, EmployeeRecord] = {}
        for record in records:
            employees[record.name] = record
        self._employees = employees

    def __getitem__(self, name: str) -> EmployeeRecord:
        return self._employees[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._employees)

    def __len__(self) -> int:
        return len(self._employees)

    def __repr__(self) -> str:
        return f"ScheduleModel({list(self._employees)!r})"

    def names(self) -> List[str]:
        return list(self._employees)

    def week_slice(self, name: str, week_type: int) -> EmployeeWeek:
        return self._employees[name].week(week_type)

    def to_dict(self) -> Dict[str, dict]:
        return {name: rec.to_dict() for name, rec in self._employees.items()}
