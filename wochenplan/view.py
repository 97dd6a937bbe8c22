"""Sorting and filtering of the employee list for display."""

import enum
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, List, Sequence, Tuple

from .model import EmployeeWeek, ScheduleModel, has_data, has_office_hours, office_only
from .weekclock import WeekCursor

PALETTE_SIZE = 12


class NameOrder(enum.Enum):
    FIRST = "first"
    LAST = "last"


def _last_token(name: str) -> str:
    tokens = name.split()
    return tokens[-1] if tokens else name


def sorted_names(names: Iterable[str], order: NameOrder = NameOrder.FIRST) -> List[str]:
    """Stable sort by full name or by the last word of the name."""
    if order is NameOrder.LAST:
        return sorted(names, key=_last_token)
    return sorted(names)


def filtered_names(all_names: Sequence[str], selected: Iterable[str], office_only_mode: bool,
                   model: ScheduleModel, week_type: int) -> List[Tuple[str, EmployeeWeek]]:
    """Employees to show for a week type, in the order of `all_names`.

    An empty selection means no restriction. In office-only mode the
    returned week holds only office blocks.
    """
    selected = set(selected)
    candidates = [n for n in all_names if n in selected] if selected else list(all_names)

    rows = []
    for name in candidates:
        if name not in model:
            continue
        week = model.week_slice(name, week_type)
        if office_only_mode:
            if not has_office_hours(week):
                continue
            rows.append((name, office_only(week)))
        elif has_data(week):
            rows.append((name, week))
    return rows


def results_count(rows: Sequence, model: ScheduleModel) -> Tuple[int, int]:
    """(displayed, total) for the status line."""
    return len(rows), len(model)


def initials(name: str) -> str:
    return "".join(word[0].upper() for word in name.split(" ") if word)[:2]


def color_index(position: int, palette_size: int = PALETTE_SIZE) -> int:
    return position % palette_size


def employee_detail(model: ScheduleModel, name: str,
                    week_type: int) -> Tuple[EmployeeWeek, EmployeeWeek]:
    """(shown week, other week) for one employee."""
    record = model[name]
    other = 2 if week_type == 1 else 1
    return record.week(week_type), record.week(other)


@dataclass(frozen=True)
class FilterState:
    selected_employees: FrozenSet[str] = field(default_factory=frozenset)
    office_hours_only: bool = False
    name_order: NameOrder = NameOrder.FIRST


@dataclass(frozen=True)
class ViewState:
    cursor: WeekCursor
    filters: FilterState = field(default_factory=FilterState)

    def update(self, **changes) -> "ViewState":
        """New state with cursor and/or filter fields replaced.

        Accepts `cursor` plus any FilterState field name.
        """
        cursor = changes.pop("cursor", self.cursor)
        if "selected_employees" in changes:
            changes["selected_employees"] = frozenset(changes["selected_employees"])
        filters = replace(self.filters, **changes) if changes else self.filters
        return ViewState(cursor=cursor, filters=filters)
