"""Extraction of employee schedules from the work-schedule workbook."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from openpyxl import Workbook
from openpyxl.utils import column_index_from_string
from openpyxl.worksheet.worksheet import Worksheet

from . import timecodec
from .model import WEEKDAYS, EmployeeRecord, EmployeeWeek, ScheduleModel, WorkBlock

logger = logging.getLogger(__name__)

# Sheets in the workbook that do not belong to an employee
EXCLUDED_SHEETS = ("NewEmployee", "FormTools")

# Layout of an employee sheet
# C1 = name, rows 9-13 = week 1, rows 24-28 = week 2,
# each weekday has a column triplet (Start, Ende, Ort)
NAME_CELL = "C1"
WEEK_ROWS = MappingProxyType({
    1: range(9, 14),
    2: range(24, 29),
})
DAY_COLUMNS = MappingProxyType({
    "Monday": ("I", "J", "K"),
    "Tuesday": ("L", "M", "N"),
    "Wednesday": ("O", "P", "Q"),
    "Thursday": ("R", "S", "T"),
    "Friday": ("U", "V", "W"),
})


@dataclass(frozen=True)
class SheetGeometry:
    name_cell: str = NAME_CELL
    week_rows: Mapping[int, range] = field(default_factory=lambda: WEEK_ROWS)
    day_columns: Mapping[str, Tuple[str, str, str]] = field(default_factory=lambda: DAY_COLUMNS)

    def __post_init__(self):
        object.__setattr__(self, "week_rows", MappingProxyType(dict(self.week_rows)))
        object.__setattr__(self, "day_columns", MappingProxyType(dict(self.day_columns)))

    def __hash__(self):
        return hash((
            self.name_cell,
            tuple(sorted(self.week_rows.items())),
            tuple(sorted(self.day_columns.items())),
        ))

    def column_indices(self, day: str) -> Tuple[int, int, int]:
        """1-based (start, end, location) column indices for a weekday."""
        start, end, location = self.day_columns[day]
        return (
            column_index_from_string(start),
            column_index_from_string(end),
            column_index_from_string(location),
        )


DEFAULT_GEOMETRY = SheetGeometry()


def _is_blank(val) -> bool:
    if val is None:
        return True
    if isinstance(val, str):
        return not val.strip()
    if isinstance(val, (int, float)) and not isinstance(val, bool):
        return val == 0
    return False


def _read_employee_name(ws: Worksheet, geometry: SheetGeometry) -> str:
    val = ws[geometry.name_cell].value
    if _is_blank(val):
        return ws.title
    return str(val).strip()


def _read_week(ws: Worksheet, rows: range, geometry: SheetGeometry) -> EmployeeWeek:
    days: Dict[str, List[WorkBlock]] = {day: [] for day in WEEKDAYS}
    columns = {day: geometry.column_indices(day) for day in WEEKDAYS}

    for offset, row in enumerate(rows):
        for day in WEEKDAYS:
            start_col, end_col, location_col = columns[day]
            start_val = ws.cell(row, start_col).value
            end_val = ws.cell(row, end_col).value
            location_val = ws.cell(row, location_col).value

            # Partially filled rows are not an error, they just don't count
            if _is_blank(start_val) or _is_blank(end_val) or _is_blank(location_val):
                continue

            start_time = timecodec.decode(start_val)
            end_time = timecodec.decode(end_val)
            if start_time is None or end_time is None:
                logger.debug(
                    "%s!%s: unreadable time (%r, %r), skipping %s block %d",
                    ws.title, row, start_val, end_val, day, offset + 1,
                )
                continue

            days[day].append(WorkBlock(
                start_time=start_time,
                end_time=end_time,
                location=str(location_val).strip(),
                block=offset + 1,
            ))

    return EmployeeWeek(days)


def extract_sheet(ws: Worksheet, geometry: SheetGeometry = DEFAULT_GEOMETRY) -> EmployeeRecord:
    """Read one employee sheet into an EmployeeRecord."""
    weeks = {
        week_type: _read_week(ws, rows, geometry)
        for week_type, rows in geometry.week_rows.items()
    }
    return EmployeeRecord(
        name=_read_employee_name(ws, geometry),
        sheet_name=ws.title,
        week1=weeks.get(1, EmployeeWeek()),
        week2=weeks.get(2, EmployeeWeek()),
    )


def valid_sheet_names(wb: Workbook, excluded: Iterable[str] = EXCLUDED_SHEETS) -> List[str]:
    """Worksheet names in workbook order, without reserved and chart sheets."""
    excluded = set(excluded)
    return [ws.title for ws in wb.worksheets if ws.title not in excluded]


def extract_workbook(wb: Workbook, excluded: Sequence[str] = EXCLUDED_SHEETS,
                     geometry: SheetGeometry = DEFAULT_GEOMETRY) -> ScheduleModel:
    """Build the schedule model from every employee sheet of a workbook.

    Two sheets with the same display name: the later sheet wins.
    """
    records = []
    seen = {}
    for sheet_name in valid_sheet_names(wb, excluded):
        record = extract_sheet(wb[sheet_name], geometry)
        if record.name in seen:
            logger.warning(
                "Sheet %r has the same employee name %r as sheet %r, keeping %r",
                sheet_name, record.name, seen[record.name], sheet_name,
            )
        seen[record.name] = sheet_name
        records.append(record)
        logger.debug("Loaded %s from sheet %r", record.name, sheet_name)

    skipped = [name for name in wb.sheetnames if name in set(excluded)]
    if skipped:
        logger.debug("Skipped reserved sheets: %s", ", ".join(skipped))
    for chartsheet in wb.chartsheets:
        logger.debug("Skipped chart sheet %r", chartsheet.title)

    return ScheduleModel(records)
