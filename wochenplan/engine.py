"""Core pipeline for Wochenplan: load the workbook, build the display grid."""

import datetime
import logging
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from . import excel, view, weekclock
from .model import EmployeeWeek, ScheduleModel

logger = logging.getLogger(__name__)


class ScheduleLoadError(Exception):
    """The workbook could not be read. No model is produced."""


def load_schedule(path: Union[str, Path],
                  excluded: Sequence[str] = excel.EXCLUDED_SHEETS,
                  geometry: excel.SheetGeometry = excel.DEFAULT_GEOMETRY) -> ScheduleModel:
    """Read the workbook at `path` into a ScheduleModel.

    Raises ScheduleLoadError if the file is missing, unreadable or not an
    xlsx workbook.
    """
    path = Path(path)
    if not path.is_file():
        raise ScheduleLoadError(f"Datei nicht gefunden: {path}")

    try:
        # data_only: formula cells give their cached values
        wb = load_workbook(path, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
        raise ScheduleLoadError(f"Datei kann nicht gelesen werden: {path} ({e})") from e

    try:
        model = excel.extract_workbook(wb, excluded, geometry)
    finally:
        wb.close()

    logger.debug("Loaded %d employees from %s", len(model), path)
    return model


@dataclass
class GridRow:
    name: str
    initials: str
    color_index: int
    week: EmployeeWeek


@dataclass
class ScheduleGrid:
    week_start: datetime.date
    week_type: int
    date_range: str
    highlight_weekday: int  # -1: nothing to highlight
    rows: List[GridRow] = field(default_factory=list)
    displayed: int = 0
    total: int = 0


def build_grid(model: ScheduleModel, state: view.ViewState,
               today: Optional[datetime.date] = None) -> ScheduleGrid:
    """Everything the presentation layer needs to draw one week."""
    if today is None:
        today = datetime.date.today()

    cursor = state.cursor
    filters = state.filters

    names = view.sorted_names(model.names(), filters.name_order)
    selection = view.filtered_names(
        names, filters.selected_employees, filters.office_hours_only,
        model, cursor.week_type,
    )

    rows = [
        GridRow(
            name=name,
            initials=view.initials(name),
            color_index=view.color_index(i),
            week=week,
        )
        for i, (name, week) in enumerate(selection)
    ]
    displayed, total = view.results_count(rows, model)

    highlight = -1
    if weekclock.is_current_week(cursor.week_start, today):
        highlight = weekclock.current_weekday_index(today)

    return ScheduleGrid(
        week_start=cursor.week_start,
        week_type=cursor.week_type,
        date_range=weekclock.format_date_range(cursor.week_start),
        highlight_weekday=highlight,
        rows=rows,
        displayed=displayed,
        total=total,
    )
