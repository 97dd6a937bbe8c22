"""CLI interface for Wochenplan."""

import datetime
import logging

import click

from . import config as cfg_mod
from . import engine, view, weekclock
from .model import WEEKDAYS, EmployeeWeek

WEEKDAY_NAMES_SHORT = ["Mo", "Di", "Mi", "Do", "Fr"]


def _fmt_block(block) -> str:
    """Format a work block, green for office, blue for remote."""
    text = f"{block.start_time} - {block.end_time}"
    if block.is_office:
        return click.style(f"[Buero] {text}", fg="green")
    return click.style(f"[Home] {text}", fg="blue")


def _load(datei):
    config = cfg_mod.load_config()
    try:
        anchor = cfg_mod.get_week_anchor(config)
        order = cfg_mod.get_name_order(config)
    except ValueError as e:
        raise click.ClickException(str(e))

    path = datei if datei else cfg_mod.get_workbook_path(config)
    try:
        model = engine.load_schedule(path, cfg_mod.get_excluded_sheets(config))
    except engine.ScheduleLoadError as e:
        raise click.ClickException(str(e))
    return config, anchor, order, model


def _cursor_for(today, anchor, offset):
    cursor = weekclock.jump_to_today(today, anchor)
    step = 1 if offset > 0 else -1
    for _ in range(abs(offset)):
        cursor = weekclock.navigate(cursor, step, anchor)
    return cursor


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Diagnoseausgaben anzeigen")
def cli(verbose):
    """Wochenplan - Arbeitsorte der Mitarbeiter (Woche 1 / Woche 2)"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="woche")
@click.option("--datei", type=click.Path(dir_okay=False), default=None, help="Pfad zur Excel-Datei")
@click.option("--offset", type=int, default=0, help="Wochen vor (+) oder zurueck (-) ab heute")
@click.option("--typ", "week_type", type=click.IntRange(1, 2), default=None,
              help="Wochentyp erzwingen (1 oder 2)")
@click.option("--mitarbeiter", "employees", multiple=True, help="Nur diese Mitarbeiter anzeigen")
@click.option("--buero/--alle", "office_only", default=None,
              help="Nur Buerozeiten oder alle Zeiten anzeigen (Standard: Konfiguration)")
@click.option("--sortierung", type=click.Choice(["first", "last"]), default=None,
              help="Nach Vor- oder Nachname sortieren")
def week_view(datei, offset, week_type, employees, office_only, sortierung):
    """Wochenuebersicht anzeigen"""
    config, anchor, order, model = _load(datei)

    today = datetime.date.today()
    state = view.ViewState(cursor=_cursor_for(today, anchor, offset))
    if week_type is not None:
        state = state.update(cursor=weekclock.select_week_type(state.cursor, week_type))
    state = state.update(
        selected_employees=employees,
        office_hours_only=office_only if office_only is not None else bool(config.get("office_hours_only")),
        name_order=view.NameOrder(sortierung) if sortierung else order,
    )

    grid = engine.build_grid(model, state, today)

    click.echo(f"{grid.date_range} (Woche {grid.week_type})")
    click.echo()

    if not grid.rows:
        click.echo("  Keine Mitarbeiter mit Arbeitszeiten in dieser Woche.")

    for row in grid.rows:
        click.echo(click.style(f"  [{row.initials}] {row.name}", bold=True))
        for i, day in enumerate(WEEKDAYS):
            blocks = row.week[day]
            marker = click.style(" <--", fg="cyan") if i == grid.highlight_weekday else ""
            text = ", ".join(_fmt_block(b) for b in blocks) if blocks else click.style("--", dim=True)
            click.echo(f"    {WEEKDAY_NAMES_SHORT[i]}  {text}{marker}")

    click.echo()
    click.echo(f"{grid.displayed} von {grid.total} Mitarbeitern")


def _echo_week(title: str, week: EmployeeWeek) -> None:
    click.echo(title)
    for day in WEEKDAYS:
        blocks = week[day]
        click.echo(f"  {day}:")
        if not blocks:
            click.echo(click.style("    Keine Arbeitszeit geplant", dim=True))
        for block in blocks:
            click.echo(f"    {_fmt_block(block)}")


@cli.command(name="mitarbeiter")
@click.argument("name")
@click.option("--datei", type=click.Path(dir_okay=False), default=None, help="Pfad zur Excel-Datei")
@click.option("--offset", type=int, default=0, help="Wochen vor (+) oder zurueck (-) ab heute")
def employee(name, datei, offset):
    """Plan eines Mitarbeiters anzeigen (beide Wochen)"""
    _, anchor, _, model = _load(datei)

    if name not in model:
        raise click.ClickException(f"Mitarbeiter nicht gefunden: '{name}'")

    cursor = _cursor_for(datetime.date.today(), anchor, offset)
    current, other = view.employee_detail(model, name, cursor.week_type)
    other_type = 2 if cursor.week_type == 1 else 1

    click.echo(f"{name} - Plan")
    click.echo()
    _echo_week(f"Woche {cursor.week_type} (aktuell)", current)
    click.echo()
    _echo_week(f"Woche {other_type}", other)


@cli.command(name="config")
def show_config():
    """Aktuelle Konfiguration anzeigen"""
    config = cfg_mod.load_config()
    click.echo("Wochenplan Konfiguration:")
    click.echo(f"  Konfig-Datei: {cfg_mod.get_config_path()}")
    click.echo(f"  Excel-Datei: {config['workbook_path']}")
    click.echo(f"  Start Woche 1: {config['week_anchor']}")
    click.echo(f"  Ignorierte Blaetter: {', '.join(config['excluded_sheets'])}")
    click.echo(f"  Sortierung: {config['name_order']}")
    click.echo(f"  Nur Buero: {'ja' if config['office_hours_only'] else 'nein'}")


if __name__ == "__main__":
    cli()
