"""Developer CLI for week-year calculations.

Examples:
    weekyears week-of 2011-01-01
    weekyears date 2013 1 monday --rule min:4
    weekyears weeks 2015 2025 --rule legacy:first-day:sunday
"""

from typing import NoReturn

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from weekyears.calendars.calendar_system import CalendarSystem, get_calendar
from weekyears.calendars.errors import WeekYearError
from weekyears.calendars.local_date import LocalDate
from weekyears.calendars.rules import parse_rule
from weekyears.calendars.types import IsoDayOfWeek
from weekyears.calendars.week_year_rule import WeekYearRule
from weekyears.config.settings import settings
from weekyears.core.logger import setup_logger

console = Console()

app = typer.Typer(
    name="weekyears",
    help="Convert between calendar dates and week dates",
    add_completion=False,
)

RULE_HELP = "Week-year rule: iso, min:<days>[:<weekday>] or legacy:<first-day|first-four-day-week|first-full-week>[:<weekday>]"
CALENDAR_HELP = "Calendar system: ISO or Julian"


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    setup_logger(level="DEBUG" if debug else settings.log_level, log_file=settings.log_file)


def _resolve(rule_name: str | None, calendar_id: str | None) -> tuple[WeekYearRule, CalendarSystem]:
    rule = parse_rule(rule_name or settings.default_rule)
    calendar = get_calendar(calendar_id or settings.default_calendar)
    logger.debug(f"Using rule {rule!r} with calendar {calendar.id}")
    return rule, calendar


def _fail(error: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1) from error


@app.command("week-of")
def week_of(
    date_text: str = typer.Argument(..., metavar="DATE", help="Date in YYYY-MM-DD form"),
    rule_name: str | None = typer.Option(None, "--rule", "-r", help=RULE_HELP),
    calendar_id: str | None = typer.Option(None, "--calendar", "-c", help=CALENDAR_HELP),
) -> None:
    """Show the week date of a calendar date."""
    try:
        rule, calendar = _resolve(rule_name, calendar_id)
        date = LocalDate.parse_iso(date_text, calendar)
        week_date = rule.get_week_date(date)
    except ValueError as e:
        _fail(e)
    console.print(
        f"{date} ([cyan]{date.day_of_week.name.title()}[/cyan]) is week [green]{week_date.week_of_week_year}[/green] "
        f"of week-year [green]{week_date.week_year}[/green] ({week_date})"
    )


@app.command("date")
def date_of(
    week_year: int = typer.Argument(..., help="Week-year"),
    week: int = typer.Argument(..., help="Week of the week-year (1-based)"),
    day: str = typer.Argument(..., help="Day of week: name, abbreviation or ISO number (Monday=1)"),
    rule_name: str | None = typer.Option(None, "--rule", "-r", help=RULE_HELP),
    calendar_id: str | None = typer.Option(None, "--calendar", "-c", help=CALENDAR_HELP),
) -> None:
    """Show the calendar date of a week date."""
    try:
        rule, calendar = _resolve(rule_name, calendar_id)
        day_of_week = IsoDayOfWeek.parse(day)
        date = rule.get_local_date(week_year, week, day_of_week, calendar)
    except ValueError as e:
        _fail(e)
    console.print(str(date))


@app.command("weeks")
def weeks(
    from_year: int = typer.Argument(..., help="First week-year"),
    to_year: int | None = typer.Argument(None, help="Last week-year (defaults to FROM_YEAR)"),
    rule_name: str | None = typer.Option(None, "--rule", "-r", help=RULE_HELP),
    calendar_id: str | None = typer.Option(None, "--calendar", "-c", help=CALENDAR_HELP),
) -> None:
    """Show how many weeks each week-year has, and where week 1 starts."""
    last_year = from_year if to_year is None else to_year
    if last_year < from_year:
        _fail(ValueError(f"TO_YEAR ({last_year}) must not be before FROM_YEAR ({from_year})"))
    table = Table(title="Weeks per week-year")
    table.add_column("Week-year", justify="right")
    table.add_column("Weeks", justify="right")
    table.add_column("Week 1 starts")
    try:
        rule, calendar = _resolve(rule_name, calendar_id)
        for week_year in range(from_year, last_year + 1):
            count = rule.get_weeks_in_week_year(week_year, calendar)
            first_day = _first_day_of_week_year(rule, week_year, calendar)
            table.add_row(str(week_year), str(count), str(first_day) if first_day else "-")
    except WeekYearError as e:
        _fail(e)
    console.print(table)


def _first_day_of_week_year(rule: WeekYearRule, week_year: int, calendar: CalendarSystem) -> LocalDate | None:
    """Return the earliest valid date in week 1, or None if no day of week 1 is in range."""
    dates = []
    for day_of_week in IsoDayOfWeek:
        try:
            dates.append(rule.get_local_date(week_year, 1, day_of_week, calendar))
        except WeekYearError:
            continue
    return min(dates) if dates else None


if __name__ == "__main__":
    app()
