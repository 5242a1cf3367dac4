"""Factories for the supported week-year rules.

Rule names (used by settings and the CLI):
- iso
- min:<days>[:<weekday>]                    regular rule, Monday unless given
- legacy:<kind>[:<weekday>]                 irregular rule; kind is first-day,
                                            first-four-day-week or first-full-week
"""

from loguru import logger

from weekyears.calendars.errors import ConfigurationError
from weekyears.calendars.regular_week_year_rule import RegularWeekYearRule
from weekyears.calendars.types import CalendarWeekRule, IsoDayOfWeek, LegacyDayOfWeek
from weekyears.calendars.week_year_rule import WeekYearRule

_LEGACY_KINDS = {
    "first-day": CalendarWeekRule.FIRST_DAY,
    "first-four-day-week": CalendarWeekRule.FIRST_FOUR_DAY_WEEK,
    "first-full-week": CalendarWeekRule.FIRST_FULL_WEEK,
}


def iso_rule() -> WeekYearRule:
    """Return the ISO-8601 rule: week 1 has at least 4 days and weeks start on Monday."""
    return RegularWeekYearRule.iso()


def for_min_days_in_first_week(
    min_days_in_first_week: int,
    first_day_of_week: IsoDayOfWeek | int = IsoDayOfWeek.MONDAY,
) -> WeekYearRule:
    return RegularWeekYearRule.for_min_days_in_first_week(min_days_in_first_week, first_day_of_week)


def from_calendar_week_rule(
    calendar_week_rule: CalendarWeekRule | int,
    first_day_of_week: IsoDayOfWeek | LegacyDayOfWeek,
) -> WeekYearRule:
    return RegularWeekYearRule.from_calendar_week_rule(calendar_week_rule, first_day_of_week)


def parse_rule(name: str) -> WeekYearRule:
    """Build a rule from its short name.

    Args:
        name: Rule name, e.g. "iso", "min:1", "min:4:sunday", "legacy:first-day:sunday"

    Returns:
        The matching WeekYearRule

    Raises:
        ConfigurationError: If the name cannot be parsed or names invalid values
    """
    parts = [part.strip().lower() for part in name.split(":")]
    kind = parts[0]
    try:
        if kind == "iso" and len(parts) == 1:
            return iso_rule()
        if kind == "min" and len(parts) in (2, 3):
            first_day = IsoDayOfWeek.parse(parts[2]) if len(parts) == 3 else IsoDayOfWeek.MONDAY
            return for_min_days_in_first_week(int(parts[1]), first_day)
        if kind == "legacy" and len(parts) in (2, 3) and parts[1] in _LEGACY_KINDS:
            first_day = IsoDayOfWeek.parse(parts[2]) if len(parts) == 3 else IsoDayOfWeek.MONDAY
            return from_calendar_week_rule(_LEGACY_KINDS[parts[1]], first_day)
    except ValueError as e:
        if isinstance(e, ConfigurationError):
            raise
        logger.debug(f"Failed to parse rule name {name!r}: {e}")
        raise ConfigurationError(f"Invalid week-year rule: {name} ({e})") from e
    logger.debug(f"Unknown rule name {name!r}")
    raise ConfigurationError(f"Unknown week-year rule: {name}")
