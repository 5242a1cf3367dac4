"""Calendars module - week-year rules and the calendar arithmetic they rely on.

This module provides:
- Week-year rules (ISO, custom regular, legacy-compatible irregular)
- ISO and Julian calendar systems
- Calendar-bound LocalDate values
"""

from weekyears.calendars.calendar_system import (
    CalendarSystem,
    GregorianCalendarSystem,
    JulianCalendarSystem,
    get_calendar,
)
from weekyears.calendars.errors import (
    ConfigurationError,
    InvalidCombinationError,
    RangeError,
    WeekYearError,
)
from weekyears.calendars.local_date import LocalDate
from weekyears.calendars.regular_week_year_rule import RegularWeekYearRule
from weekyears.calendars.rules import (
    for_min_days_in_first_week,
    from_calendar_week_rule,
    iso_rule,
    parse_rule,
)
from weekyears.calendars.types import CalendarWeekRule, IsoDayOfWeek, LegacyDayOfWeek, WeekDate
from weekyears.calendars.week_year_rule import WeekYearRule

__all__ = [
    "CalendarSystem",
    "CalendarWeekRule",
    "ConfigurationError",
    "GregorianCalendarSystem",
    "InvalidCombinationError",
    "IsoDayOfWeek",
    "JulianCalendarSystem",
    "LegacyDayOfWeek",
    "LocalDate",
    "RangeError",
    "RegularWeekYearRule",
    "WeekDate",
    "WeekYearError",
    "WeekYearRule",
    "for_min_days_in_first_week",
    "from_calendar_week_rule",
    "get_calendar",
    "iso_rule",
    "parse_rule",
]
