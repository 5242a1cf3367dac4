"""Week-year numbering: convert between calendar dates and week dates."""

from weekyears.calendars import (
    CalendarSystem,
    CalendarWeekRule,
    ConfigurationError,
    InvalidCombinationError,
    IsoDayOfWeek,
    LegacyDayOfWeek,
    LocalDate,
    RangeError,
    RegularWeekYearRule,
    WeekDate,
    WeekYearError,
    WeekYearRule,
    for_min_days_in_first_week,
    from_calendar_week_rule,
    get_calendar,
    iso_rule,
    parse_rule,
)

__version__ = "0.1.0"

__all__ = [
    "CalendarSystem",
    "CalendarWeekRule",
    "ConfigurationError",
    "InvalidCombinationError",
    "IsoDayOfWeek",
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
