"""Week-date value types.

IsoDayOfWeek numbers weekdays the ISO-8601 way (Monday=1 ... Sunday=7).
LegacyDayOfWeek and CalendarWeekRule follow the .NET BCL numbering so that
legacy week rules can be described with the same values.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class IsoDayOfWeek(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def parse(cls, value: str) -> "IsoDayOfWeek":
        """Parse a weekday from a name, three-letter abbreviation or number.

        Raises:
            ValueError: If the text does not name a weekday
        """
        text = value.strip().lower()
        if text.isdigit():
            return cls(int(text))
        for member in cls:
            name = member.name.lower()
            if text in (name, name[:3]):
                return member
        raise ValueError(f"Unknown day of week: {value}")


class LegacyDayOfWeek(IntEnum):
    """Weekday numbering used by legacy (BCL) calendars: Sunday=0 ... Saturday=6."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def to_iso(self) -> IsoDayOfWeek:
        return IsoDayOfWeek.SUNDAY if self is LegacyDayOfWeek.SUNDAY else IsoDayOfWeek(int(self))


class CalendarWeekRule(IntEnum):
    """Legacy week rules, mapped to 1, 7 and 4 minimum days in the first week."""

    FIRST_DAY = 0
    FIRST_FULL_WEEK = 1
    FIRST_FOUR_DAY_WEEK = 2


class WeekDate(BaseModel):
    """A (week-year, week-of-week-year, day-of-week) triple.

    Attributes:
        week_year: Week-year the date belongs to
        week_of_week_year: 1-based week within the week-year
        day_of_week: ISO day of week
    """

    model_config = ConfigDict(frozen=True)

    week_year: int
    week_of_week_year: int = Field(ge=1, le=54)
    day_of_week: IsoDayOfWeek

    def __str__(self) -> str:
        return f"{self.week_year}-W{self.week_of_week_year:02d}-{int(self.day_of_week)}"
