"""Calendar dates bound to a calendar system."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from functools import total_ordering

from weekyears.calendars.calendar_system import CalendarSystem
from weekyears.calendars.errors import RangeError
from weekyears.calendars.types import IsoDayOfWeek

_ISO_DATE_PATTERN = re.compile(r"^(-?\d{1,5})-(\d{1,2})-(\d{1,2})$")


def day_of_week_from_days(days_since_epoch: int) -> IsoDayOfWeek:
    """Return the ISO day of week for a day count (1970-01-01 was a Thursday)."""
    return IsoDayOfWeek(1 + (days_since_epoch + 3) % 7)


@total_ordering
@dataclass(frozen=True)
class LocalDate:
    """A date in a specific calendar system.

    Attributes:
        year: Calendar year
        month: Month of year (1-based)
        day: Day of month (1-based)
        calendar: Calendar system the fields are expressed in
    """

    year: int
    month: int
    day: int
    calendar: CalendarSystem = field(default_factory=CalendarSystem.iso)

    def __post_init__(self) -> None:
        calendar = self.calendar
        if not calendar.min_year <= self.year <= calendar.max_year:
            raise RangeError("year", self.year, calendar.min_year, calendar.max_year)
        months = calendar.months_in_year(self.year)
        if not 1 <= self.month <= months:
            raise RangeError("month", self.month, 1, months)
        days = calendar.days_in_month(self.year, self.month)
        if not 1 <= self.day <= days:
            raise RangeError("day", self.day, 1, days)

    @classmethod
    def from_days_since_epoch(cls, days: int, calendar: CalendarSystem | None = None) -> LocalDate:
        calendar = calendar or CalendarSystem.iso()
        year, month, day = calendar.get_year_month_day(days)
        return cls(year, month, day, calendar)

    @classmethod
    def from_date(cls, value: date) -> LocalDate:
        """Convert a datetime.date (always proleptic Gregorian) to an ISO LocalDate."""
        return cls(value.year, value.month, value.day, CalendarSystem.iso())

    @classmethod
    def parse_iso(cls, text: str, calendar: CalendarSystem | None = None) -> LocalDate:
        """Parse YYYY-MM-DD (negative years allowed) into a date in the given calendar.

        Raises:
            ValueError: If the text is not in YYYY-MM-DD form
            RangeError: If a field is out of range for the calendar
        """
        match = _ISO_DATE_PATTERN.match(text.strip())
        if not match:
            raise ValueError(f"Invalid date (expected YYYY-MM-DD): {text}")
        year, month, day = (int(part) for part in match.groups())
        return cls(year, month, day, calendar or CalendarSystem.iso())

    @property
    def days_since_epoch(self) -> int:
        return self.calendar.get_days_since_epoch(self.year, self.month, self.day)

    @property
    def day_of_week(self) -> IsoDayOfWeek:
        return day_of_week_from_days(self.days_since_epoch)

    def plus_days(self, days: int) -> LocalDate:
        return LocalDate.from_days_since_epoch(self.days_since_epoch + days, self.calendar)

    def to_date(self) -> date:
        """Convert to datetime.date; only ISO dates in years 1-9999 can be represented.

        Raises:
            ValueError: If the calendar is not ISO or the year is outside 1-9999
        """
        if self.calendar is not CalendarSystem.iso():
            raise ValueError(f"Only ISO dates can be converted to datetime.date, not {self.calendar.id}")
        return date(self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        if other.calendar is not self.calendar:
            raise TypeError("Cannot compare dates from different calendar systems")
        return self.days_since_epoch < other.days_since_epoch

    def __sub__(self, other: LocalDate) -> int:
        """Return the number of days between two dates in the same calendar."""
        if other.calendar is not self.calendar:
            raise TypeError("Cannot subtract dates from different calendar systems")
        return self.days_since_epoch - other.days_since_epoch

    def __str__(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"
