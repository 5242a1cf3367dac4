"""Calendar arithmetic providers.

A CalendarSystem supplies the day-count arithmetic the week-year rules need:
where each year starts, how long it is, and how to convert between
(year, month, day) and days since the epoch (1970-01-01 ISO, day 0).

Providers are immutable and shared; all methods are pure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from loguru import logger

from weekyears.calendars.errors import ConfigurationError, RangeError

# Days before each month in a non-leap year; index 0 is January.
_CUMULATIVE_DAYS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Days from 0001-01-01 to 1970-01-01 in the proleptic Gregorian calendar.
_GREGORIAN_DAYS_TO_EPOCH = 719162

# Julian 0001-01-01 is Gregorian 0000-12-30, two days before Gregorian 0001-01-01.
_JULIAN_OFFSET_FROM_GREGORIAN = -2


class CalendarSystem(ABC):
    """Base class for calendar arithmetic providers.

    Subclasses implement the year-level arithmetic (start_of_year_in_days and
    is_leap_year); month handling is shared since both supported calendars use
    the same twelve-month structure.
    """

    id: str
    min_year: int
    max_year: int

    @abstractmethod
    def start_of_year_in_days(self, year: int) -> int:
        """Return the days since epoch of the first day of the given year.

        Must be defined for min_year - 1 and max_year + 1 as well.
        """
        raise NotImplementedError

    @abstractmethod
    def is_leap_year(self, year: int) -> bool:
        raise NotImplementedError

    @property
    def min_days(self) -> int:
        return self.start_of_year_in_days(self.min_year)

    @property
    def max_days(self) -> int:
        return self.start_of_year_in_days(self.max_year + 1) - 1

    def days_in_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    def months_in_year(self, year: int) -> int:
        return 12

    def days_in_month(self, year: int, month: int) -> int:
        if month == 2 and self.is_leap_year(year):
            return 29
        return _MONTH_LENGTHS[month - 1]

    def get_days_since_epoch(self, year: int, month: int, day: int) -> int:
        """Convert a (year, month, day) triple to days since epoch.

        The triple is assumed to be valid; LocalDate validates before calling.
        """
        days = self.start_of_year_in_days(year) + _CUMULATIVE_DAYS[month - 1] + day - 1
        if month > 2 and self.is_leap_year(year):
            days += 1
        return days

    def get_year_month_day(self, days: int) -> tuple[int, int, int]:
        """Convert days since epoch to a (year, month, day) triple.

        Raises:
            RangeError: If days is outside [min_days, max_days]
        """
        if days < self.min_days or days > self.max_days:
            raise RangeError("daysSinceEpoch", days, self.min_days, self.max_days)
        # Estimate, then correct by at most a year either way.
        year = 1970 + (days * 400) // 146097
        while self.start_of_year_in_days(year) > days:
            year -= 1
        while self.start_of_year_in_days(year + 1) <= days:
            year += 1
        day_of_year = days - self.start_of_year_in_days(year)
        month = 1
        while month < 12:
            length = self.days_in_month(year, month)
            if day_of_year < length:
                break
            day_of_year -= length
            month += 1
        return year, month, day_of_year + 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"

    @classmethod
    def iso(cls) -> CalendarSystem:
        """Return the shared ISO (proleptic Gregorian) calendar."""
        return _ISO_CALENDAR

    @classmethod
    def julian(cls) -> CalendarSystem:
        """Return the shared proleptic Julian calendar."""
        return _JULIAN_CALENDAR


class GregorianCalendarSystem(CalendarSystem):
    id = "ISO"
    min_year = -9998
    max_year = 9999

    def start_of_year_in_days(self, year: int) -> int:
        y = year - 1
        return 365 * y + y // 4 - y // 100 + y // 400 - _GREGORIAN_DAYS_TO_EPOCH

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


class JulianCalendarSystem(CalendarSystem):
    id = "Julian"
    min_year = -9997
    max_year = 9999

    def start_of_year_in_days(self, year: int) -> int:
        y = year - 1
        return 365 * y + y // 4 + _JULIAN_OFFSET_FROM_GREGORIAN - _GREGORIAN_DAYS_TO_EPOCH

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0


_ISO_CALENDAR = GregorianCalendarSystem()
_JULIAN_CALENDAR = JulianCalendarSystem()

def get_calendar(calendar_id: str) -> CalendarSystem:
    """Look up a calendar by id (case-insensitive).

    Args:
        calendar_id: "ISO" (alias "gregorian") or "Julian"

    Returns:
        Shared CalendarSystem instance

    Raises:
        ConfigurationError: If the id is not recognized
    """
    key = calendar_id.strip().lower()
    if key in {"iso", "gregorian"}:
        return CalendarSystem.iso()
    if key == "julian":
        return CalendarSystem.julian()
    logger.debug(f"Unknown calendar id requested: {calendar_id!r}")
    raise ConfigurationError(f"Unsupported calendar: {calendar_id}")
