"""Week-year rule interface.

A week-year rule maps dates to (week-year, week-of-week-year, day-of-week)
triples and back. RegularWeekYearRule is the only implementation today;
callers should depend on this interface so other numbering policies can be
added without changing them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from weekyears.calendars.calendar_system import CalendarSystem
from weekyears.calendars.local_date import LocalDate
from weekyears.calendars.types import IsoDayOfWeek, WeekDate


class WeekYearRule(ABC):
    """Base class for week-year rules.

    Implementations must be immutable and safe to share between threads.
    """

    @abstractmethod
    def get_local_date(
        self,
        week_year: int,
        week_of_week_year: int,
        day_of_week: IsoDayOfWeek | int,
        calendar: CalendarSystem | None = None,
    ) -> LocalDate:
        """Return the date identified by a week-date triple.

        Args:
            week_year: Week-year of the date
            week_of_week_year: 1-based week within the week-year
            day_of_week: ISO day of week (1-7)
            calendar: Calendar to build the date in; defaults to ISO

        Returns:
            The matching LocalDate

        Raises:
            RangeError: If any part of the triple is out of range
            InvalidCombinationError: If the triple names a day missing from a short week
        """
        raise NotImplementedError

    @abstractmethod
    def get_week_of_week_year(self, date: LocalDate) -> int:
        raise NotImplementedError

    @abstractmethod
    def get_weeks_in_week_year(self, week_year: int, calendar: CalendarSystem | None = None) -> int:
        """Return the number of weeks in a week-year.

        Raises:
            RangeError: If the week-year has no days inside the calendar's range
        """
        raise NotImplementedError

    @abstractmethod
    def get_week_year(self, date: LocalDate) -> int:
        raise NotImplementedError

    def get_week_date(self, date: LocalDate) -> WeekDate:
        """Return the full week-date triple for a date."""
        return WeekDate(
            week_year=self.get_week_year(date),
            week_of_week_year=self.get_week_of_week_year(date),
            day_of_week=date.day_of_week,
        )
