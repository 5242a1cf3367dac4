"""Week-year rule with regular (7-day) or irregular (clipped) boundary weeks.

In a regular rule every week is exactly 7 days long, so the first and last
weeks of a week-year may straddle a calendar-year boundary. The ISO-8601 rule
is the regular rule with 4 minimum days in the first week and Monday as the
first day of the week: January 1st 2011 was a Saturday, so only two days of
that week were in 2011 and it belongs to week 52 of week-year 2010, while
December 31st 2012 was a Monday and belongs to week 1 of week-year 2013.

An irregular rule works out where the week-year would start logically and
then clips the boundary weeks: the last day of a calendar year is always in
the last week of the same week-year, while the first day of a calendar year
may still be in the last week of the previous week-year. This matches the
legacy (BCL) week-of-year behaviour.

Day counts are days since the calendar epoch. Every public entry point
validates its inputs against the calendar's supported range first, so the
internal arithmetic never leaves that range by more than a week.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from weekyears.calendars.calendar_system import CalendarSystem
from weekyears.calendars.errors import ConfigurationError, InvalidCombinationError, RangeError
from weekyears.calendars.local_date import LocalDate, day_of_week_from_days
from weekyears.calendars.types import CalendarWeekRule, IsoDayOfWeek, LegacyDayOfWeek
from weekyears.calendars.week_year_rule import WeekYearRule

_LEGACY_MIN_DAYS = {
    CalendarWeekRule.FIRST_DAY: 1,
    CalendarWeekRule.FIRST_FOUR_DAY_WEEK: 4,
    CalendarWeekRule.FIRST_FULL_WEEK: 7,
}


@dataclass(frozen=True)
class RegularWeekYearRule(WeekYearRule):
    """Week-year rule parameterized by the first week's minimum length.

    Attributes:
        min_days_in_first_week: Days of calendar year X that must fall in the week
            containing January 1st for that week to be week 1 of week-year X (1-7)
        first_day_of_week: Day each week starts on
        irregular_weeks: If True, boundary weeks are clipped so a date is never
            assigned to a later week-year than its calendar year
    """

    min_days_in_first_week: int
    first_day_of_week: IsoDayOfWeek
    irregular_weeks: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.min_days_in_first_week <= 7:
            logger.debug(f"Rejected min_days_in_first_week={self.min_days_in_first_week}")
            raise ConfigurationError(
                f"min_days_in_first_week must be in the range 1 to 7, got {self.min_days_in_first_week}"
            )
        if not 1 <= int(self.first_day_of_week) <= 7:
            logger.debug(f"Rejected first_day_of_week={self.first_day_of_week}")
            raise ConfigurationError(f"first_day_of_week must be in the range 1 to 7, got {self.first_day_of_week}")
        object.__setattr__(self, "first_day_of_week", IsoDayOfWeek(self.first_day_of_week))

    @classmethod
    def iso(cls) -> RegularWeekYearRule:
        """Return the shared ISO-8601 rule (4 minimum days, Monday, regular weeks)."""
        return _ISO_RULE

    @classmethod
    def for_min_days_in_first_week(
        cls,
        min_days_in_first_week: int,
        first_day_of_week: IsoDayOfWeek | int = IsoDayOfWeek.MONDAY,
    ) -> RegularWeekYearRule:
        """Create a regular rule.

        For any calendar year X, consider the week (starting on first_day_of_week)
        that contains January 1st. If min_days_in_first_week or more of its days are
        in year X, it is week 1 of week-year X; otherwise it is the last week of
        week-year X-1 and week 1 starts on the following first_day_of_week.

        Raises:
            ConfigurationError: If either argument is outside 1-7
        """
        return cls(min_days_in_first_week, first_day_of_week, False)

    @classmethod
    def from_calendar_week_rule(
        cls,
        calendar_week_rule: CalendarWeekRule | int,
        first_day_of_week: IsoDayOfWeek | LegacyDayOfWeek,
    ) -> RegularWeekYearRule:
        """Create an irregular rule emulating a legacy (BCL) week-of-year rule.

        In the legacy rules the last few days of a calendar year always stay in the
        same week-year, so some boundary weeks are shorter than 7 days.

        Args:
            calendar_week_rule: FIRST_DAY, FIRST_FOUR_DAY_WEEK or FIRST_FULL_WEEK
            first_day_of_week: First day of the week; LegacyDayOfWeek values
                (Sunday=0) are converted to their ISO equivalent

        Raises:
            ConfigurationError: If the legacy rule is not one of the three supported kinds
        """
        try:
            min_days = _LEGACY_MIN_DAYS[CalendarWeekRule(calendar_week_rule)]
        except (KeyError, ValueError) as e:
            logger.debug(f"Rejected calendar_week_rule={calendar_week_rule!r}")
            raise ConfigurationError(f"Unsupported CalendarWeekRule: {calendar_week_rule}") from e
        if isinstance(first_day_of_week, LegacyDayOfWeek):
            first_day_of_week = first_day_of_week.to_iso()
        logger.debug(f"Legacy rule {calendar_week_rule!r} mapped to min_days_in_first_week={min_days}")
        return cls(min_days, first_day_of_week, True)

    def get_local_date(
        self,
        week_year: int,
        week_of_week_year: int,
        day_of_week: IsoDayOfWeek | int,
        calendar: CalendarSystem | None = None,
    ) -> LocalDate:
        calendar = calendar or CalendarSystem.iso()
        self._validate_week_year(week_year, calendar)
        if not 1 <= int(day_of_week) <= 7:
            logger.debug(f"Rejected day_of_week={day_of_week}")
            raise RangeError("dayOfWeek", int(day_of_week), 1, 7)

        max_weeks = self.get_weeks_in_week_year(week_year, calendar)
        if not 1 <= week_of_week_year <= max_weeks:
            logger.debug(f"Rejected week_of_week_year={week_of_week_year} for week-year {week_year}")
            raise RangeError("weekOfWeekYear", week_of_week_year, 1, max_weeks)

        start_of_week_year = self._get_week_year_days_since_epoch(calendar, week_year)
        # 0 when already on the first day of the week, up to 6 for the last day.
        days_into_week = (int(day_of_week) - self.first_day_of_week) % 7
        days = start_of_week_year + (week_of_week_year - 1) * 7 + days_into_week
        if days < calendar.min_days or days > calendar.max_days:
            logger.debug(f"Week date {week_year}/{week_of_week_year}/{day_of_week} falls outside {calendar.id}")
            raise RangeError("daysSinceEpoch", days, calendar.min_days, calendar.max_days)
        result = LocalDate.from_days_since_epoch(days, calendar)

        # With irregular weeks a short boundary week has missing days; a request for one
        # of those lands in a different week-year. Only dates whose calendar year differs
        # from the requested week-year can be affected.
        if self.irregular_weeks and result.year != week_year:
            if self.get_week_year(result) != week_year:
                logger.debug(f"Week date {week_year}/{week_of_week_year}/{day_of_week} is in a short week gap")
                raise InvalidCombinationError(week_year, week_of_week_year, int(day_of_week))
        return result

    def get_week_of_week_year(self, date: LocalDate) -> int:
        week_year = self.get_week_year(date)
        # For irregular rules this start may precede the clipped start of the week-year,
        # which doesn't change the week number once the week-year is known.
        start_of_week_year = self._get_week_year_days_since_epoch(date.calendar, week_year)
        return (date.days_since_epoch - start_of_week_year) // 7 + 1

    def get_weeks_in_week_year(self, week_year: int, calendar: CalendarSystem | None = None) -> int:
        calendar = calendar or CalendarSystem.iso()
        self._validate_week_year(week_year, calendar)
        start_of_week_year = self._get_week_year_days_since_epoch(calendar, week_year)
        start_of_calendar_year = calendar.start_of_year_in_days(week_year)
        # +1 if the week-year starts on December 31st of the previous year, -1 if on January 2nd.
        extra_days_at_start = start_of_calendar_year - start_of_week_year
        # Irregular rules round the final short week up. Regular rules can take up to
        # min_days_in_first_week - 1 days of the next calendar year.
        extra_days_at_end = 6 if self.irregular_weeks else self.min_days_in_first_week - 1
        days_in_year = calendar.days_in_year(week_year)
        return (days_in_year + extra_days_at_start + extra_days_at_end) // 7

    def get_week_year(self, date: LocalDate) -> int:
        calendar = date.calendar
        calendar_year = date.year
        start_of_week_year = self._get_week_year_days_since_epoch(calendar, calendar_year)
        days_since_epoch = date.days_since_epoch
        if days_since_epoch < start_of_week_year:
            # e.g. January 1st 2011 under ISO: week-year 2011 starts on January 3rd.
            return calendar_year - 1

        # Irregular rules never push a date into the next week-year.
        if self.irregular_weeks:
            return calendar_year

        weeks_in_week_year = self.get_weeks_in_week_year(calendar_year, calendar)
        start_of_next_week_year = start_of_week_year + weeks_in_week_year * 7
        return calendar_year if days_since_epoch < start_of_next_week_year else calendar_year + 1

    def _validate_week_year(self, week_year: int, calendar: CalendarSystem) -> None:
        """Check that at least one day of the week-year lies inside the calendar's range."""
        if calendar.min_year < week_year < calendar.max_year:
            return
        min_calendar_year_days = self._get_week_year_days_since_epoch(calendar, calendar.min_year)
        # If week-year min_year starts after the calendar does, the first days belong to min_year - 1.
        min_week_year = calendar.min_year - 1 if min_calendar_year_days > calendar.min_days else calendar.min_year
        max_calendar_year_days = self._get_week_year_days_since_epoch(calendar, calendar.max_year + 1)
        # If week-year max_year + 1 would start after the last supported day, it has no days.
        if self.irregular_weeks or max_calendar_year_days > calendar.max_days:
            max_week_year = calendar.max_year
        else:
            max_week_year = calendar.max_year + 1
        if not min_week_year <= week_year <= max_week_year:
            logger.debug(f"Rejected week_year={week_year} for calendar {calendar.id}")
            raise RangeError("weekYear", week_year, min_week_year, max_week_year)

    def _get_week_year_days_since_epoch(self, calendar: CalendarSystem, week_year: int) -> int:
        """Return the first day of week 1 of a week-year as days since epoch.

        For irregular rules this is where the week-year would start if its weeks were
        regular, so the result is always a first_day_of_week and lies between 6 days
        before and 7 days after January 1st.
        """
        start_of_calendar_year = calendar.start_of_year_in_days(week_year)
        start_of_year_day_of_week = day_of_week_from_days(start_of_calendar_year)
        # Days of the week containing January 1st that fall in the previous calendar year.
        days_into_week = (start_of_year_day_of_week - self.first_day_of_week) % 7
        start_of_week_containing_start_of_year = start_of_calendar_year - days_into_week
        if 7 - days_into_week >= self.min_days_in_first_week:
            return start_of_week_containing_start_of_year
        return start_of_week_containing_start_of_year + 7

    def __repr__(self) -> str:
        return (
            f"RegularWeekYearRule(min_days_in_first_week={self.min_days_in_first_week}, "
            f"first_day_of_week={self.first_day_of_week.name}, irregular_weeks={self.irregular_weeks})"
        )


_ISO_RULE = RegularWeekYearRule(4, IsoDayOfWeek.MONDAY, False)
