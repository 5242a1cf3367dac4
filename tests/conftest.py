"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import pytest
from loguru import logger

from weekyears.calendars.calendar_system import CalendarSystem
from weekyears.calendars.regular_week_year_rule import RegularWeekYearRule
from weekyears.calendars.types import CalendarWeekRule, IsoDayOfWeek

# A spread of regular and irregular rules, covering every minimum-days value
# and week starts other than Monday.
REGULAR_RULES = [
    RegularWeekYearRule.iso(),
    *(RegularWeekYearRule.for_min_days_in_first_week(n) for n in range(1, 8)),
    RegularWeekYearRule.for_min_days_in_first_week(1, IsoDayOfWeek.SUNDAY),
    RegularWeekYearRule.for_min_days_in_first_week(4, IsoDayOfWeek.SATURDAY),
    RegularWeekYearRule.for_min_days_in_first_week(7, IsoDayOfWeek.WEDNESDAY),
]

IRREGULAR_RULES = [
    RegularWeekYearRule.from_calendar_week_rule(kind, day)
    for kind in CalendarWeekRule
    for day in (IsoDayOfWeek.MONDAY, IsoDayOfWeek.SUNDAY, IsoDayOfWeek.THURSDAY)
]

ALL_RULES = REGULAR_RULES + IRREGULAR_RULES


@pytest.fixture(scope="session", autouse=True)
def quiet_logger():
    """Keep library debug output out of test runs."""
    logger.remove()
    yield


@pytest.fixture
def iso_calendar() -> CalendarSystem:
    return CalendarSystem.iso()


@pytest.fixture
def julian_calendar() -> CalendarSystem:
    return CalendarSystem.julian()
