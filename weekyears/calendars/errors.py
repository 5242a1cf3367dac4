"""Domain-specific errors for week-year calculations.

All errors derive from WeekYearError so callers can catch the whole family.
Every error is raised synchronously by the validating call and is never
retried internally.
"""


class WeekYearError(ValueError):
    """Base exception for all week-year errors."""

    pass


class ConfigurationError(WeekYearError):
    """Raised when a rule (or calendar) is configured with unsupported values."""

    pass


class RangeError(WeekYearError):
    """Raised when an argument falls outside its valid domain.

    Attributes:
        param_name: Name of the offending argument
        value: Value that was supplied
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
    """

    def __init__(self, param_name: str, value: int, min_value: int, max_value: int):
        self.param_name = param_name
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(f"{param_name}={value} is out of range [{min_value}, {max_value}]")


class InvalidCombinationError(WeekYearError):
    """Raised when an in-range week-date triple does not name any date.

    This happens for rules with irregular weeks when the day-of-week falls in
    the missing part of a short boundary week.

    Attributes:
        week_year: Requested week-year
        week_of_week_year: Requested week within the week-year
        day_of_week: Requested ISO day of week (1-7)
    """

    def __init__(self, week_year: int, week_of_week_year: int, day_of_week: int):
        self.week_year = week_year
        self.week_of_week_year = week_of_week_year
        self.day_of_week = day_of_week
        super().__init__(
            f"The combination of weekYear={week_year}, weekOfWeekYear={week_of_week_year} "
            f"and dayOfWeek={day_of_week} is invalid"
        )
