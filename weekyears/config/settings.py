from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weekyears.calendars.calendar_system import get_calendar
from weekyears.calendars.errors import ConfigurationError
from weekyears.calendars.rules import parse_rule


class Settings(BaseSettings):
    log_level: str = Field(default="WARNING", description="Log level for the CLI")
    log_file: str | None = Field(default=None, description="Optional log file path")
    default_rule: str = Field(
        default="iso",
        description="Week-year rule used when none is given (e.g. iso, min:1:sunday, legacy:first-day)",
    )
    default_calendar: str = Field(default="ISO", description="Calendar id used when none is given (ISO or Julian)")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="WEEKYEARS_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid WEEKYEARS_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("default_rule")
    @classmethod
    def validate_default_rule(cls, value: str) -> str:
        """Validate that the default rule name can be built."""
        try:
            parse_rule(value)
        except ConfigurationError as e:
            logger.warning(f"Invalid WEEKYEARS_DEFAULT_RULE '{value}' ({e}). Defaulting to iso.")
            return "iso"
        return value

    @field_validator("default_calendar")
    @classmethod
    def validate_default_calendar(cls, value: str) -> str:
        """Validate that the default calendar id is known."""
        try:
            get_calendar(value)
        except ConfigurationError as e:
            logger.warning(f"Invalid WEEKYEARS_DEFAULT_CALENDAR '{value}' ({e}). Defaulting to ISO.")
            return "ISO"
        return value


settings = Settings()
