"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from weekyears.config.settings import Settings


def test_defaults(monkeypatch) -> None:
    for name in ("WEEKYEARS_LOG_LEVEL", "WEEKYEARS_DEFAULT_RULE", "WEEKYEARS_DEFAULT_CALENDAR", "WEEKYEARS_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "WARNING"
    assert settings.log_file is None
    assert settings.default_rule == "iso"
    assert settings.default_calendar == "ISO"


def test_reads_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("WEEKYEARS_LOG_LEVEL", "debug")
    monkeypatch.setenv("WEEKYEARS_DEFAULT_RULE", "legacy:first-day:sunday")
    monkeypatch.setenv("WEEKYEARS_DEFAULT_CALENDAR", "julian")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.default_rule == "legacy:first-day:sunday"
    assert settings.default_calendar == "julian"


def test_invalid_log_level_falls_back_to_info(monkeypatch) -> None:
    monkeypatch.setenv("WEEKYEARS_LOG_LEVEL", "loud")
    assert Settings(_env_file=None).log_level == "INFO"


@pytest.mark.parametrize("value", ["min:0", "fortnightly", "legacy:first-week"])
def test_invalid_default_rule_falls_back_to_iso(monkeypatch, value: str) -> None:
    monkeypatch.setenv("WEEKYEARS_DEFAULT_RULE", value)
    assert Settings(_env_file=None).default_rule == "iso"


def test_invalid_default_calendar_falls_back_to_iso(monkeypatch) -> None:
    monkeypatch.setenv("WEEKYEARS_DEFAULT_CALENDAR", "coptic")
    assert Settings(_env_file=None).default_calendar == "ISO"


def test_wrongly_typed_field_is_still_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, default_rule=42)
