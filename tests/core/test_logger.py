"""Tests for loguru setup."""

from loguru import logger

from weekyears.calendars.errors import ConfigurationError
from weekyears.calendars.rules import parse_rule
from weekyears.core.logger import setup_logger


def test_file_sink_records_library_debug_output(tmp_path) -> None:
    log_file = tmp_path / "logs" / "weekyears.log"
    sink_ids = setup_logger(level="error", log_file=str(log_file))
    try:
        try:
            parse_rule("fortnightly")
        except ConfigurationError:
            pass
    finally:
        logger.remove()
    assert len(sink_ids) == 2
    contents = log_file.read_text(encoding="utf-8")
    assert "Unknown rule name 'fortnightly'" in contents
    assert "weekyears.calendars.rules" in contents


def test_records_from_other_packages_are_filtered(tmp_path) -> None:
    log_file = tmp_path / "weekyears.log"
    setup_logger(log_file=str(log_file))
    try:
        logger.patch(lambda record: record.update(name="someapp.views")).info("not ours")
    finally:
        logger.remove()
    assert "not ours" not in log_file.read_text(encoding="utf-8")
