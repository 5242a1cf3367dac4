"""Logger configuration for weekyears.

The library only emits through loguru; applications (and the CLI) decide
where the output goes by calling setup_logger. Sinks added here only accept
records from the weekyears and cli packages, so a host application's own
loguru output is left alone.
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> <level>{level: <7}</level> <cyan>{name}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

_OWN_PACKAGES = ("weekyears", "cli")


def _is_own_record(record) -> bool:
    name = record["name"] or ""
    return name.split(".", 1)[0] in _OWN_PACKAGES


def setup_logger(
    level: str = "WARNING",
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> list[int]:
    """Replace existing loguru sinks with weekyears console and file sinks.

    Args:
        level: Minimum level name (case-insensitive)
        log_file: Optional path to a rotating log file; always written at DEBUG
            so failed validations can be traced after the fact
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")

    Returns:
        The ids of the sinks that were added
    """
    logger.remove()
    console_level = level.upper()
    sink_ids = [
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=console_level,
            filter=_is_own_record,
            colorize=sys.stderr.isatty(),
        )
    ]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        sink_ids.append(
            logger.add(
                log_path,
                format=FILE_FORMAT,
                level="DEBUG",
                filter=_is_own_record,
                rotation=rotation,
                retention=retention,
                compression="zip",
                encoding="utf-8",
            )
        )

    logger.debug(f"Logger initialized (console={console_level}, file={log_file or '-'})")
    return sink_ids
