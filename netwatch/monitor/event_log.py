"""Append-only outage event log.

The event log is a plain text file meant for people: one line per event,
no structure beyond the message templates below. The file is opened and
closed on every write so it can be rotated or inspected at any time.
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

DROPPED_MSG = "Connection dropped at: {time} on {date}"
RESTORED_MSG = "Connection restored at: {time} on {date}. Outage duration: {seconds} seconds"
NEW_DAY_MSG = "{weekday}, {day} {month}, {year}"

TIME_FORMAT = "%H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

# English names regardless of the process locale
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class EventLogError(Exception):
    """Raised when an event cannot be written to the log file.

    This is fatal: the monitor must not keep running without a log.
    """

    pass


def format_dropped(dropped_at: datetime) -> str:
    """Format the message for a lost connection."""
    return DROPPED_MSG.format(
        time=dropped_at.strftime(TIME_FORMAT),
        date=dropped_at.strftime(DATE_FORMAT),
    )


def format_restored(restored_at: datetime, outage_seconds: int) -> str:
    """Format the message for a restored connection."""
    return RESTORED_MSG.format(
        time=restored_at.strftime(TIME_FORMAT),
        date=restored_at.strftime(DATE_FORMAT),
        seconds=outage_seconds,
    )


def format_new_day(day: date) -> str:
    """Format the day-boundary marker, e.g. ``Sunday, 9 June, 2024``."""
    return NEW_DAY_MSG.format(
        weekday=WEEKDAYS[day.weekday()],
        day=day.day,
        month=MONTHS[day.month - 1],
        year=day.year,
    )


def log_event(path: Union[str, Path], message: str) -> None:
    """Append a single message line to the event log.

    Args:
        path: Event log file.
        message: Fully formatted message, without line terminator.

    Raises:
        EventLogError: If the file cannot be opened or written.
    """
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(message)
            f.write("\n")
    except (OSError, ValueError, TypeError) as e:
        raise EventLogError(f"Failed to write to event log {path}: {e}") from e

    logger.debug(f"Logged event: {message}")


def log_new_day(path: Union[str, Path], day: date) -> None:
    """Write the day-boundary marker for ``day`` to the event log."""
    log_event(path, format_new_day(day))
