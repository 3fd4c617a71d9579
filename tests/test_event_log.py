"""Tests for event log formatting and writing."""

from datetime import date, datetime

import pytest

from netwatch.monitor.event_log import (
    EventLogError,
    format_dropped,
    format_new_day,
    format_restored,
    log_event,
    log_new_day,
)
from tests.conftest import read_lines


def test_format_dropped():
    assert format_dropped(datetime(2024, 6, 9, 10, 0, 0)) == "Connection dropped at: 10:00:00 on 2024-06-09"


def test_format_restored():
    message = format_restored(datetime(2024, 6, 9, 10, 0, 45), 45)
    assert message == "Connection restored at: 10:00:45 on 2024-06-09. Outage duration: 45 seconds"


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2024, 6, 9), "Sunday, 9 June, 2024"),
        (date(2024, 1, 1), "Monday, 1 January, 2024"),
        (date(2023, 12, 30), "Saturday, 30 December, 2023"),
    ],
)
def test_format_new_day(day, expected):
    assert format_new_day(day) == expected


def test_log_event_appends_lines(log_path):
    log_event(log_path, "first")
    log_event(log_path, "second")

    assert read_lines(log_path) == ["first", "second"]


def test_log_event_keeps_existing_content(log_path):
    log_path.write_text("earlier entry\n", encoding="utf-8")

    log_event(log_path, "later entry")

    assert read_lines(log_path) == ["earlier entry", "later entry"]


def test_log_event_writes_utf8(log_path):
    log_event(log_path, "Verbindung unterbrochen – ü")

    assert log_path.read_bytes() == "Verbindung unterbrochen – ü\n".encode("utf-8")


def test_log_event_unwritable_path_is_fatal(tmp_path):
    with pytest.raises(EventLogError) as excinfo:
        log_event(tmp_path / "missing" / "log.txt", "lost")

    assert isinstance(excinfo.value.__cause__, OSError)


def test_log_new_day(log_path):
    log_new_day(log_path, date(2024, 6, 9))

    assert read_lines(log_path) == ["Sunday, 9 June, 2024"]


@pytest.mark.parametrize("path", ["bad\0name.txt", None])
def test_log_event_invalid_path_is_fatal(path):
    with pytest.raises(EventLogError) as excinfo:
        log_event(path, "lost")

    assert isinstance(excinfo.value.__cause__, (ValueError, TypeError))
