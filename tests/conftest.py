"""Shared fixtures for monitor tests."""

import io
from datetime import datetime
from typing import Iterable, List

import pytest
from rich.console import Console


class ScriptedProbe:
    """Prober that replays a fixed sequence of verdicts."""

    def __init__(self, results: Iterable[bool]) -> None:
        self._results = iter(results)
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return next(self._results)


class ScriptedClock:
    """Clock returning a fixed sequence of datetimes."""

    def __init__(self, times: Iterable[datetime]) -> None:
        self._times = iter(times)

    def __call__(self) -> datetime:
        return next(self._times)


def read_lines(path) -> List[str]:
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), highlight=False, markup=False, emoji=False, width=200)


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "log.txt"
