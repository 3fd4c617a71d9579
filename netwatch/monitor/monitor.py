"""Connection Monitor Service - Records network outages to an event log."""

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum
from typing import Callable, List, Optional, Tuple

from rich.console import Console

from .config import MonitorConfig
from .event_log import (
    EventLogError,
    format_dropped,
    format_new_day,
    format_restored,
    log_event,
    log_new_day,
)
from .probe import is_online

logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Kinds of entries written to the event log."""
    DAY_BOUNDARY = "day_boundary"
    DROPPED = "dropped"
    RESTORED = "restored"


@dataclass(frozen=True)
class MonitorEvent:
    """A single event produced by a monitor iteration."""
    kind: EventKind
    timestamp: datetime
    message: str
    outage_seconds: Optional[int] = None

    @property
    def mirrored(self) -> bool:
        """Whether the event is also shown on the console."""
        return self.kind in (EventKind.DROPPED, EventKind.RESTORED)


@dataclass(frozen=True)
class MonitorState:
    """State carried between monitor iterations.

    ``offline_since`` is None while online; otherwise it holds the time
    the current outage was first observed.
    """
    offline_since: Optional[datetime] = None
    last_announced_date: Optional[date] = None

    @property
    def online(self) -> bool:
        return self.offline_since is None


def outage_seconds(dropped_at: datetime, restored_at: datetime) -> int:
    """Whole seconds between drop and restore, never negative."""
    return max(0, int((restored_at - dropped_at).total_seconds()))


def advance(
    state: MonitorState, online: bool, now: datetime
) -> Tuple[MonitorState, List[MonitorEvent]]:
    """Apply one probe result to the monitor state.

    Args:
        state: State from the previous iteration.
        online: Probe verdict for this iteration.
        now: Current time, used for every timestamp in this iteration.

    Returns:
        Tuple of (new state, events to record in order).
    """
    events: List[MonitorEvent] = []

    today = now.date()
    if today != state.last_announced_date:
        events.append(MonitorEvent(EventKind.DAY_BOUNDARY, now, format_new_day(today)))
        state = replace(state, last_announced_date=today)

    if not online and state.online:
        events.append(MonitorEvent(EventKind.DROPPED, now, format_dropped(now)))
        state = replace(state, offline_since=now)
    elif online and not state.online:
        seconds = outage_seconds(state.offline_since, now)
        events.append(
            MonitorEvent(EventKind.RESTORED, now, format_restored(now, seconds), seconds)
        )
        state = replace(state, offline_since=None)

    return state, events


class ConnectionMonitorService:
    """Service that watches local connectivity and logs outages."""

    def __init__(
        self,
        config: MonitorConfig,
        prober: Optional[Callable[[], bool]] = None,
        clock: Callable[[], datetime] = datetime.now,
        console: Optional[Console] = None,
    ):
        self.config = config
        self.prober = prober or (lambda: is_online(config.ignore_interfaces))
        self.clock = clock
        # Event lines are never wrapped at the terminal width
        self.console = console or Console(
            highlight=False, markup=False, emoji=False, soft_wrap=True
        )
        self.running = False

        self.state = MonitorState()

    def _record(self, event: MonitorEvent) -> None:
        """Write an event to the log file and mirror it if needed."""
        if event.kind == EventKind.DAY_BOUNDARY:
            log_new_day(self.config.log_file, event.timestamp.date())
        else:
            log_event(self.config.log_file, event.message)

        if event.mirrored:
            self.console.print(event.message)

    def check_once(self) -> List[MonitorEvent]:
        """Run a single probe and record any resulting events."""
        online = self.prober()
        now = self.clock()

        previous = self.state
        self.state, events = advance(previous, online, now)

        if previous.online != self.state.online:
            logger.info(
                f"Connectivity changed: {'online' if previous.online else 'offline'} -> "
                f"{'online' if self.state.online else 'offline'}"
            )

        for event in events:
            self._record(event)

        return events

    async def run_loop(self) -> None:
        """Main monitoring loop."""
        logger.info(
            f"Starting connection monitor (log={self.config.log_file}, "
            f"interval={self.config.check_interval}s)"
        )

        while self.running:
            try:
                self.check_once()
            except EventLogError:
                raise
            except Exception as e:
                logger.error(f"Error in monitoring loop: {e}")

            await asyncio.sleep(self.config.check_interval)

    def run(self) -> None:
        """Start the monitoring service and block until interrupted."""
        self.running = True

        try:
            asyncio.run(self.run_loop())
        except KeyboardInterrupt:
            logger.info("Shutting down connection monitor...")
        except EventLogError as e:
            logger.critical(f"Event log unavailable, stopping: {e}")
            raise
        finally:
            self.running = False
            if not self.state.online:
                logger.warning(
                    f"Stopped during an outage that began at {self.state.offline_since}; "
                    f"it will not be recorded as restored"
                )
