"""Connection Monitor - Logs network outages and day boundaries."""

__version__ = "0.1.0"

from .event_log import EventLogError
from .monitor import ConnectionMonitorService, MonitorEvent, MonitorState, advance


def main():
    """Entry point for the connection monitor."""
    from .config import load_config
    from netwatch.shared.logging import setup_logging

    config = load_config()
    setup_logging(config.log_level)

    service = ConnectionMonitorService(config)
    service.run()


__all__ = [
    "ConnectionMonitorService",
    "EventLogError",
    "MonitorEvent",
    "MonitorState",
    "advance",
    "main",
]
