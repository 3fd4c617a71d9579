"""Diagnostic logging setup.

Diagnostics go to stderr. Stdout carries the mirrored outage events, so
the two streams can be redirected separately.
"""

import logging
import sys
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", quiet_loggers: Optional[List[str]] = None) -> None:
    """Configure the root logger for Netwatch.

    Args:
        level: Log level name; unknown names fall back to INFO.
        quiet_loggers: Extra logger names to hold at WARNING.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stderr)

    for logger_name in ["asyncio", *(quiet_loggers or [])]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
