"""Configuration for the connection monitor."""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from netwatch.shared.config import get_log_level, load_yaml_config

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = "log.txt"
DEFAULT_CHECK_INTERVAL = 5.0


@dataclass
class MonitorConfig:
    """Configuration for connection monitoring."""

    # Event log, relative paths resolve against the working directory
    log_file: str = DEFAULT_LOG_FILE
    check_interval: float = DEFAULT_CHECK_INTERVAL  # seconds

    # Interfaces never counted as a live uplink (e.g. "docker0")
    ignore_interfaces: List[str] = field(default_factory=list)

    # Diagnostic logging
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict) -> "MonitorConfig":
        """Create config from dictionary.

        Raises:
            ValueError: If a setting has an unusable value.
        """
        log_file = data.get("log_file", DEFAULT_LOG_FILE)
        if not isinstance(log_file, str) or not log_file or "\0" in log_file:
            raise ValueError(f"log_file must be a non-empty path, got {log_file!r}")

        check_interval = float(data.get("check_interval", DEFAULT_CHECK_INTERVAL))
        if check_interval < 0:
            raise ValueError(f"check_interval must be >= 0, got {check_interval}")

        # A single name in YAML is a string, not a list of names
        ignore_interfaces = data.get("ignore_interfaces") or []
        if isinstance(ignore_interfaces, str):
            ignore_interfaces = [ignore_interfaces]

        return cls(
            log_file=log_file,
            check_interval=check_interval,
            ignore_interfaces=[str(name) for name in ignore_interfaces],
            log_level=get_log_level(data),
        )


def load_config(config_path: Optional[str] = None) -> MonitorConfig:
    """Load configuration from YAML file or environment.

    Args:
        config_path: Path to YAML config file. If not provided,
                    looks for NETWATCH_CONFIG env var,
                    then falls back to default config.

    Returns:
        MonitorConfig instance.
    """
    load_dotenv()

    if config_path is None:
        config_path = os.environ.get("NETWATCH_CONFIG")

    if config_path and os.path.exists(config_path):
        logger.debug(f"Loading config from {config_path}")
        return MonitorConfig.from_dict(load_yaml_config(config_path, load_env=False))

    # Environment variable overrides, validated like a config file
    overrides = {}

    if log_file := os.environ.get("NETWATCH_LOG_FILE"):
        overrides["log_file"] = log_file
    if interval := os.environ.get("NETWATCH_CHECK_INTERVAL"):
        overrides["check_interval"] = interval
    if log_level := os.environ.get("LOG_LEVEL"):
        overrides["log_level"] = log_level

    return MonitorConfig.from_dict(overrides)
