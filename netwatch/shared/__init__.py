"""Shared utilities for Netwatch services."""

from .config import load_yaml_config
from .logging import setup_logging

__all__ = [
    "load_yaml_config",
    "setup_logging",
]
