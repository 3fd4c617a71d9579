"""Netwatch - local network outage monitor."""

__version__ = "0.1.0"
