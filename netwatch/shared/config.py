"""Helpers for reading Netwatch settings files."""

from pathlib import Path
from typing import Union

import yaml
from dotenv import load_dotenv


def load_yaml_config(config_path: Union[str, Path], load_env: bool = True) -> dict:
    """Read a YAML settings file into a dictionary.

    An empty file yields an empty dictionary.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the top level of the file is not a mapping.
    """
    if load_env:
        load_dotenv()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a mapping of settings, got {type(data).__name__}")
    return data


def get_log_level(config: dict) -> str:
    """Upper-cased log level name from settings, INFO when unset."""
    return str(config.get("log_level") or "INFO").upper()
