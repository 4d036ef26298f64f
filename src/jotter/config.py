"""Configuration management for Jotter."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

JOTTER_HOME = Path(os.environ.get("JOTTER_HOME", Path.home() / "jotter"))
CONFIG_FILE = JOTTER_HOME / "config" / "jotter.conf"
DATA_DIR = JOTTER_HOME / "data"
DEFAULT_DATA_FILE = DATA_DIR / "tasks.txt"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Jotter configuration."""

    data_file: str = ""
    log_level: str = "WARNING"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config() -> Config:
    """Load configuration from jotter.conf file."""
    config = Config()

    if not CONFIG_FILE.exists():
        return config

    for line in CONFIG_FILE.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "log_level":
                level = value.upper()
                if level in LOG_LEVELS:
                    config.log_level = level
                else:
                    logger.warning(f"Ignoring unknown LOG_LEVEL: {value}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config


def resolve_data_file(config: Config) -> Path:
    """Resolve the task file path from config."""
    if config.data_file:
        return Path(config.data_file).expanduser()
    return DEFAULT_DATA_FILE
