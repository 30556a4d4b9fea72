"""Configuration management for Weatherbook."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.store import DEFAULT_CAPACITY

logger = logging.getLogger(__name__)

WEATHERBOOK_HOME = Path(os.environ.get("WEATHERBOOK_HOME", Path.home() / "weatherbook"))
CONFIG_FILE = WEATHERBOOK_HOME / "config" / "weatherbook.conf"


@dataclass
class Config:
    """Weatherbook configuration."""

    capacity: int = DEFAULT_CAPACITY
    log_level: str = "INFO"
    # Telegram bot settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from weatherbook.conf file."""
    config = Config()
    config_file = Path(path) if path is not None else CONFIG_FILE

    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "capacity":
                try:
                    capacity = int(value)
                except ValueError:
                    capacity = 0
                if capacity > 0:
                    config.capacity = capacity
                else:
                    logger.warning(f"Ignoring invalid CAPACITY {value!r}, using {config.capacity}")
            case "log_level":
                config.log_level = value.upper() or config.log_level
            case "telegram_bot_token":
                config.telegram_bot_token = value
            case "telegram_allowed_users":
                users = []
                for entry in value.split(","):
                    entry = entry.strip()
                    if not entry:
                        continue
                    try:
                        users.append(int(entry))
                    except ValueError:
                        logger.warning(f"Ignoring invalid TELEGRAM_ALLOWED_USERS entry {entry!r}")
                config.telegram_allowed_users = users
            case _:
                logger.debug(f"Unknown config key {key!r}")

    return config
