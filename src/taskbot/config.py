"""Configuration management for Taskbot."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TASKBOT_HOME = Path(os.environ.get("TASKBOT_HOME", Path.home() / "taskbot"))
CONFIG_FILE = TASKBOT_HOME / "config" / "taskbot.conf"
DATA_DIR = TASKBOT_HOME / "data"

DEFAULT_BOT_NAME = "Xzzzbot"


@dataclass
class Config:
    """Taskbot configuration."""

    data_file: str = ""
    bot_name: str = DEFAULT_BOT_NAME
    log_level: str = "WARNING"

    @property
    def data_path(self) -> Path:
        """Resolved task file location."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DATA_DIR / "tasks.json"


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from taskbot.conf file."""
    config = Config()
    config_file = path or CONFIG_FILE

    if not config_file.exists():
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
            case "data_file":
                config.data_file = value
            case "bot_name":
                if value:
                    config.bot_name = value
            case "log_level":
                level = value.upper()
                if isinstance(logging.getLevelName(level), int):
                    config.log_level = level
                else:
                    logger.warning(f"Unknown LOG_LEVEL {value!r}, keeping {config.log_level}")
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
