"""Configuration management for hmcal."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(os.environ.get("HMCAL_CONFIG_DIR", Path.home() / ".config"))
CONFIG_FILE = CONFIG_DIR / "hmcal.conf"

LIST_FORMATS = ("table", "json", "markdown")
DISPLAY_MODES = ("q", "month", "year")


@dataclass
class Config:
    """hmcal configuration."""

    cache_dir: str = str(CONFIG_DIR)
    # Empty means Argentina-Datos
    default_country: str = ""
    list_format: str = "table"
    display_mode: str = "q"

    @property
    def cache_path(self) -> Path:
        return Path(self.cache_dir).expanduser()

    @property
    def country(self) -> str | None:
        return self.default_country or None


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from hmcal.conf."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "cache_dir":
                if value:
                    config.cache_dir = value
            case "default_country":
                config.default_country = value.strip().upper()
            case "list_format":
                if value.lower() in LIST_FORMATS:
                    config.list_format = value.lower()
                else:
                    logger.warning(f"Ignoring invalid LIST_FORMAT {value!r}")
            case "display_mode":
                if value.lower() in DISPLAY_MODES:
                    config.display_mode = value.lower()
                else:
                    logger.warning(f"Ignoring invalid DISPLAY_MODE {value!r}")

    return config
