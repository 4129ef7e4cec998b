"""Configuration loading utilities."""

import json
from pathlib import Path

from loguru import logger

from mojauth.config.schema import Config


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".mojauth" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from a camelCase JSON file.

    A missing or invalid file yields the defaults; ``MOJAUTH_*`` environment
    variables apply either way.
    """
    path = config_path or get_config_path()
    if not path.exists():
        return Config()

    try:
        # utf-8-sig tolerates BOM-prefixed JSON.
        data = json.loads(path.read_text(encoding="utf-8-sig"))
        if not isinstance(data, dict):
            raise ValueError("top-level JSON value must be an object")
        # Keyword init keeps the MOJAUTH_* environment sources in play.
        return Config(**data)
    except (json.JSONDecodeError, ValueError) as e:
        logger.warning(f"Failed to load config from {path}: {e}. Using default configuration.")
        return Config()
