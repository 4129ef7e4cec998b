"""One-call initialisation for applications embedding mojauth."""

from pathlib import Path

from mojauth.config.loader import load_config
from mojauth.config.schema import Config
from mojauth.core.logger import configure_logger


def setup(config_path: Path | None = None) -> Config:
    """Load configuration and install the log sinks it describes.

    The returned config is meant to be passed on to
    ``resolve_display(..., config=config)`` and
    ``AuthResponse.displayable(config=config)``.
    """
    config = load_config(config_path)
    configure_logger(config)
    return config
