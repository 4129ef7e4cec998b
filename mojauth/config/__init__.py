"""Configuration module for mojauth."""

from mojauth.config.loader import get_config_path, load_config
from mojauth.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
