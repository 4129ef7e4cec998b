"""mojauth - classification of Mojang authentication errors."""

__version__ = "0.1.0"
