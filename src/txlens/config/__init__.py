"""Configuration module for txlens.

Usage:
    from txlens.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.display_precision)
"""

from txlens.config.logging import configure_logging
from txlens.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
