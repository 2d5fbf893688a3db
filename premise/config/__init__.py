"""
Configuration package.

Exports the singleton settings instance for easy importing.

Usage:
    from premise.config import settings

    print(settings.database_url)
"""

from premise.config.settings import settings, get_settings, print_settings

__all__ = [
    "settings",
    "get_settings",
    "print_settings",
]
