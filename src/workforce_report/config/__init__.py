"""Configuration management for Workforce Report.

Usage:
    >>> from workforce_report.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.LOG_LEVEL)
"""

from workforce_report.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
