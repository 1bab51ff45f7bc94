"""Configuration management."""

from .settings import (
    PaginationSettings,
    Settings,
    SettingsManager,
    get_settings,
)

__all__ = [
    "PaginationSettings",
    "Settings",
    "SettingsManager",
    "get_settings",
]
