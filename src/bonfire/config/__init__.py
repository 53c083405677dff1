"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, CalendarSettings, LoggingSettings, StorageSettings, UiSettings, get_settings, load_settings
from .theme import AppPalette

__all__ = [
    "AppSettings",
    "AppPalette",
    "CalendarSettings",
    "LoggingSettings",
    "StorageSettings",
    "UiSettings",
    "get_settings",
    "load_settings",
]
