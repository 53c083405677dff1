from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from ..core.config import LOG_DIR, STORAGE_KEY, STORE_FILE

load_dotenv()


@dataclass(frozen=True)
class StorageSettings:
    path: Path
    key: str


@dataclass(frozen=True)
class CalendarSettings:
    month_range: int
    rollover_interval: timedelta


@dataclass(frozen=True)
class UiSettings:
    app_name: str


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    storage: StorageSettings
    calendar: CalendarSettings
    ui: UiSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int, *, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def load_settings() -> AppSettings:
    """Build settings from the environment without caching."""

    storage = StorageSettings(
        path=Path(os.getenv("BONFIRE_STORE_PATH") or STORE_FILE),
        key=os.getenv("BONFIRE_STORE_KEY") or STORAGE_KEY,
    )

    calendar = CalendarSettings(
        month_range=_int_from_env("BONFIRE_MONTH_RANGE", 12),
        rollover_interval=timedelta(seconds=_int_from_env("BONFIRE_ROLLOVER_SECONDS", 60, minimum=1)),
    )

    ui = UiSettings(app_name=os.getenv("BONFIRE_APP_NAME", "Bonfire"))

    logging_settings = LoggingSettings(
        level=os.getenv("BONFIRE_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("BONFIRE_LOG_DIR") or LOG_DIR),
    )

    return AppSettings(storage=storage, calendar=calendar, ui=ui, logging=logging_settings)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return load_settings()
