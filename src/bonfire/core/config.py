from __future__ import annotations

from pathlib import Path
from platformdirs import user_data_dir

APP_NAME = "Bonfire"
APP_AUTHOR = "Bonfire"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))
STORE_FILE = DATA_DIR / "dashboard.json"
LOG_DIR = DATA_DIR / "logs"
STORAGE_KEY = "personal-dashboard-events"
