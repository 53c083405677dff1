from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from ..services import DashboardContext
from .main_window import MainWindow
from .styles.theme import apply_palette

logger = logging.getLogger(__name__)


def run_gui() -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    settings = get_settings()
    colors = AppPalette()
    apply_palette(app, colors)

    context = DashboardContext(settings=settings)
    logger.info("Loaded %d calendar entries from %s", len(context.store), settings.storage.path)

    window = MainWindow(context=context, colors=colors)
    window.show()
    sys.exit(app.exec())
