"""Application entry point for TriviaQt."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from trivia_app.constants.about import APP_NAME, APP_VERSION
from trivia_app.constants.storage_constants import resolve_data_dir
from trivia_app.core.storage import JsonFileStore
from trivia_app.core.trivia_manager import TriviaManager
from trivia_app.ui.main_window import MainWindow
from trivia_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and storage, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    data_dir = resolve_data_dir()
    logger.info("Storing data in %s", data_dir)
    trivia_manager = TriviaManager(JsonFileStore(data_dir))

    app = QApplication(sys.argv)
    window = MainWindow(trivia_manager=trivia_manager)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
