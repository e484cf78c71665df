import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from core.app_settings import AppSettingsController
from ui.app_settings import AppSettingsDialog
from utils.logger import logger


def main():
    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("FeedReader")
    app.setOrganizationName("FeedReader")

    log_file = logger.enable_file_logging(Path("logs"))
    if log_file:
        logger.info(f"Logging to {log_file}", source="Main")

    controller = AppSettingsController()
    logger.debug(repr(controller), source="Main")

    dialog = AppSettingsDialog(controller=controller)
    dialog.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
