"""
Main Window Initialization

Creates and runs the overview window around the city table.
Separated from main entry point for better code organization.
"""

import sys
import logging

from PySide6.QtWidgets import QApplication, QMainWindow

from common.config import Config
from common.constants import APP_NAME
from common.utils.async_logging import shutdown_async_logging
from model.city import City
from model.game_info import GameInfo
from ui.images import ImageGetter
from ui.overview.action_context import OverviewActions
from ui.overview.city_overview_tab import CityOverviewTab

logger = logging.getLogger(__name__)

STATUS_MESSAGE_TIMEOUT_MS = 5000


class OverviewWindow(QMainWindow):
    """Top-level window hosting the cities tab and reacting to cell clicks."""

    def __init__(self, game_info: GameInfo, config: Config, parent=None):
        super().__init__(parent)
        self.setWindowTitle(APP_NAME)

        self.actions = OverviewActions(self)
        self.actions.city_requested.connect(self._on_city_requested)
        self.actions.notification_requested.connect(self._on_notification)
        self.actions.unit_selected.connect(self._on_unit_selected)

        self.city_tab = CityOverviewTab(game_info, config, self.actions)
        self.setCentralWidget(self.city_tab)
        self.resize(1024, 600)

    def _on_city_requested(self, city: City):
        logger.info(f"City screen requested for {city.name}")
        self.statusBar().showMessage(f"Opening {city.name}", STATUS_MESSAGE_TIMEOUT_MS)

    def _on_notification(self, message: str):
        logger.info(f"Notification: {message}")
        self.statusBar().showMessage(message, STATUS_MESSAGE_TIMEOUT_MS)

    def _on_unit_selected(self, identifier: str):
        logger.info(f"Units overview requested for {identifier}")
        self.statusBar().showMessage(f"Selected unit {identifier}", STATUS_MESSAGE_TIMEOUT_MS)


def create_and_run_gui(config: Config, game_info: GameInfo) -> int:
    """
    Create and run the main GUI application.

    Args:
        config: Application config object
        game_info: Loaded game snapshot

    Returns:
        Exit code for the application
    """
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)

    ImageGetter.set_icon_directory(config.icon_directory)

    window = OverviewWindow(game_info, config)
    window.show()

    exit_code = app.exec()
    logger.info(f"Application exiting with code {exit_code}")
    shutdown_async_logging()
    return exit_code
