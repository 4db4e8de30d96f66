"""
Actions that overview cells may trigger when clicked.

Column descriptors only see the ``OverviewActionContext`` protocol, never a
concrete screen, so the host decides what "open a city" actually means.
"""

import logging
from typing import Protocol

from PySide6.QtCore import QObject, Signal

from model.city import City

logger = logging.getLogger(__name__)


class OverviewActionContext(Protocol):
    """Capabilities handed to entry widgets for click handlers."""

    def open_city(self, city: City) -> None:
        """Navigate to the detail screen of ``city``."""
        ...

    def notify(self, message: str) -> None:
        """Show a one-time notification to the player."""
        ...

    def select_unit(self, identifier: str) -> None:
        """Switch to the units overview with the unit ``identifier`` selected."""
        ...


class OverviewActions(QObject):
    """Qt implementation of OverviewActionContext that re-emits requests as signals."""

    city_requested = Signal(object)
    notification_requested = Signal(str)
    unit_selected = Signal(str)

    def open_city(self, city: City) -> None:
        logger.debug(f"Open city requested: {city.name}")
        self.city_requested.emit(city)

    def notify(self, message: str) -> None:
        logger.debug(f"Notification requested: {message}")
        self.notification_requested.emit(message)

    def select_unit(self, identifier: str) -> None:
        logger.debug(f"Unit selection requested: {identifier}")
        self.unit_selected.emit(identifier)
