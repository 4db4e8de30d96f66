"""
Icon lookup for the overview screens.

Icons are PNG files below a configurable directory, addressed by keys such
as ``StatIcons/Food`` or ``OtherIcons/Puppet``. A missing icon is not an
error: every getter returns None and the caller renders text or nothing.
"""

import logging
import os
from typing import Dict, Optional

from PySide6.QtGui import QPixmap

from common.constants import (
    BUILDING_ICONS,
    ICON_EXTENSION,
    OTHER_ICONS,
    RESOURCE_ICONS,
    STAT_ICONS,
    UNIT_ICONS,
)
from ui.ui_utils import CLEAR, ClickableLabel, LIGHT_GRAY, surround_with_circle

logger = logging.getLogger(__name__)


class ImageGetter:
    """Process-wide icon cache keyed by resource key."""

    _icon_directory: str = ""
    _cache: Dict[str, Optional[QPixmap]] = {}

    @classmethod
    def set_icon_directory(cls, path: str) -> None:
        cls._icon_directory = path or ""
        cls._cache.clear()
        logger.info(f"Icon directory set to: {cls._icon_directory}")

    @classmethod
    def icon_directory(cls) -> str:
        return cls._icon_directory

    @classmethod
    def _icon_path(cls, key: str) -> str:
        return os.path.join(cls._icon_directory, *key.split("/")) + ICON_EXTENSION

    @classmethod
    def get_pixmap(cls, key: str) -> Optional[QPixmap]:
        if key in cls._cache:
            return cls._cache[key]

        pixmap = None
        path = cls._icon_path(key)
        if cls._icon_directory and os.path.isfile(path):
            loaded = QPixmap(path)
            if loaded.isNull():
                logger.warning(f"Icon file could not be decoded: {path}")
            else:
                pixmap = loaded
        else:
            logger.debug(f"No icon resource for '{key}'")
        cls._cache[key] = pixmap
        return pixmap

    @classmethod
    def image_exists(cls, key: str) -> bool:
        return cls.get_pixmap(key) is not None

    @classmethod
    def get_image(cls, key: str) -> Optional[ClickableLabel]:
        """A label showing the icon ``key`` at its natural size, or None."""
        pixmap = cls.get_pixmap(key)
        if pixmap is None:
            return None
        label = ClickableLabel()
        label.setPixmap(pixmap)
        label.setProperty("icon_key", key)
        return label

    @classmethod
    def get_stat_icon(cls, name: str) -> Optional[ClickableLabel]:
        return cls.get_image(f"{STAT_ICONS}/{name}")

    @classmethod
    def get_unit_icon(cls, name: str) -> Optional[ClickableLabel]:
        return cls.get_image(f"{UNIT_ICONS}/{name}")

    @classmethod
    def get_construction_portrait(cls, name: str, size: float) -> Optional[ClickableLabel]:
        """Circled icon for a unit, building or perpetual construction such as "Gold"."""
        for category in (UNIT_ICONS, BUILDING_ICONS, OTHER_ICONS, STAT_ICONS):
            image = cls.get_image(f"{category}/{name}")
            if image is not None:
                return surround_with_circle(image, size, LIGHT_GRAY)
        return None

    @classmethod
    def get_resource_portrait(cls, name: str, size: float) -> Optional[ClickableLabel]:
        image = cls.get_image(f"{RESOURCE_ICONS}/{name}")
        if image is None:
            return None
        return surround_with_circle(image, size, CLEAR)
