"""Writes placeholder PNG icons so icon lookups can succeed in tests."""

import os

from PySide6.QtGui import QColor, QPixmap

ICON_KEYS = [
    "StatIcons/Food",
    "StatIcons/Production",
    "StatIcons/Gold",
    "StatIcons/Science",
    "StatIcons/Culture",
    "StatIcons/Happiness",
    "StatIcons/Faith",
    "StatIcons/Population",
    "StatIcons/Resistance",
    "OtherIcons/CityStatus",
    "OtherIcons/Puppet",
    "OtherIcons/Fire",
    "OtherIcons/Settings",
    "OtherIcons/WLTK 1",
    "OtherIcons/WLTK 2",
    "OtherIcons/Shield",
    "UnitIcons/Settler",
    "UnitIcons/Warrior",
    "UnitIcons/Legion",
    "UnitIcons/Archer",
    "BuildingIcons/Colosseum",
    "ResourceIcons/Silk",
]


def write_icons(root: str, keys=ICON_KEYS, size: int = 16) -> str:
    """Write one solid PNG per key below ``root``; requires a QGuiApplication."""
    for key in keys:
        path = os.path.join(root, *key.split("/")) + ".png"
        os.makedirs(os.path.dirname(path), exist_ok=True)
        pixmap = QPixmap(size, size)
        pixmap.fill(QColor("white"))
        if not pixmap.save(path, "PNG"):
            raise RuntimeError(f"Could not write test icon {path}")
    return root
