"""
UI Utility Functions

Helper functions for creating the small widgets that fill overview cells:
centered labels, circled icons, tooltips and click handlers.
"""

from typing import Callable, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QCursor, QPainter, QPixmap
from PySide6.QtWidgets import QLabel, QPushButton, QWidget

LIGHT_GRAY = QColor(191, 191, 191)
TAN = QColor(210, 180, 140)
BLACK = QColor(0, 0, 0)
CLEAR = QColor(0, 0, 0, 0)

# Share of the circle diameter taken up by the icon inside it
CIRCLE_ICON_RATIO = 0.75


class ClickableLabel(QLabel):
    """QLabel with a ``clicked`` signal, used for icons that react to clicks."""

    clicked = Signal()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.clicked.emit()
        super().mouseReleaseEvent(event)


def tinted_pixmap(pixmap: QPixmap, color: QColor) -> QPixmap:
    """Return a copy of ``pixmap`` with every opaque pixel painted ``color``."""
    result = QPixmap(pixmap.size())
    result.fill(Qt.GlobalColor.transparent)

    painter = QPainter(result)
    painter.drawPixmap(0, 0, pixmap)
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceIn)
    painter.fillRect(result.rect(), color)
    painter.end()

    return result


def surround_with_circle(label: QLabel, size: float, color: QColor = LIGHT_GRAY) -> QLabel:
    """Fix ``label`` to a ``size`` square drawn as a filled circle around its icon.

    Args:
        label: Label holding an icon pixmap
        size: Circle diameter in pixels
        color: Circle fill; ``CLEAR`` draws no background

    Returns:
        The same label, for chaining
    """
    diameter = max(int(size), 1)
    pixmap = label.pixmap()
    if pixmap is not None and not pixmap.isNull():
        inner = max(int(diameter * CIRCLE_ICON_RATIO), 1)
        label.setPixmap(
            pixmap.scaled(
                inner,
                inner,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )
    label.setFixedSize(diameter, diameter)
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    label.setStyleSheet(
        f"background-color: rgba({color.red()}, {color.green()}, {color.blue()}, {color.alpha()});"
        f"border-radius: {diameter // 2}px;"
    )
    label.setProperty("circle_color", color.name(QColor.NameFormat.HexArgb))
    return label


def fit_to_size(label: QLabel, size: float) -> QLabel:
    """Scale the label's icon into a ``size`` square without any decoration."""
    side = max(int(size), 1)
    pixmap = label.pixmap()
    if pixmap is not None and not pixmap.isNull():
        label.setPixmap(
            pixmap.scaled(
                side,
                side,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )
    label.setFixedSize(side, side)
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return label


def to_centered_label(value) -> QLabel:
    label = QLabel(str(value))
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return label


def to_text_button(text: str) -> QPushButton:
    return QPushButton(text)


def add_tooltip(widget: QWidget, text: str) -> QWidget:
    widget.setToolTip(text)
    return widget


def on_click(widget: QWidget, callback: Callable[[], None]) -> QWidget:
    """Connect a no-argument callback to the widget's ``clicked`` signal."""
    widget.clicked.connect(lambda *_: callback())
    widget.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
    return widget


def icon_key(widget: Optional[QWidget]) -> Optional[str]:
    """Resource key an icon widget was created from, or None."""
    if widget is None:
        return None
    return widget.property("icon_key")
