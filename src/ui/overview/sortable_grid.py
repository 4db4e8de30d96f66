"""
SortableGrid - generic renderer for column descriptors.

Lays out a header row, one row per item and a totals row in a QGridLayout.
Clicking a header sorts by that column: the first click uses the column's
default direction, clicking the same header again flips it.
"""

import logging
from typing import Dict, Iterable, List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QGridLayout, QWidget

from model.city import City
from ui.overview.action_context import OverviewActionContext
from ui.overview.columns import CityColumn
from ui.ui_utils import ClickableLabel, on_click

logger = logging.getLogger(__name__)

HEADER_ROW = 0
ASCENDING_MARK = " ▲"
DESCENDING_MARK = " ▼"


class SortableGrid(QWidget):
    """
    Table of cities built entirely from CityColumn descriptors.

    Signals:
        sort_changed: Emitted with (column name, descending) after each sort
    """

    sort_changed = Signal(str, bool)

    def __init__(
        self,
        columns: Iterable[CityColumn],
        context: OverviewActionContext,
        icon_size: float = 30,
        parent=None,
    ):
        super().__init__(parent)
        self._columns: List[CityColumn] = list(columns)
        self._context = context
        self._icon_size = icon_size
        self._items: List[City] = []
        self._sort_column: Optional[CityColumn] = None
        self._sort_descending = False

        self._header_widgets: Dict[str, QWidget] = {}
        self._body_widgets: List[Dict[str, Optional[QWidget]]] = []
        self._totals_widgets: Dict[str, Optional[QWidget]] = {}

        self._layout = QGridLayout(self)
        self._layout.setHorizontalSpacing(8)
        self._layout.setVerticalSpacing(4)

    @property
    def columns(self) -> List[CityColumn]:
        return list(self._columns)

    @property
    def sort_column(self) -> Optional[CityColumn]:
        return self._sort_column

    @property
    def sort_descending(self) -> bool:
        return self._sort_descending

    def column(self, name: str) -> Optional[CityColumn]:
        for column in self._columns:
            if column.name == name:
                return column
        return None

    def set_items(self, items: Iterable[City]) -> None:
        self._items = list(items)
        self._rebuild()

    def sort_by(self, name: str, descending: Optional[bool] = None) -> bool:
        """Sort by column ``name``; returns False if no such column is shown."""
        column = self.column(name)
        if column is None:
            logger.warning(f"Cannot sort by unknown or hidden column '{name}'")
            return False

        if descending is None:
            if column is self._sort_column:
                descending = not self._sort_descending
            else:
                descending = column.default_descending

        self._sort_column = column
        self._sort_descending = descending
        self._rebuild()
        logger.debug(f"Sorted overview by {name} ({'descending' if descending else 'ascending'})")
        self.sort_changed.emit(name, descending)
        return True

    def sorted_items(self) -> List[City]:
        if self._sort_column is None:
            return list(self._items)
        return sorted(self._items, key=self._sort_column.sort_key, reverse=self._sort_descending)

    def header_widget(self, name: str) -> Optional[QWidget]:
        return self._header_widgets.get(name)

    def cell(self, row: int, name: str) -> Optional[QWidget]:
        """Body widget in ``row`` (0-based, current sort order) for column ``name``."""
        return self._body_widgets[row].get(name)

    def totals_widget(self, name: str) -> Optional[QWidget]:
        return self._totals_widgets.get(name)

    def row_count(self) -> int:
        return len(self._body_widgets)

    def _clear(self):
        while self._layout.count():
            item = self._layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.setParent(None)
                widget.deleteLater()
        for row in range(self._layout.rowCount()):
            self._layout.setRowMinimumHeight(row, 0)
        self._header_widgets.clear()
        self._body_widgets.clear()
        self._totals_widgets.clear()

    def _rebuild(self):
        self._clear()
        self._build_header()

        items = self.sorted_items()
        for index, city in enumerate(items):
            self._build_row(HEADER_ROW + 1 + index, city)

        self._build_totals(HEADER_ROW + 1 + len(items), items)
        self._equalize_heights()

    def _build_header(self):
        for col, column in enumerate(self._columns):
            widget = column.header_icon(self._icon_size)
            if widget is None:
                widget = ClickableLabel(column.header_text)
                widget.setAlignment(Qt.AlignmentFlag.AlignCenter)

            tooltip = column.header_text
            if column is self._sort_column:
                tooltip += DESCENDING_MARK if self._sort_descending else ASCENDING_MARK
            widget.setToolTip(tooltip)
            if hasattr(widget, "clicked"):
                on_click(widget, lambda name=column.name: self.sort_by(name))

            self._layout.addWidget(widget, HEADER_ROW, col, column.align)
            self._layout.setColumnStretch(col, 1 if column.fill_x or column.expand_x else 0)
            self._header_widgets[column.name] = widget

    def _build_row(self, row: int, city: City):
        cells: Dict[str, Optional[QWidget]] = {}
        for col, column in enumerate(self._columns):
            widget = column.entry_widget(city, self._icon_size, self._context)
            cells[column.name] = widget
            if widget is not None:
                self._layout.addWidget(widget, row, col, column.align)
        self._body_widgets.append(cells)

    def _build_totals(self, row: int, items: List[City]):
        for col, column in enumerate(self._columns):
            widget = column.totals_widget(items)
            self._totals_widgets[column.name] = widget
            if widget is not None:
                self._layout.addWidget(widget, row, col, column.align)

    def _equalize_heights(self):
        """Give every body row the height of the tallest cell in an equalizing column."""
        names = [column.name for column in self._columns if column.equalize_height]
        if not names or not self._body_widgets:
            return
        tallest = 0
        for cells in self._body_widgets:
            for name in names:
                widget = cells.get(name)
                if widget is not None:
                    tallest = max(tallest, widget.sizeHint().height())
        for index in range(len(self._body_widgets)):
            self._layout.setRowMinimumHeight(HEADER_ROW + 1 + index, tallest)
