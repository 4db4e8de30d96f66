"""
Column Descriptor for the City Overview Table

A CityColumn bundles the static layout hints of one table column with the
functions that produce its header, sort key, cells and totals. Only the
functions that differ from the shared defaults are supplied; the rest fall
back to the numeric ``entry_value`` of the column's stat.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget

from model.city import City
from model.game_info import GameInfo
from model.stats import Stat, round_to_int
from ui.images import ImageGetter
from ui.overview.action_context import OverviewActionContext
from ui.ui_utils import fit_to_size, to_centered_label


class ColumnConfigurationError(RuntimeError):
    """A column has no way to compute its entry value."""


HeaderIconFn = Callable[["CityColumn", float], Optional[QWidget]]
EntryValueFn = Callable[["CityColumn", City], int]
EntryWidgetFn = Callable[["CityColumn", City, float, OverviewActionContext], Optional[QWidget]]
TotalsWidgetFn = Callable[["CityColumn", Iterable[City]], Optional[QWidget]]
SortKeyFn = Callable[["CityColumn", City], Any]
VisibilityFn = Callable[["CityColumn", GameInfo], bool]


def no_header_icon(column: "CityColumn", size: float) -> Optional[QWidget]:
    return None


def no_totals(column: "CityColumn", cities: Iterable[City]) -> Optional[QWidget]:
    return None


@dataclass(frozen=True)
class CityColumn:
    """One column of the city overview.

    Override functions receive the column itself as first argument so they
    can build on the defaults (e.g. a sort key that extends ``entry_value``).
    """

    name: str
    header_tip: str = ""
    align: Qt.AlignmentFlag = Qt.AlignmentFlag.AlignCenter
    fill_x: bool = False
    expand_x: bool = False
    equalize_height: bool = False
    default_descending: bool = True
    stat: Optional[Stat] = None

    get_header_icon: Optional[HeaderIconFn] = None
    get_entry_value: Optional[EntryValueFn] = None
    get_entry_widget: Optional[EntryWidgetFn] = None
    get_totals_widget: Optional[TotalsWidgetFn] = None
    get_sort_key: Optional[SortKeyFn] = None
    get_visibility: Optional[VisibilityFn] = None

    def __post_init__(self):
        if self.stat is not None or self.get_entry_value is not None:
            return
        # Without a value source every default below is unusable
        if None in (self.get_sort_key, self.get_entry_widget, self.get_totals_widget):
            raise ColumnConfigurationError(
                f"Column '{self.name}' needs a stat or an entry value override "
                "unless sort key, entry widget and totals widget are all overridden"
            )

    @property
    def header_text(self) -> str:
        return self.header_tip or self.name

    def header_icon(self, size: float) -> Optional[QWidget]:
        """Header cell icon; None means the renderer shows ``header_text``."""
        if self.get_header_icon is not None:
            return self.get_header_icon(self, size)
        icon = ImageGetter.get_stat_icon(self.name)
        if icon is None:
            return None
        return fit_to_size(icon, size)

    def entry_value(self, city: City) -> int:
        """Numeric value feeding the default sort key, cell and total."""
        if self.get_entry_value is not None:
            return self.get_entry_value(self, city)
        if self.stat is None:
            raise ColumnConfigurationError(f"Column '{self.name}' has no stat to read an entry value from")
        return round_to_int(city.get_stat(self.stat))

    def entry_widget(self, city: City, size: float, context: OverviewActionContext) -> Optional[QWidget]:
        """Body cell for ``city``; None leaves the cell empty."""
        if self.get_entry_widget is not None:
            return self.get_entry_widget(self, city, size, context)
        return to_centered_label(self.entry_value(city))

    def totals_widget(self, cities: Iterable[City]) -> Optional[QWidget]:
        """Totals row cell; None when the column has no meaningful aggregate."""
        if self.get_totals_widget is not None:
            return self.get_totals_widget(self, cities)
        return to_centered_label(sum(self.entry_value(city) for city in cities))

    def sort_key(self, city: City) -> Any:
        """Ascending sort key; the renderer reverses for descending order."""
        if self.get_sort_key is not None:
            return self.get_sort_key(self, city)
        return self.entry_value(city)

    def is_visible(self, game_info: GameInfo) -> bool:
        if self.get_visibility is not None:
            return self.get_visibility(self, game_info)
        return True
