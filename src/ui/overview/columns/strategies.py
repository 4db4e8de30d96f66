"""
Concrete City Overview Columns

One factory per column. Each supplies only what differs from the
CityColumn defaults. Columns sorting by text receive the collation key
so that names order by the player's locale.
"""

from typing import Iterable, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget

from common.constants import OTHER_ICONS, STAT_ICONS
from model.city import City, CityFlag
from model.game_info import GameInfo
from model.stats import Stat, round_to_int
from ui.images import ImageGetter
from ui.overview.action_context import OverviewActionContext
from ui.overview.columns.base import CityColumn, no_header_icon, no_totals
from ui.ui_utils import (
    BLACK,
    CLEAR,
    LIGHT_GRAY,
    TAN,
    add_tooltip,
    fit_to_size,
    on_click,
    surround_with_circle,
    tinted_pixmap,
    to_centered_label,
    to_text_button,
)
from utils.collation import CollationKey

ALIGN_LEFT = Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter

SETTLER_UNIT = "Settler"
TOTAL_LABEL = "Total"

STATUS_NONE = 0
STATUS_PUPPET = 1
STATUS_RESISTANCE = 2
STATUS_BEING_RAZED = 3

STATUS_ICONS = {
    STATUS_PUPPET: f"{OTHER_ICONS}/Puppet",
    STATUS_RESISTANCE: f"{STAT_ICONS}/Resistance",
    STATUS_BEING_RAZED: f"{OTHER_ICONS}/Fire",
}

WLTK_ACTIVE_ICON = f"{OTHER_ICONS}/WLTK 1"
WLTK_HEADER_ICON = f"{OTHER_ICONS}/WLTK 2"


def circled_icon(key: str, size: float, circle_color=LIGHT_GRAY) -> Optional[QWidget]:
    """Black silhouette of icon ``key`` on a colored circle, or None if missing."""
    image = ImageGetter.get_image(key)
    if image is None:
        return None
    image.setPixmap(tinted_pixmap(image.pixmap(), BLACK))
    return surround_with_circle(image, size, circle_color)


def city_status(city: City) -> int:
    """Severity of the city's unusual state, highest applicable wins."""
    if city.is_being_razed:
        return STATUS_BEING_RAZED
    if city.is_in_resistance():
        return STATUS_RESISTANCE
    if city.is_puppet:
        return STATUS_PUPPET
    return STATUS_NONE


def _zero(column: CityColumn, city: City) -> int:
    return 0


def _name_header_icon(column: CityColumn, size: float) -> Optional[QWidget]:
    icon = ImageGetter.get_unit_icon(SETTLER_UNIT)
    if icon is None:
        return None
    return surround_with_circle(icon, size)


def _name_entry_widget(
    column: CityColumn, city: City, size: float, context: OverviewActionContext
) -> QWidget:
    button = to_text_button(city.name)
    return on_click(button, lambda: context.open_city(city))


def _name_totals_widget(column: CityColumn, cities: Iterable[City]) -> QWidget:
    return to_centered_label(TOTAL_LABEL)


def city_name_column(collate: CollationKey) -> CityColumn:
    return CityColumn(
        name="CityColumn",
        header_tip="Name",
        align=ALIGN_LEFT,
        fill_x=True,
        default_descending=False,
        get_header_icon=_name_header_icon,
        # Keeps the stat default from ever being consulted
        get_entry_value=_zero,
        get_entry_widget=_name_entry_widget,
        get_totals_widget=_name_totals_widget,
        get_sort_key=lambda column, city: collate(city.name),
    )


def _status_header_icon(column: CityColumn, size: float) -> Optional[QWidget]:
    image = ImageGetter.get_image(f"{OTHER_ICONS}/CityStatus")
    if image is None:
        return None
    return fit_to_size(image, size)


def _status_entry_widget(
    column: CityColumn, city: City, size: float, context: OverviewActionContext
) -> Optional[QWidget]:
    key = STATUS_ICONS.get(city_status(city))
    if key is None:
        return None
    image = ImageGetter.get_image(key)
    if image is None:
        return None
    return surround_with_circle(image, size * 0.7, CLEAR)


def status_column() -> CityColumn:
    return CityColumn(
        name="Status",
        header_tip="Status\n(puppet, resistance or being razed)",
        get_header_icon=_status_header_icon,
        get_entry_value=lambda column, city: city_status(city),
        get_entry_widget=_status_entry_widget,
        get_totals_widget=no_totals,
    )


def _construction_icon_widget(
    column: CityColumn, city: City, size: float, context: OverviewActionContext
) -> Optional[QWidget]:
    if not city.current_construction:
        return None
    return ImageGetter.get_construction_portrait(city.current_construction, size * 0.8)


def construction_icon_column() -> CityColumn:
    return CityColumn(
        name="ConstructionIcon",
        get_header_icon=no_header_icon,
        get_entry_value=lambda column, city: city.turns_to_construction,
        get_entry_widget=_construction_icon_widget,
        get_totals_widget=no_totals,
    )


def _construction_text_widget(
    column: CityColumn, city: City, size: float, context: OverviewActionContext
) -> QWidget:
    label = to_centered_label(city.production_text())
    label.setAlignment(ALIGN_LEFT)
    return label


def construction_column(collate: CollationKey) -> CityColumn:
    return CityColumn(
        name="Construction",
        header_tip="Current construction",
        align=ALIGN_LEFT,
        expand_x=True,
        equalize_height=True,
        default_descending=False,
        get_header_icon=lambda column, size: circled_icon(f"{OTHER_ICONS}/Settings", size),
        get_entry_value=_zero,
        get_entry_widget=_construction_text_widget,
        get_totals_widget=no_totals,
        get_sort_key=lambda column, city: collate(city.current_construction),
    )


def population_column() -> CityColumn:
    return CityColumn(
        name="Population",
        get_entry_value=lambda column, city: city.population,
    )


def stat_column(stat: Stat, show_total: bool = True) -> CityColumn:
    """Plain numeric column reading ``stat``; header icon is ``StatIcons/<stat>``."""
    return CityColumn(
        name=stat.value,
        stat=stat,
        get_totals_widget=None if show_total else no_totals,
    )


def happiness_column() -> CityColumn:
    return CityColumn(
        name=Stat.HAPPINESS.value,
        stat=Stat.HAPPINESS,
        get_entry_value=lambda column, city: round_to_int(sum(city.happiness_list.values())),
    )


def _religion_enabled(column: CityColumn, game_info: GameInfo) -> bool:
    return game_info.is_religion_enabled()


def faith_column() -> CityColumn:
    return CityColumn(
        name=Stat.FAITH.value,
        stat=Stat.FAITH,
        get_visibility=_religion_enabled,
    )


def _wltk_entry_widget(
    column: CityColumn, city: City, size: float, context: OverviewActionContext
) -> Optional[QWidget]:
    if city.is_we_love_the_king_day_active():
        image = ImageGetter.get_image(WLTK_ACTIVE_ICON)
        if image is None:
            return None
        surround_with_circle(image, size, CLEAR)
        return add_tooltip(image, f"{city.get_flag(CityFlag.WE_LOVE_THE_KING)} turns")

    if city.demanded_resource:
        resource = city.demanded_resource
        portrait = ImageGetter.get_resource_portrait(resource, size * 0.7)
        if portrait is None:
            return None
        add_tooltip(portrait, f"Demanding {resource}")
        return on_click(portrait, lambda: context.notify(f"{city.name} demands {resource}"))

    return None


def wltk_column(collate: CollationKey) -> CityColumn:
    return CityColumn(
        name="WLTK",
        header_tip="We Love The King Day",
        default_descending=False,
        get_header_icon=lambda column, size: circled_icon(WLTK_HEADER_ICON, size, TAN),
        get_entry_value=lambda column, city: 1 if city.is_we_love_the_king_day_active() else 0,
        get_entry_widget=_wltk_entry_widget,
        get_sort_key=lambda column, city: (column.entry_value(city), collate(city.demanded_resource)),
    )


def _garrison_entry_widget(
    column: CityColumn, city: City, size: float, context: OverviewActionContext
) -> Optional[QWidget]:
    unit = city.garrison
    if unit is None:
        return None
    portrait = ImageGetter.get_construction_portrait(unit.icon_name or unit.name, size * 0.7)
    if portrait is None:
        return None
    add_tooltip(portrait, unit.display_name())
    return on_click(portrait, lambda: context.select_unit(unit.identifier))


def garrison_column(collate: CollationKey) -> CityColumn:
    return CityColumn(
        name="Garrison",
        header_tip="Garrisoned by unit",
        default_descending=False,
        get_header_icon=lambda column, size: circled_icon(f"{OTHER_ICONS}/Shield", size),
        get_entry_value=lambda column, city: 1 if city.garrison is not None else 0,
        get_entry_widget=_garrison_entry_widget,
        get_sort_key=lambda column, city: collate(city.garrison.name if city.garrison else ""),
    )

