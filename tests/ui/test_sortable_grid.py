"""
Tests for SortableGrid header clicks, sorting and rendering.
"""

import pytest
from unittest.mock import Mock

from PySide6.QtWidgets import QLabel

from model.stats import Stat
from ui.overview.columns import CityColumn, create_registry, no_totals
from ui.overview.columns.strategies import stat_column
from ui.overview.sortable_grid import SortableGrid


@pytest.fixture
def cities(city_factory):
    return [
        city_factory("Antium", stats={Stat.GOLD: 10}),
        city_factory("rome", stats={Stat.GOLD: 0}),
        city_factory("Carthage", stats={Stat.GOLD: 5}),
    ]


@pytest.fixture
def grid(qapp, no_icons, collate, cities, action_context, game_info):
    registry = create_registry(collate)
    grid = SortableGrid(registry.visible_columns(game_info()), action_context)
    grid.set_items(cities)
    return grid


def _names(grid):
    return [city.name for city in grid.sorted_items()]


def test_unsorted_keeps_input_order(grid):
    assert grid.sort_column is None
    assert _names(grid) == ["Antium", "rome", "Carthage"]
    assert grid.row_count() == 3


def test_first_click_uses_default_direction(grid):
    grid.sort_by("Gold")
    assert grid.sort_descending is True
    assert _names(grid) == ["Antium", "Carthage", "rome"]


def test_repeat_click_flips_direction(grid):
    grid.sort_by("Gold")
    grid.sort_by("Gold")
    assert grid.sort_descending is False
    assert _names(grid) == ["rome", "Carthage", "Antium"]


def test_switching_column_resets_to_default(grid):
    grid.sort_by("Gold")
    grid.sort_by("CityColumn")
    assert grid.sort_descending is False
    assert _names(grid) == ["Antium", "Carthage", "rome"]


def test_explicit_direction(grid):
    grid.sort_by("CityColumn", True)
    assert _names(grid) == ["rome", "Carthage", "Antium"]


def test_unknown_column_is_ignored(grid):
    assert grid.sort_by("Faith") is False
    assert grid.sort_column is None


def test_sort_changed_signal(grid):
    callback = Mock()
    grid.sort_changed.connect(callback)

    grid.sort_by("Gold")
    grid.sort_by("Gold")

    assert [c.args for c in callback.call_args_list] == [("Gold", True), ("Gold", False)]


def test_header_click_sorts(grid):
    grid.header_widget("Gold").clicked.emit()
    assert grid.sort_column.name == "Gold"
    grid.header_widget("Gold").clicked.emit()
    assert grid.sort_descending is False


def test_header_falls_back_to_text(grid):
    header = grid.header_widget("CityColumn")
    assert isinstance(header, QLabel)
    assert header.text() == "Name"


def test_header_tooltip_marks_sort(grid):
    grid.sort_by("Gold")
    assert grid.header_widget("Gold").toolTip().endswith("▼")
    assert grid.header_widget("Food").toolTip() == "Food"


def test_cells_follow_sort_order(grid):
    grid.sort_by("Gold")
    assert grid.cell(0, "CityColumn").text() == "Antium"
    assert grid.cell(0, "Gold").text() == "10"
    assert grid.cell(2, "Gold").text() == "0"


def test_totals_row(grid):
    assert grid.totals_widget("Gold").text() == "15"
    assert grid.totals_widget("CityColumn").text() == "Total"
    assert grid.totals_widget("Food") is None
    assert grid.totals_widget("Status") is None


def test_clicking_name_opens_city(grid, action_context, cities):
    grid.cell(0, "CityColumn").click()
    action_context.open_city.assert_called_once_with(cities[0])


def test_empty_grid(qapp, no_icons, action_context):
    grid = SortableGrid([stat_column(Stat.GOLD), CityColumn(name="Food", stat=Stat.FOOD, get_totals_widget=no_totals)],
                        action_context)
    grid.set_items([])
    assert grid.row_count() == 0
    assert grid.totals_widget("Gold").text() == "0"
    assert grid.totals_widget("Food") is None


def test_equalized_rows_share_height(qapp, no_icons, collate, city_factory, action_context, game_info):
    registry = create_registry(collate)
    grid = SortableGrid(registry.visible_columns(game_info()), action_context)
    grid.set_items([city_factory("A"), city_factory("B", construction="Walls", turns=3)])

    layout = grid.layout()
    tallest = max(grid.cell(row, "Construction").sizeHint().height() for row in range(2))
    assert layout.rowMinimumHeight(1) == tallest
    assert layout.rowMinimumHeight(2) == tallest
