"""
CityOverviewTab - the cities page of the empire overview.

Shows every city of the current game in a SortableGrid built from the
column registry, hides columns that do not apply to this game, and
remembers the chosen sort column in the config.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import QScrollArea, QVBoxLayout, QWidget

from common.config import Config
from common.constants import DEFAULT_SORT_COLUMN
from model.game_info import GameInfo
from ui.overview.action_context import OverviewActionContext
from ui.overview.columns import ColumnRegistry, create_registry
from ui.overview.sortable_grid import SortableGrid
from utils.collation import CollationKey, collation_key, create_collator

logger = logging.getLogger(__name__)


class CityOverviewTab(QWidget):

    def __init__(
        self,
        game_info: GameInfo,
        config: Config,
        context: OverviewActionContext,
        collate: Optional[CollationKey] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.game_info = game_info
        self.config = config

        if collate is None:
            collate = collation_key(create_collator(config.locale))
        self.registry: ColumnRegistry = create_registry(collate)

        columns = self.registry.visible_columns(game_info)
        self.grid = SortableGrid(columns, context, icon_size=config.icon_size)
        self.grid.set_items(game_info.cities)
        self._restore_sort()
        self.grid.sort_changed.connect(self._on_sort_changed)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.grid)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(scroll)

        logger.info(
            f"City overview ready: {len(game_info.cities)} cities, {len(columns)}/{len(self.registry)} columns"
        )

    def _restore_sort(self):
        name = self.config.sort_column
        if self.grid.sort_by(name, self.config.sort_descending):
            return
        logger.info(f"Stored sort column '{name}' is not available, falling back to {DEFAULT_SORT_COLUMN}")
        self.grid.sort_by(DEFAULT_SORT_COLUMN, False)

    def _on_sort_changed(self, name: str, descending: bool):
        self.config.sort_column = name
        self.config.sort_descending = descending
        self.config.save()
