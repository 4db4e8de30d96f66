"""
City Column Registry

Ordered collection of column descriptors. Iteration order is the default
display order of the overview table.
"""

import logging
from typing import Dict, Iterator, List, Optional

from model.game_info import GameInfo
from .base import CityColumn

logger = logging.getLogger(__name__)


class ColumnRegistry:
    """Registry for city overview columns."""

    def __init__(self):
        self._columns: Dict[str, CityColumn] = {}

    def register(self, column: CityColumn) -> None:
        """Register a column; names must be unique."""
        if column.name in self._columns:
            raise ValueError(f"Column '{column.name}' is already registered")
        self._columns[column.name] = column

    def register_all(self, columns: List[CityColumn]) -> None:
        """Register multiple columns at once, keeping their order."""
        for column in columns:
            self.register(column)

    def get(self, name: str) -> Optional[CityColumn]:
        return self._columns.get(name)

    def names(self) -> List[str]:
        return list(self._columns)

    def visible_columns(self, game_info: GameInfo) -> List[CityColumn]:
        """Columns to show for ``game_info``, in display order."""
        visible = [column for column in self._columns.values() if column.is_visible(game_info)]
        hidden = len(self._columns) - len(visible)
        if hidden:
            logger.debug(f"{hidden} overview column(s) hidden for this game")
        return visible

    def __iter__(self) -> Iterator[CityColumn]:
        return iter(self._columns.values())

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, name: object) -> bool:
        return name in self._columns
