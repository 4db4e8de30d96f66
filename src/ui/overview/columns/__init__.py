"""
Column descriptors for the City Overview table.

Each column decides its own header, sort key, cell and total, so the table
renderer treats all of them alike and a new column never touches it.
"""

from model.stats import Stat
from utils.collation import CollationKey
from .base import CityColumn, ColumnConfigurationError, no_header_icon, no_totals
from .registry import ColumnRegistry
from .strategies import (
    city_name_column,
    status_column,
    construction_icon_column,
    construction_column,
    population_column,
    stat_column,
    happiness_column,
    faith_column,
    wltk_column,
    garrison_column,
)


def create_registry(collate: CollationKey) -> ColumnRegistry:
    """Factory function to create the configured ColumnRegistry.

    Args:
        collate: Locale-aware key for text columns (see utils.collation)

    Returns:
        ColumnRegistry with all city overview columns in display order
    """
    registry = ColumnRegistry()
    registry.register_all([
        city_name_column(collate),
        status_column(),
        construction_icon_column(),
        construction_column(collate),
        population_column(),
        # Food and Production totals are left out on purpose
        stat_column(Stat.FOOD, show_total=False),
        stat_column(Stat.GOLD),
        stat_column(Stat.SCIENCE),
        stat_column(Stat.PRODUCTION, show_total=False),
        stat_column(Stat.CULTURE),
        happiness_column(),
        faith_column(),
        wltk_column(collate),
        garrison_column(collate),
    ])
    return registry


__all__ = [
    'CityColumn',
    'ColumnConfigurationError',
    'ColumnRegistry',
    'create_registry',
    'no_header_icon',
    'no_totals',
]
