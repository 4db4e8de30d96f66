"""
Application-wide constants for City Overview.

Centralizes app name and the icon resource keys shared by the overview columns.
"""

# Application display name (user-facing)
APP_NAME = "City Overview"

# Application full description
APP_DESCRIPTION = "Sortable per-city summary table"

# Technical identifiers (for paths, files)
APP_FOLDER_NAME = "CityOverview"
APP_LOG_FILENAME = "cityoverview.log"
APP_CONFIG_FILENAME = "config.ini"

# Icon resource categories below the icon directory
STAT_ICONS = "StatIcons"
OTHER_ICONS = "OtherIcons"
UNIT_ICONS = "UnitIcons"
BUILDING_ICONS = "BuildingIcons"
RESOURCE_ICONS = "ResourceIcons"
ICON_EXTENSION = ".png"

DEFAULT_ICON_SIZE = 30
DEFAULT_SORT_COLUMN = "CityColumn"
