import os
import configparser
import logging
from PySide6.QtCore import QObject

from common.constants import APP_CONFIG_FILENAME, DEFAULT_ICON_SIZE, DEFAULT_SORT_COLUMN
from utils.files import get_localappdata_dir, resource_path

logger = logging.getLogger(__name__)

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Only this section changes at runtime and is written back by save()
OVERVIEW_SECTION = "Overview"


def _default_config_path() -> str:
    # Tests never touch the user's real config
    if "PYTEST_CURRENT_TEST" in os.environ:
        import tempfile

        test_config_dir = os.path.join(tempfile.gettempdir(), "cityoverview_test")
        os.makedirs(test_config_dir, exist_ok=True)
        return os.path.join(test_config_dir, APP_CONFIG_FILENAME)
    return os.path.join(get_localappdata_dir(), APP_CONFIG_FILENAME)


class Config(QObject):
    """Settings from config.ini: resource paths, logging and the overview sort."""

    def __init__(self, custom_config_path: str | None = None):
        """
        Args:
            custom_config_path: config.ini to use instead of the one in the
                                application data directory.
        """
        super().__init__()
        self.config_path = custom_config_path or _default_config_path()

        self._parser = configparser.ConfigParser()
        if os.path.exists(self.config_path):
            self._parser.read(self.config_path, encoding="utf-8")
        else:
            logger.info(f"No config at {self.config_path}, writing defaults")
            self._parser.read_dict(self._defaults())
            self._write(self._parser)

        self._load()

    @staticmethod
    def _defaults():
        return {
            "Paths": {
                "icon_directory": resource_path("icons"),
                "cities_file": resource_path(os.path.join("samples", "cities.json")),
            },
            "General": {
                "log_level": "INFO",
                "locale": "",
            },
            OVERVIEW_SECTION: {
                "icon_size": str(DEFAULT_ICON_SIZE),
                "sort_column": DEFAULT_SORT_COLUMN,
                "sort_descending": "false",
            },
        }

    def _load(self):
        defaults = self._defaults()
        paths, general, overview = defaults["Paths"], defaults["General"], defaults[OVERVIEW_SECTION]

        self.icon_directory = self._parser.get("Paths", "icon_directory", fallback=paths["icon_directory"])
        self.cities_file = self._parser.get("Paths", "cities_file", fallback=paths["cities_file"])

        self.set_log_level(self._parser.get("General", "log_level", fallback=general["log_level"]))
        self.locale = self._parser.get("General", "locale", fallback=general["locale"])

        self.icon_size = self._parser.getint(OVERVIEW_SECTION, "icon_size", fallback=int(overview["icon_size"]))
        self.sort_column = self._parser.get(OVERVIEW_SECTION, "sort_column", fallback=overview["sort_column"])
        self.sort_descending = self._parser.getboolean(OVERVIEW_SECTION, "sort_descending", fallback=False)

        logger.debug("Configuration loaded: %s", self.config_path)

    def set_log_level(self, level_str: str):
        """Unknown level names fall back to INFO."""
        self.log_level_str = level_str.upper()
        self.log_level = LOG_LEVELS.get(self.log_level_str, logging.INFO)

    def save(self):
        """Write the overview settings back to config.ini.

        Paths and log level may have been overridden from the command line
        for this run only, so the other sections are kept as found on disk.
        """
        current = configparser.ConfigParser()
        if os.path.exists(self.config_path):
            current.read(self.config_path, encoding="utf-8")
        if not current.has_section(OVERVIEW_SECTION):
            current.add_section(OVERVIEW_SECTION)

        overview = current[OVERVIEW_SECTION]
        overview["icon_size"] = str(self.icon_size)
        overview["sort_column"] = self.sort_column
        overview["sort_descending"] = "true" if self.sort_descending else "false"

        self._write(current)
        logger.debug(f"Overview settings saved to {self.config_path}")

    def _write(self, parser: configparser.ConfigParser):
        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)
        try:
            with open(self.config_path, "w", encoding="utf-8") as configfile:
                parser.write(configfile)
        except OSError as e:
            logger.error(f"Failed to write config {self.config_path}: {e}")
            raise

    def log_config_location(self):
        """Log the configuration file location (call after logging is set up)"""
        logger.info(f"Configuration loaded from: {self.config_path}")
