import os
import sys
import logging

from common.constants import APP_FOLDER_NAME

logger = logging.getLogger(__name__)


def _platform_data_root():
    if sys.platform == "win32":
        return os.getenv("LOCALAPPDATA")
    if sys.platform == "darwin":
        return os.path.expanduser("~/Library/Application Support")
    return os.getenv("XDG_DATA_HOME") or os.path.expanduser("~/.local/share")


def get_localappdata_dir():
    """
    Directory holding config.ini and the log file, created on first use.

    Platform paths:
        Windows: %LOCALAPPDATA%/CityOverview/
        Linux:   ~/.local/share/CityOverview/ (respects XDG_DATA_HOME)
        macOS:   ~/Library/Application Support/CityOverview/
    """
    root = _platform_data_root()
    if not root:
        logger.warning("LOCALAPPDATA not found, using app directory")
        return get_app_dir()
    app_data_dir = os.path.join(root, APP_FOLDER_NAME)
    os.makedirs(app_data_dir, exist_ok=True)
    return app_data_dir


def get_app_dir():
    """Get the directory of the executable or script."""
    if getattr(sys, "_MEIPASS", None):
        return os.path.dirname(sys.executable)
    return os.path.dirname(os.path.abspath(sys.argv[0]))


def resource_path(relative_path):
    """Absolute path of a bundled resource such as the icons or sample cities."""
    meipass = getattr(sys, "_MEIPASS", None)
    if meipass:
        return os.path.join(meipass, relative_path)

    app_path = os.path.join(get_app_dir(), relative_path)
    if os.path.exists(app_path):
        return app_path

    # Source checkout: resources live at the project root
    project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(project_root, relative_path)
