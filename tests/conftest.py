import os
import sys
import pytest
from unittest.mock import Mock

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("CITYOVERVIEW_SUPPRESS_ERROR_DIALOGS", "1")

# Ensure src directory is importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
SRC_DIR = os.path.join(PROJECT_ROOT, 'src')
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# Add tests directory to path for test utilities
TESTS_DIR = os.path.join(PROJECT_ROOT, 'tests')
if TESTS_DIR not in sys.path:
    sys.path.append(TESTS_DIR)

from PySide6.QtWidgets import QApplication

from model.game_info import GameInfo
from ui.images import ImageGetter
from test_utils.city_factory import create_city
from test_utils.icon_factory import write_icons


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for Qt tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def city_factory():
    """
    Factory fixture for creating City objects with sensible defaults.

    Usage:
        city = city_factory("Rome", stats={Stat.GOLD: 10})
    """
    return create_city


@pytest.fixture
def collate():
    """Deterministic stand-in for the locale collator."""
    return str.casefold


@pytest.fixture
def action_context():
    """Mock OverviewActionContext recording open_city/notify/select_unit calls."""
    context = Mock()
    context.open_city = Mock()
    context.notify = Mock()
    context.select_unit = Mock()
    return context


@pytest.fixture
def icon_dir(qapp, tmp_path):
    """Icon directory holding every icon the overview columns ask for."""
    root = write_icons(str(tmp_path / "icons"))
    ImageGetter.set_icon_directory(root)
    yield root
    ImageGetter.set_icon_directory("")


@pytest.fixture
def no_icons(qapp, tmp_path):
    """Empty icon directory: every lookup misses."""
    root = tmp_path / "no_icons"
    root.mkdir()
    ImageGetter.set_icon_directory(str(root))
    yield str(root)
    ImageGetter.set_icon_directory("")


@pytest.fixture
def game_info():
    def _create(cities=None, religion_enabled=False):
        return GameInfo(cities=cities or [], religion_enabled=religion_enabled)

    return _create
