"""
Tests for ImageGetter icon lookup.
"""

from PySide6.QtGui import QColor
from PySide6.QtWidgets import QLabel

from ui.images import ImageGetter
from ui.ui_utils import CLEAR, LIGHT_GRAY, icon_key


def test_existing_icon_returns_label_with_key(icon_dir):
    label = ImageGetter.get_stat_icon("Gold")
    assert isinstance(label, QLabel)
    assert icon_key(label) == "StatIcons/Gold"
    assert not label.pixmap().isNull()


def test_missing_icon_returns_none(icon_dir):
    assert ImageGetter.get_image("StatIcons/Tourism") is None
    assert not ImageGetter.image_exists("StatIcons/Tourism")


def test_unset_directory_finds_nothing(qapp):
    ImageGetter.set_icon_directory("")
    assert ImageGetter.get_stat_icon("Gold") is None


def test_each_lookup_returns_new_widget(icon_dir):
    first = ImageGetter.get_image("OtherIcons/Fire")
    second = ImageGetter.get_image("OtherIcons/Fire")
    assert first is not second


def test_construction_portrait_searches_categories(icon_dir):
    assert icon_key(ImageGetter.get_construction_portrait("Legion", 20)) == "UnitIcons/Legion"
    assert icon_key(ImageGetter.get_construction_portrait("Colosseum", 20)) == "BuildingIcons/Colosseum"
    assert icon_key(ImageGetter.get_construction_portrait("Gold", 20)) == "StatIcons/Gold"
    assert ImageGetter.get_construction_portrait("Wonder of Nothing", 20) is None


def test_portraits_are_circled(icon_dir):
    portrait = ImageGetter.get_construction_portrait("Legion", 24)
    assert portrait.width() == 24
    assert portrait.property("circle_color") == LIGHT_GRAY.name(QColor.NameFormat.HexArgb)

    resource = ImageGetter.get_resource_portrait("Silk", 21)
    assert resource.property("circle_color") == CLEAR.name(QColor.NameFormat.HexArgb)


def test_changing_directory_clears_cache(icon_dir, no_icons):
    # no_icons was applied after icon_dir
    assert ImageGetter.get_stat_icon("Gold") is None
