"""Locale-aware string ordering for sortable columns."""

import logging
from functools import cmp_to_key
from typing import Any, Callable

from PySide6.QtCore import QCollator, QLocale, Qt

logger = logging.getLogger(__name__)

# Maps a display string to a value that orders by the active locale's rules
CollationKey = Callable[[str], Any]


def create_collator(locale_name: str = "") -> QCollator:
    """Create a case-insensitive collator for ``locale_name`` (system locale if empty)."""
    locale = QLocale(locale_name) if locale_name else QLocale.system()
    collator = QCollator(locale)
    collator.setCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
    collator.setNumericMode(True)
    logger.debug(f"Collator created for locale {locale.name()}")
    return collator


def collation_key(collator: QCollator) -> CollationKey:
    """Adapt a QCollator into a ``key=`` function usable with sorted()."""
    return cmp_to_key(collator.compare)
