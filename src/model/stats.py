import math
from enum import Enum
from typing import Optional


class Stat(Enum):
    PRODUCTION = "Production"
    FOOD = "Food"
    GOLD = "Gold"
    SCIENCE = "Science"
    CULTURE = "Culture"
    HAPPINESS = "Happiness"
    FAITH = "Faith"

    @classmethod
    def safe_value_of(cls, name: str) -> Optional["Stat"]:
        """Return the Stat named ``name`` (e.g. "Food"), or None."""
        for stat in cls:
            if stat.value == name:
                return stat
        return None


def round_to_int(value: float) -> int:
    """Round half up, so 2.5 -> 3 and -2.5 -> -2."""
    return int(math.floor(value + 0.5))
