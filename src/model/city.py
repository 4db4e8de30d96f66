from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from model.stats import Stat


class CityFlag(Enum):
    WE_LOVE_THE_KING = "WeLoveTheKing"
    RESOURCE_DEMAND = "ResourceDemand"
    RESISTANCE = "Resistance"


PICK_CONSTRUCTION_TEXT = "Pick construction"


@dataclass(frozen=True)
class GarrisonUnit:
    """Military unit stationed in a city center."""

    name: str
    icon_name: str = ""
    position: Tuple[int, int] = (0, 0)
    custom_name: str = ""

    def display_name(self) -> str:
        if self.custom_name:
            return f"{self.custom_name} ({self.name})"
        return self.name

    @property
    def identifier(self) -> str:
        """Key used by the units overview to find this unit."""
        x, y = self.position
        return f"{self.name}@{x},{y}"


@dataclass
class City:
    name: str
    population: int = 1
    current_stats: Dict[Stat, float] = field(default_factory=dict)
    happiness_list: Dict[str, float] = field(default_factory=dict)
    is_puppet: bool = False
    is_being_razed: bool = False
    resistance_turns: int = 0
    current_construction: str = ""
    # <= 0 marks a perpetual construction (e.g. "Gold") that never completes
    turns_to_construction: int = 0
    flags: Dict[CityFlag, int] = field(default_factory=dict)
    demanded_resource: str = ""
    garrison: Optional[GarrisonUnit] = None

    def is_in_resistance(self) -> bool:
        return self.resistance_turns > 0

    def get_flag(self, flag: CityFlag) -> int:
        return self.flags.get(flag, 0)

    def is_we_love_the_king_day_active(self) -> bool:
        return self.get_flag(CityFlag.WE_LOVE_THE_KING) > 0

    def get_stat(self, stat: Stat) -> float:
        return self.current_stats.get(stat, 0.0)

    def production_text(self) -> str:
        """Short production summary as shown on the city button."""
        if not self.current_construction:
            return PICK_CONSTRUCTION_TEXT
        if self.turns_to_construction <= 0:
            return self.current_construction
        return f"{self.current_construction}\n{self.turns_to_construction} turns"

    def __str__(self):
        return f"City('{self.name}', pop={self.population})"
