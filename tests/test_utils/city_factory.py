"""Factory for creating City objects in tests."""

from typing import Dict, Optional

from model.city import City, CityFlag, GarrisonUnit
from model.stats import Stat


def create_city(
    name: str = "Rome",
    population: int = 5,
    stats: Optional[Dict[Stat, float]] = None,
    happiness: Optional[Dict[str, float]] = None,
    is_puppet: bool = False,
    is_being_razed: bool = False,
    resistance_turns: int = 0,
    construction: str = "",
    turns: int = 0,
    wltk_turns: int = 0,
    demanded_resource: str = "",
    garrison: Optional[GarrisonUnit] = None,
) -> City:
    """
    Create a City with sensible defaults.

    Args:
        stats: Per-stat yields, e.g. {Stat.GOLD: 10}
        wltk_turns: Remaining We Love The King Day turns (0 = inactive)

    Returns:
        A City object
    """
    flags = {CityFlag.WE_LOVE_THE_KING: wltk_turns} if wltk_turns else {}
    return City(
        name=name,
        population=population,
        current_stats=dict(stats or {}),
        happiness_list=dict(happiness or {}),
        is_puppet=is_puppet,
        is_being_razed=is_being_razed,
        resistance_turns=resistance_turns,
        current_construction=construction,
        turns_to_construction=turns,
        flags=flags,
        demanded_resource=demanded_resource,
        garrison=garrison,
    )


def create_status_cities() -> list:
    """One city per status: normal, puppet, resistance, being razed."""
    return [
        create_city("Normal"),
        create_city("Puppet", is_puppet=True),
        create_city("Resisting", resistance_turns=2),
        create_city("Burning", is_being_razed=True),
    ]
