import json
import logging
from typing import Any, Dict, List, Optional

from model.city import City, CityFlag, GarrisonUnit
from model.stats import Stat

logger = logging.getLogger(__name__)


class CitySnapshotError(ValueError):
    """Raised when a city snapshot file cannot be parsed."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class GameInfo:
    """Global game state needed by the city overview."""

    def __init__(self, cities: Optional[List[City]] = None, religion_enabled: bool = False):
        self.cities: List[City] = list(cities or [])
        self.religion_enabled = religion_enabled

    def is_religion_enabled(self) -> bool:
        return self.religion_enabled

    @classmethod
    def from_file(cls, path: str) -> "GameInfo":
        """Load a snapshot written as ``{"religion_enabled": ..., "cities": [...]}``."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise CitySnapshotError(f"invalid JSON ({e})", path) from e

        try:
            game_info = cls.from_dict(raw)
        except CitySnapshotError as e:
            raise CitySnapshotError(str(e), path) from e
        logger.info(f"Loaded {len(game_info.cities)} cities from {path}")
        return game_info

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "GameInfo":
        if not isinstance(raw, dict):
            raise CitySnapshotError("snapshot root must be an object")
        cities_raw = raw.get("cities", [])
        if not isinstance(cities_raw, list):
            raise CitySnapshotError("'cities' must be a list")
        cities = [_parse_city(entry, index) for index, entry in enumerate(cities_raw)]
        return cls(cities=cities, religion_enabled=bool(raw.get("religion_enabled", False)))


def _require_object(raw: Any, field: str, where: str) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise CitySnapshotError(f"'{field}' in {where} must be an object")
    return raw


def _parse_stats(raw: Dict[str, Any], where: str) -> Dict[Stat, float]:
    stats = {}
    for key, value in _require_object(raw, "stats", where).items():
        stat = Stat.safe_value_of(key)
        if stat is None:
            raise CitySnapshotError(f"unknown stat '{key}' in {where}")
        stats[stat] = float(value)
    return stats


def _parse_happiness(raw: Dict[str, Any], where: str) -> Dict[str, float]:
    return {source: float(value) for source, value in _require_object(raw, "happiness", where).items()}


def _parse_flags(raw: Dict[str, Any], where: str) -> Dict[CityFlag, int]:
    flags = {}
    for key, value in _require_object(raw, "flags", where).items():
        try:
            flags[CityFlag(key)] = int(value)
        except ValueError as e:
            raise CitySnapshotError(f"unknown city flag '{key}' in {where}") from e
    return flags


def _parse_garrison(raw: Optional[Dict[str, Any]], where: str) -> Optional[GarrisonUnit]:
    if not raw:
        return None
    _require_object(raw, "garrison", where)
    position = raw.get("position", [0, 0])
    if not isinstance(position, (list, tuple)) or len(position) != 2:
        raise CitySnapshotError(f"garrison position in {where} must be [x, y]")
    return GarrisonUnit(
        name=raw["name"],
        icon_name=raw.get("icon_name", raw["name"]),
        position=(int(position[0]), int(position[1])),
        custom_name=raw.get("custom_name", ""),
    )


def _parse_city(raw: Dict[str, Any], index: int) -> City:
    where = f"cities[{index}]"
    if not isinstance(raw, dict) or "name" not in raw:
        raise CitySnapshotError(f"{where} must be an object with a 'name'")
    try:
        return City(
            name=raw["name"],
            population=int(raw.get("population", 1)),
            current_stats=_parse_stats(raw.get("stats", {}), where),
            happiness_list=_parse_happiness(raw.get("happiness", {}), where),
            is_puppet=bool(raw.get("is_puppet", False)),
            is_being_razed=bool(raw.get("is_being_razed", False)),
            resistance_turns=int(raw.get("resistance_turns", 0)),
            current_construction=raw.get("current_construction", ""),
            turns_to_construction=int(raw.get("turns_to_construction", 0)),
            flags=_parse_flags(raw.get("flags", {}), where),
            demanded_resource=raw.get("demanded_resource", ""),
            garrison=_parse_garrison(raw.get("garrison"), where),
        )
    except CitySnapshotError:
        raise
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
        raise CitySnapshotError(f"malformed {where}: {e}") from e
