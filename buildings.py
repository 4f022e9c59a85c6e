# buildings.py
# Building definitions, canonical footprints, cached orientations/placements

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from board import BOARD_HEIGHT, BOARD_WIDTH
from patterns import Pattern, generate_orientations
from placements import PlacementTemplate, placements_for_pattern


class Building(Enum):
    WELL = "Well"
    THEATER = "Theater"
    TRADING_POST = "Trading Post"
    COTTAGE = "Cottage"
    FARM = "Farm"
    CHAPEL = "Chapel"
    TAVERN = "Tavern"
    FACTORY = "Factory"

    @property
    def code(self) -> str:
        return BUILDING_CODES[self]

    def pattern(self) -> Pattern:
        return BUILDING_PATTERNS[self]

    def orientations(self) -> frozenset[Pattern]:
        """Distinct rotations/reflections of this building's footprint."""
        return frozenset(_orientations(self))

    def placement_templates(self) -> list[PlacementTemplate]:
        """Every orientation at every anchor where it fits on the board."""
        return list(_placement_templates(self))

    def __str__(self) -> str:
        return self.value


# Canonical footprints, rows top to bottom, "--" for a gap
BUILDING_PATTERNS: dict[Building, Pattern] = {
    Building.WELL: Pattern.parse("Wd St"),
    Building.THEATER: Pattern.parse(
        """
        -- St --
        Wd Gs Wd
        """
    ),
    Building.TRADING_POST: Pattern.parse(
        """
        St Wd --
        St Wd Bk
        """
    ),
    Building.COTTAGE: Pattern.parse(
        """
        -- Wt
        Bk Gs
        """
    ),
    Building.FARM: Pattern.parse(
        """
        Wt Wt
        Wd Wd
        """
    ),
    Building.CHAPEL: Pattern.parse(
        """
        -- -- Gs
        St Gs St
        """
    ),
    Building.TAVERN: Pattern.parse("Bk Bk Gs"),
    Building.FACTORY: Pattern.parse(
        """
        Wd -- -- --
        Bk St St Bk
        """
    ),
}

BUILDING_CODES: dict[Building, str] = {
    Building.WELL: "We",
    Building.THEATER: "Th",
    Building.TRADING_POST: "TP",
    Building.COTTAGE: "Co",
    Building.FARM: "Fm",
    Building.CHAPEL: "Ch",
    Building.TAVERN: "Tv",
    Building.FACTORY: "Fc",
}


@lru_cache(maxsize=None)
def _orientations(building: Building) -> tuple[Pattern, ...]:
    return tuple(generate_orientations(building.pattern()))


@lru_cache(maxsize=None)
def _placement_templates(building: Building) -> tuple[PlacementTemplate, ...]:
    templates: list[PlacementTemplate] = []
    for pattern in _orientations(building):
        templates.extend(placements_for_pattern(building, pattern, BOARD_WIDTH, BOARD_HEIGHT))
    return tuple(templates)


def all_building_orientations() -> dict[Building, list[Pattern]]:
    return {building: list(_orientations(building)) for building in Building}
