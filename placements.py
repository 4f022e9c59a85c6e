# placements.py
# Slide every building orientation over the board and record each fit

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Mapping

from board import BOARD_HEIGHT, BOARD_WIDTH
from patterns import Cell, Pattern
from resources import Resource

if TYPE_CHECKING:
    from buildings import Building

logger = logging.getLogger(__name__)

Coord = tuple[int, int]


@dataclass(frozen=True)
class PlacementTemplate:
    building: Building
    anchor: Coord  # top-left (x, y) of the oriented pattern
    pattern: Pattern
    cells: tuple[tuple[Coord, Cell], ...]  # row-major, gaps included

    @property
    def coordinates(self) -> tuple[Coord, ...]:
        return tuple(coord for coord, _ in self.cells)

    @property
    def required(self) -> dict[Coord, Resource]:
        """Board coordinate -> resource, gaps left out."""
        return {coord: cell for coord, cell in self.cells if cell is not None}


def placements_for_pattern(
    building: Building,
    pattern: Pattern,
    board_width: int = BOARD_WIDTH,
    board_height: int = BOARD_HEIGHT,
) -> list[PlacementTemplate]:
    """Every anchor where ``pattern`` lies fully on the board, x-major."""
    templates: list[PlacementTemplate] = []

    # range() is empty when the pattern is wider/taller than the board
    for x in range(board_width - pattern.width + 1):
        for y in range(board_height - pattern.height + 1):
            cells = tuple(
                ((x + dx, y + dy), pattern.cells[dy][dx])
                for dy in range(pattern.height)
                for dx in range(pattern.width)
            )
            templates.append(PlacementTemplate(building, (x, y), pattern, cells))

    logger.debug(
        "%s %dx%d: %d anchors", building, pattern.width, pattern.height, len(templates)
    )
    return templates


def generate_placements(
    orientations_by_building: Mapping[Building, Iterable[Pattern]],
    board_width: int = BOARD_WIDTH,
    board_height: int = BOARD_HEIGHT,
) -> list[PlacementTemplate]:
    """Generate all placement templates of all buildings on the board."""
    templates: list[PlacementTemplate] = []

    for building, orientations in orientations_by_building.items():
        for pattern in orientations:
            templates.extend(placements_for_pattern(building, pattern, board_width, board_height))

    return templates
