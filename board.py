# board.py
# Board geometry, pieces and bounds/occupancy-checked placement

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from errors import OccupiedError, OutOfBoundsError
from resources import Resource

if TYPE_CHECKING:
    from buildings import Building
    from placements import PlacementTemplate

BOARD_WIDTH = 4
BOARD_HEIGHT = 4

EMPTY_CODE = "--"


@dataclass(frozen=True)
class Cube:
    resource: Resource

    @property
    def code(self) -> str:
        return self.resource.code


@dataclass(frozen=True)
class Structure:
    building: Building

    @property
    def code(self) -> str:
        return self.building.code


Piece = Union[Cube, Structure]


class Board:
    """Fixed-size grid of pieces.

    ``x`` is the column and ``y`` the row; cells are stored flat at
    ``y * width + x``. A cell is filled at most once and never cleared.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT):
        self.width = width
        self.height = height
        self._cells: list[Optional[Piece]] = [None] * (width * height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return y * self.width + x

    @property
    def cells(self) -> tuple[Optional[Piece], ...]:
        return tuple(self._cells)

    def is_empty(self) -> bool:
        return all(cell is None for cell in self._cells)

    def get(self, x: int, y: int) -> Optional[Piece]:
        return self._cells[self._index(x, y)]

    def place(self, x: int, y: int, piece: Piece) -> None:
        index = self._index(x, y)
        if self._cells[index] is not None:
            raise OccupiedError(x, y)
        self._cells[index] = piece

    def place_piece(self, x: int, y: int, resource: Resource) -> None:
        self.place(x, y, Cube(resource))

    def place_brick(self, x: int, y: int) -> None:
        self.place_piece(x, y, Resource.BRICK)

    def place_glass(self, x: int, y: int) -> None:
        self.place_piece(x, y, Resource.GLASS)

    def place_stone(self, x: int, y: int) -> None:
        self.place_piece(x, y, Resource.STONE)

    def place_wheat(self, x: int, y: int) -> None:
        self.place_piece(x, y, Resource.WHEAT)

    def place_wood(self, x: int, y: int) -> None:
        self.place_piece(x, y, Resource.WOOD)

    def place_building(self, x: int, y: int, building: Building) -> None:
        self.place(x, y, Structure(building))

    def place_template(self, template: PlacementTemplate) -> None:
        """Put a cube on every cell the template requires a resource for.

        All targets are checked before anything is placed, so a failure
        leaves the board as it was.
        """
        required = template.required
        for (x, y) in required:
            if self.get(x, y) is not None:
                raise OccupiedError(x, y)
        for (x, y), resource in required.items():
            self.place_piece(x, y, resource)

    def render(self) -> str:
        """Text grid of piece codes, one board row per line."""
        lines = []
        for y in range(self.height):
            row = self._cells[y * self.width : (y + 1) * self.width]
            lines.append(" ".join(EMPTY_CODE if cell is None else cell.code for cell in row))
        return "\n".join(lines)


def format_legend(width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> str:
    """Coordinate legend: ``x,y`` and the flat index of every cell."""
    border = "  +" + "+".join(" --- " for _ in range(width)) + "+"
    lines = ["x: " + "".join(f"{x:<6}" for x in range(width)).rstrip(), "y" + border[1:]]
    for y in range(height):
        lines.append("  |" + "|".join(f" {f'{x},{y}':<4}" for x in range(width)) + "|")
        lines.append(f"{y:<2}|" + "|".join(f" {y * width + x:<4}" for x in range(width)) + "|")
        lines.append(border)
    return "\n".join(lines)


def print_legend(width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> None:
    print(format_legend(width, height))
