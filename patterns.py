# patterns.py
# Building footprints + the eight rotations/flips of a square

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from resources import Resource

logger = logging.getLogger(__name__)

Cell = Optional[Resource]
Grid = tuple[tuple[Cell, ...], ...]

GAP_TOKENS = ("--", ".")


@dataclass(frozen=True)
class Pattern:
    """Rectangular grid of required resources, ``None`` marking a gap.

    Rows shorter than the widest row are padded with gaps, so two patterns
    compare equal exactly when their padded grids match cell for cell.
    """

    cells: Grid
    width: int = field(init=False)
    height: int = field(init=False)

    def __post_init__(self) -> None:
        rows = [tuple(row) for row in self.cells]
        if not any(rows):
            raise ValueError("a pattern needs at least one cell")
        width = max(len(row) for row in rows)
        padded = tuple(row + (None,) * (width - len(row)) for row in rows)
        object.__setattr__(self, "cells", padded)
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", len(padded))

    @classmethod
    def parse(cls, text: str) -> Pattern:
        """Build a pattern from rows of resource codes, ``--`` or ``.`` for a gap."""
        lines = [line.split() for line in text.splitlines() if line.strip()]
        return cls(
            tuple(
                tuple(None if token in GAP_TOKENS else Resource.from_code(token) for token in line)
                for line in lines
            )
        )

    def filled_cells(self) -> Iterator[tuple[int, int, Resource]]:
        """Yield (dx, dy, resource) for every non-gap cell, row by row."""
        for dy, row in enumerate(self.cells):
            for dx, cell in enumerate(row):
                if cell is not None:
                    yield dx, dy, cell

    @property
    def size(self) -> int:
        return self.width * self.height

    def __str__(self) -> str:
        return "\n".join(
            " ".join("--" if cell is None else cell.code for cell in row) for row in self.cells
        )


def _flip_horizontal(grid: Grid) -> Grid:
    # top <-> bottom
    return grid[::-1]


def _flip_vertical(grid: Grid) -> Grid:
    # left <-> right
    return tuple(row[::-1] for row in grid)


def _transpose(grid: Grid) -> Grid:
    # new[i][j] = old[j][i]; rows are already padded to the same width
    return tuple(zip(*grid))


def _compose(*steps: Callable[[Grid], Grid]) -> Callable[[Grid], Grid]:
    def apply(grid: Grid) -> Grid:
        for step in steps:
            grid = step(grid)
        return grid

    return apply


# Symmetries of a square, in generation order
SYMMETRIES: tuple[tuple[str, Callable[[Grid], Grid]], ...] = (
    ("identity", _compose()),
    ("flip_horizontal", _flip_horizontal),
    ("flip_vertical", _flip_vertical),
    ("rotate_180", _compose(_flip_horizontal, _flip_vertical)),
    ("rotate_90", _transpose),
    ("rotate_90_flip_horizontal", _compose(_transpose, _flip_horizontal)),
    ("rotate_90_flip_vertical", _compose(_transpose, _flip_vertical)),
    ("rotate_90_flip_both", _compose(_transpose, _flip_horizontal, _flip_vertical)),
)


def generate_orientations(pattern: Pattern) -> list[Pattern]:
    """All distinct rotations + mirror images of ``pattern``, first seen first."""
    seen: set[Pattern] = set()
    result: list[Pattern] = []

    for name, transform in SYMMETRIES:
        candidate = Pattern(transform(pattern.cells))
        logger.debug("%s -> %dx%d\n%s", name, candidate.width, candidate.height, candidate)
        if candidate not in seen:
            seen.add(candidate)
            result.append(candidate)

    logger.debug("%d distinct orientations", len(result))
    return result
