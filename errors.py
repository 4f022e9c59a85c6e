# errors.py
# Errors raised while placing pieces on the board

from __future__ import annotations


class TinyTownsError(Exception):
    """Base class for board placement errors."""

    def __init__(self, x: int, y: int, message: str):
        super().__init__(message)
        self.x = x
        self.y = y


class OutOfBoundsError(TinyTownsError):
    """Coordinates fall outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(x, y, f"({x}, {y}) is outside the {width}x{height} board")


class OccupiedError(TinyTownsError):
    """Target cell already holds a piece."""

    def __init__(self, x: int, y: int):
        super().__init__(x, y, f"({x}, {y}) is already occupied")
