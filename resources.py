# resources.py
# Resource cubes a board cell can hold or a building can require

from __future__ import annotations

from enum import Enum


class Resource(Enum):
    BRICK = "Bk"
    GLASS = "Gs"
    STONE = "St"
    WHEAT = "Wt"
    WOOD = "Wd"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Resource:
        """Look up a resource by its two-letter code, ignoring case."""
        for resource in cls:
            if resource.value.lower() == code.lower():
                return resource
        raise ValueError(f"unknown resource code {code!r}")

    def __repr__(self) -> str:
        return self.value
