# ui_state.py
# Viewer state: which building/template is shown + the working board

from __future__ import annotations

import logging

from board import Board
from buildings import Building
from errors import TinyTownsError
from placements import PlacementTemplate

logger = logging.getLogger(__name__)


class ViewerState:
    def __init__(self):
        self.buildings: list[Building] = list(Building)
        self.building_idx = 0
        self.template_idx = 0
        self.board = Board()
        self.last_error: str | None = None

    @property
    def building(self) -> Building:
        return self.buildings[self.building_idx]

    @property
    def templates(self) -> list[PlacementTemplate]:
        return self.building.placement_templates()

    @property
    def template(self) -> PlacementTemplate:
        return self.templates[self.template_idx]

    def next_template(self, step: int = 1):
        self.template_idx = (self.template_idx + step) % len(self.templates)
        logger.info("%s template %d/%d", self.building, self.template_idx + 1, len(self.templates))

    def next_building(self, step: int = 1):
        self.building_idx = (self.building_idx + step) % len(self.buildings)
        self.template_idx = 0
        logger.info("%s: %d orientations", self.building, len(self.building.orientations()))

    def place_current(self) -> bool:
        """Put the shown template's cubes on the working board."""
        try:
            self.board.place_template(self.template)
        except TinyTownsError as exc:
            logger.warning("cannot place %s at %s: %s", self.building, self.template.anchor, exc)
            self.last_error = str(exc)
            return False
        self.last_error = None
        return True

    def clear_board(self):
        self.board = Board()
        self.last_error = None
