# gui.py

from __future__ import annotations

from typing import Dict, Tuple

import pygame

from board import BOARD_HEIGHT, BOARD_WIDTH, Board, Cube, Structure
from placements import PlacementTemplate
from resources import Resource

CELL_SIZE = 96
TOP_BAR_HEIGHT = 120
STATUS_BAR_HEIGHT = 40

WINDOW_WIDTH = BOARD_WIDTH * CELL_SIZE
WINDOW_HEIGHT = BOARD_HEIGHT * CELL_SIZE + TOP_BAR_HEIGHT + STATUS_BAR_HEIGHT

BG = (15, 15, 17)
CARD_BG = (30, 30, 34)
GRID = (90, 90, 95)
TEXT_MAIN = (245, 245, 250)
TEXT_SECONDARY = (230, 230, 235)
STRUCTURE = (200, 200, 210)
ERROR_TEXT = (250, 80, 80)

TEMPLATE_BORDER = (90, 220, 220)
GAP_BORDER = (70, 110, 110)

RESOURCE_COLORS: Dict[Resource, Tuple[int, int, int]] = {
    Resource.BRICK: (200, 70, 50),
    Resource.GLASS: (90, 180, 230),
    Resource.STONE: (140, 140, 150),
    Resource.WHEAT: (235, 195, 60),
    Resource.WOOD: (140, 90, 45),
}


def _center_text(
    screen: pygame.Surface, font: pygame.font.Font, text: str, rect: pygame.Rect, color
):
    surf = font.render(text, True, color)
    screen.blit(surf, surf.get_rect(center=rect.center))


def draw_top_bar(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    template: PlacementTemplate,
    current_idx: int,
    total_templates: int,
    orientation_count: int,
):
    pygame.draw.rect(screen, BG, (0, 0, WINDOW_WIDTH, TOP_BAR_HEIGHT))

    card_rect = pygame.Rect(16, 16, WINDOW_WIDTH - 32, TOP_BAR_HEIGHT - 32)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)

    title_surf = title_font.render(str(template.building), True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 20, card_rect.y + 12))

    x, y = template.anchor
    anchor_surf = label_font.render(f"@ {x},{y}", True, TEXT_MAIN)
    screen.blit(anchor_surf, (card_rect.right - anchor_surf.get_width() - 20, card_rect.y + 12))

    info = f"Template {current_idx + 1} of {total_templates} · {orientation_count} orientations"
    info_surf = label_font.render(info, True, TEXT_SECONDARY)
    screen.blit(info_surf, (card_rect.x + 20, card_rect.y + 48))


def draw_board(
    screen: pygame.Surface,
    cell_font: pygame.font.Font,
    board: Board,
    template: PlacementTemplate | None = None,
):
    """
    Draws the board pieces, then the template on top.
    Template cells that need a resource are drawn as a tinted outline with the
    resource code; gap cells only get a faint outline.
    """
    overlay = dict(template.cells) if template is not None else {}

    for y in range(board.height):
        for x in range(board.width):
            px = x * CELL_SIZE
            py = TOP_BAR_HEIGHT + y * CELL_SIZE
            rect = pygame.Rect(px + 3, py + 3, CELL_SIZE - 6, CELL_SIZE - 6)

            piece = board.get(x, y)
            if isinstance(piece, Cube):
                pygame.draw.rect(screen, RESOURCE_COLORS[piece.resource], rect, border_radius=12)
                _center_text(screen, cell_font, piece.code, rect, (255, 255, 255))
            elif isinstance(piece, Structure):
                pygame.draw.rect(screen, STRUCTURE, rect, border_radius=12)
                _center_text(screen, cell_font, piece.code, rect, BG)
            else:
                pygame.draw.rect(screen, BG, rect, border_radius=12)
                pygame.draw.rect(screen, GRID, rect, width=1, border_radius=12)

            if (x, y) not in overlay:
                continue
            required = overlay[(x, y)]
            inner = rect.inflate(-10, -10)
            if required is None:
                pygame.draw.rect(screen, GAP_BORDER, inner, width=1, border_radius=10)
                continue
            pygame.draw.rect(screen, RESOURCE_COLORS[required], inner, width=4, border_radius=10)
            if piece is None:
                _center_text(screen, cell_font, required.code, inner, RESOURCE_COLORS[required])
            pygame.draw.rect(screen, TEMPLATE_BORDER, rect, width=2, border_radius=12)


def draw_status_bar(screen: pygame.Surface, body_font: pygame.font.Font, error: str | None):
    w, h = screen.get_size()
    rect = pygame.Rect(0, h - STATUS_BAR_HEIGHT, w, STATUS_BAR_HEIGHT)
    pygame.draw.rect(screen, BG, rect)
    if error:
        text, color = error, ERROR_TEXT
    else:
        text, color = "←/→ template  ↑/↓ building  ⏎ place  C clear  L legend", TEXT_SECONDARY
    _center_text(screen, body_font, text, rect, color)
