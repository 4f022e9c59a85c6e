from __future__ import annotations

import logging

import pygame

from board import print_legend
from buildings import all_building_orientations
from gui import (
    WINDOW_WIDTH, WINDOW_HEIGHT, BG,
    draw_board, draw_status_bar, draw_top_bar,
)
from placements import generate_placements
from ui_state import ViewerState

logger = logging.getLogger(__name__)


def handle_key(key: int, state: ViewerState) -> bool:
    """Apply one key press to the viewer. Returns False when the viewer should quit."""
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_RIGHT:
        state.next_template()
    elif key == pygame.K_LEFT:
        state.next_template(-1)
    elif key == pygame.K_DOWN:
        state.next_building()
    elif key == pygame.K_UP:
        state.next_building(-1)
    elif key in (pygame.K_RETURN, pygame.K_SPACE):
        state.place_current()
    elif key == pygame.K_c:
        state.clear_board()
    elif key == pygame.K_l:
        print_legend()
        print(state.board.render())
    return True


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    templates = generate_placements(all_building_orientations())
    logger.info("%d placement templates across all buildings", len(templates))
    print_legend()

    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("Tiny Towns Placements")

    title_font = pygame.font.SysFont("SF Pro Display", 32, bold=True)
    label_font = pygame.font.SysFont("SF Pro Text", 20)
    cell_font = pygame.font.SysFont("SF Pro Text", 28, bold=True)
    body_font = pygame.font.SysFont("SF Pro Text", 16)

    clock = pygame.time.Clock()
    state = ViewerState()

    running = True
    while running:
        clock.tick(30)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                running = handle_key(event.key, state)

        screen.fill(BG)
        draw_top_bar(
            screen,
            title_font,
            label_font,
            state.template,
            state.template_idx,
            len(state.templates),
            len(state.building.orientations()),
        )
        draw_board(screen, cell_font, state.board, state.template)
        draw_status_bar(screen, body_font, state.last_error)

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
