# render.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import CELL_SIZE, BG, RED, BODY, HEAD, TEXT
from .game import Game


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int],
              cell_size: int = CELL_SIZE) -> None:
    rect = pygame.Rect(gx * cell_size, gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, game: Game, cell_size: int = CELL_SIZE) -> None:
    screen.fill(BG)
    # food
    if game.food is not None:
        draw_cell(screen, game.food[0], game.food[1], RED, cell_size)
    # snake, head last so it stays on top
    for x, y in game.snake[1:]:
        draw_cell(screen, x, y, BODY, cell_size)
    hx, hy = game.head
    draw_cell(screen, hx, hy, HEAD, cell_size)

def draw_paused(screen: pygame.Surface, font: Optional[pygame.font.Font]) -> None:
    width, height = screen.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 120))  # RGBA
    screen.blit(overlay, (0, 0))

    if font is None:
        return
    title = font.render("PAUSED", True, TEXT)
    screen.blit(title, title.get_rect(center=(width // 2, height // 2)))
