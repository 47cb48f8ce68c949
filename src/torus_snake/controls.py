# controls.py
from typing import Iterable, Optional, Union

import pygame  # type: ignore

from .config import Direction
from .game import Game

PAUSE = "pause"
QUIT = "quit"

Command = Union[Direction, str]

KEYMAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_p: PAUSE,
    pygame.K_SPACE: PAUSE,
    pygame.K_ESCAPE: QUIT,
}


def key_to_command(key: int) -> Optional[Command]:
    return KEYMAP.get(key)


def handle_input(game: Game, events: Optional[Iterable[pygame.event.Event]] = None) -> bool:
    """Forward key presses to the game. Return False to quit."""
    if events is None:
        events = pygame.event.get()
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue
        cmd = key_to_command(event.key)
        if cmd == QUIT:
            return False
        if cmd == PAUSE:
            game.toggle_pause()
        elif isinstance(cmd, Direction):
            game.change_direction(cmd)
    return True
