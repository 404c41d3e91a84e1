"""Simple pygame front-end for the game.

An alternative to the terminal for desktops with a display.  It runs the same
:class:`~termtris.runner.GameRunner` loop; pygame only supplies the drawing
surface and the key events.  Install with the ``window`` extra.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from .board import Board
from .config import CELL_SIZE
from .game import Command, Game
from .runner import GameRunner
from .tetromino import Piece

LOGGER = logging.getLogger(__name__)

KEY_COMMANDS = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_q: Command.QUIT,
}

# Colours for the palette's colour names
RGB_COLORS = {
    "cyan": (0, 255, 255),
    "blue": (0, 0, 255),
    "orange": (255, 165, 0),
    "yellow": (255, 255, 0),
    "green": (0, 255, 0),
    "magenta": (160, 0, 240),
    "red": (255, 0, 0),
    "white": (255, 255, 255),
}
LOCKED_COLOR = (128, 128, 128)
BACKGROUND = (0, 0, 0)
GRID_LINE = (50, 50, 50)

# Width of the lookahead panel, in cells
PANEL_CELLS = 6


def event_to_command(event: pygame.event.Event) -> Optional[Command]:
    """Translate a pygame event into a command, ignoring everything else."""

    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_COMMANDS.get(event.key)
    return None


class PygameFrontend:
    """Draw the game in a pygame window and read keys from its event queue."""

    def __init__(self, board: Board) -> None:
        width = (board.width + PANEL_CELLS) * CELL_SIZE
        height = board.height * CELL_SIZE
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("termtris")

    def poll(self, timeout_ms: int) -> Optional[Command]:
        # wait() with no timeout blocks until an event arrives
        if timeout_ms <= 0:
            event = pygame.event.poll()
        else:
            event = pygame.event.wait(timeout_ms)
        return event_to_command(event)

    def _cell(self, col: int, row: int, color) -> None:
        rect = pygame.Rect(col * CELL_SIZE, row * CELL_SIZE, CELL_SIZE, CELL_SIZE)
        pygame.draw.rect(self.screen, color, rect)
        pygame.draw.rect(self.screen, GRID_LINE, rect, 1)

    def draw(self, board: Board, piece: Piece, upcoming: Piece) -> None:
        self.screen.fill(BACKGROUND)
        for r in range(board.height):
            for c in range(board.width):
                self._cell(c, r, LOCKED_COLOR if board.cells[r, c] else BACKGROUND)
        color = RGB_COLORS.get(piece.color, RGB_COLORS["white"])
        for x, y in piece.blocks():
            self._cell(x, y, color)

        color = RGB_COLORS.get(upcoming.color, RGB_COLORS["white"])
        for x, y in upcoming.blocks():
            self._cell(board.width + 1 + x - upcoming.x, 1 + y - upcoming.y, color)
        pygame.display.flip()


def run_window(game: Game, **runner_kwargs) -> Game:
    """Play ``game`` in a pygame window until it ends and return it."""

    pygame.init()
    try:
        frontend = PygameFrontend(game.board)
        return GameRunner(game, frontend, **runner_kwargs).run()
    finally:
        pygame.quit()
        LOGGER.debug("pygame shut down")
