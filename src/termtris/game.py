"""High level game session: current piece, lookahead and lifecycle."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .board import Board
from .tetromino import Piece, random_piece

LOGGER = logging.getLogger(__name__)


class Command(str, Enum):
    """Player requests understood by :meth:`Game.handle`."""

    LEFT = "left"
    RIGHT = "right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    QUIT = "quit"


class GameStatus(str, Enum):
    FALLING = "falling"
    GAME_OVER = "game_over"
    QUIT = "quit"


@dataclass
class Game:
    """Mutable state for one game session.

    The piece in ``current`` falls; ``upcoming`` is the single lookahead and
    becomes current on the next lock-in.  If the board is supplied it is used
    as is, which lets tests start from a prepared grid.
    """

    board: Board = field(default_factory=Board)
    rng: random.Random = field(default_factory=random.Random)
    current: Optional[Piece] = None
    upcoming: Optional[Piece] = None
    status: GameStatus = GameStatus.FALLING
    pieces_locked: int = 0
    lines_cleared: int = 0

    def __post_init__(self) -> None:
        if self.current is None:
            self.current = random_piece(self.rng)
        if self.upcoming is None:
            self.upcoming = random_piece(self.rng)
        if self.board.check_game_over(self.current):
            self._end()

    @property
    def running(self) -> bool:
        return self.status is GameStatus.FALLING

    @property
    def over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def handle(self, command: Command) -> None:
        """Apply a player command to the current piece.

        Moves and rotations that do not fit are dropped silently.  Soft drop
        only moves the piece; locking is left to gravity.  Commands arriving
        after the session has ended are ignored.
        """

        if not self.running:
            return
        if command is Command.QUIT:
            LOGGER.info("Quit requested")
            self.status = GameStatus.QUIT
        elif command is Command.LEFT:
            self.board.move_tetromino(self.current, -1, 0)
        elif command is Command.RIGHT:
            self.board.move_tetromino(self.current, 1, 0)
        elif command is Command.SOFT_DROP:
            self.board.move_tetromino(self.current, 0, 1)
        elif command is Command.ROTATE:
            self.board.rotate_tetromino(self.current)

    def step_gravity(self) -> None:
        """Drop the current piece one row, locking it in if it cannot fall."""

        if not self.running:
            return
        if not self.board.move_tetromino(self.current, 0, 1):
            self.lock_and_spawn()

    def lock_and_spawn(self) -> None:
        """Merge the current piece, clear rows and promote the lookahead."""

        self.board.merge_tetromino(self.current)
        self.pieces_locked += 1
        LOGGER.debug("Locked %r", self.current)

        cleared = self.board.clear_lines()
        if cleared:
            self.lines_cleared += cleared
            LOGGER.info("Cleared %d row(s), %d in total", cleared, self.lines_cleared)

        self.current = self.upcoming.clone()
        self.upcoming = random_piece(self.rng)
        LOGGER.debug("Spawned %r, next %r", self.current, self.upcoming)

        if self.board.check_game_over(self.current):
            self._end()

    def _end(self) -> None:
        self.status = GameStatus.GAME_OVER
        LOGGER.info(
            "Game over after %d piece(s) and %d cleared row(s)",
            self.pieces_locked,
            self.lines_cleared,
        )
