"""Single-threaded game loop shared by every front-end.

The loop alternates between a bounded wait for player input and a wall-clock
gravity check, then redraws.  Front-ends only have to provide the two methods
of :class:`Frontend`.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Protocol

from .board import Board
from .config import GRAVITY_MS, INPUT_TIMEOUT_MS
from .game import Command, Game
from .tetromino import Piece

LOGGER = logging.getLogger(__name__)


class Frontend(Protocol):
    """Render surface and input source used by :class:`GameRunner`."""

    def poll(self, timeout_ms: int) -> Optional[Command]:
        """Wait at most ``timeout_ms`` for input and return the command, if any."""

    def draw(self, board: Board, piece: Piece, upcoming: Piece) -> None:
        """Draw the board with the falling piece and the lookahead piece."""


class GameRunner:
    """Drive a :class:`Game` against a :class:`Frontend` until it ends."""

    def __init__(
        self,
        game: Game,
        frontend: Frontend,
        *,
        clock: Optional[Callable[[], float]] = None,
        gravity_ms: int = GRAVITY_MS,
        input_timeout_ms: int = INPUT_TIMEOUT_MS,
    ) -> None:
        self.game = game
        self.frontend = frontend
        self._clock = clock or time.monotonic
        self.gravity_ms = gravity_ms
        self.input_timeout_ms = input_timeout_ms
        self.last_fall = self._clock()

    def tick(self) -> bool:
        """Run one loop iteration and return whether the game is still going."""

        command = self.frontend.poll(self.input_timeout_ms)
        if command is not None:
            self.game.handle(command)
        if not self.game.running:
            return False

        elapsed_ms = (self._clock() - self.last_fall) * 1000.0
        if elapsed_ms > self.gravity_ms:
            self.game.step_gravity()
            self.last_fall = self._clock()
            if not self.game.running:
                return False

        self.frontend.draw(self.game.board, self.game.current, self.game.upcoming)
        return True

    def run(self) -> Game:
        """Loop until the player quits or the game is over."""

        LOGGER.info("Game started")
        self.last_fall = self._clock()
        if self.game.running:
            self.frontend.draw(self.game.board, self.game.current, self.game.upcoming)
        while self.tick():
            pass
        LOGGER.info("Game stopped (%s)", self.game.status.value)
        return self.game
