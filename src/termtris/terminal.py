"""curses front-end for the game.

Run with: ``python -m termtris``

The well is drawn with a box border, each cell two characters wide.  The
falling piece is drawn in its colour over the locked cells and the lookahead
piece sits in a small panel to the right.  :func:`run_terminal` goes through
``curses.wrapper`` so the terminal leaves raw mode on every exit path,
including exceptions.
"""

from __future__ import annotations

import curses
import logging
from typing import Dict, Optional

from .board import Board
from .config import BLOCK, EMPTY
from .game import Command, Game
from .runner import GameRunner
from .tetromino import Piece

LOGGER = logging.getLogger(__name__)

_ESCAPE = 27

KEY_COMMANDS: Dict[int, Command] = {
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_RIGHT: Command.RIGHT,
    curses.KEY_DOWN: Command.SOFT_DROP,
    curses.KEY_UP: Command.ROTATE,
    _ESCAPE: Command.QUIT,
    ord("q"): Command.QUIT,
}

# Terminal colours for the palette's colour names.  Eight-colour terminals
# have no orange, so L pieces fall back to white there.
CURSES_COLORS = {
    "cyan": curses.COLOR_CYAN,
    "blue": curses.COLOR_BLUE,
    "orange": curses.COLOR_WHITE,
    "yellow": curses.COLOR_YELLOW,
    "green": curses.COLOR_GREEN,
    "magenta": curses.COLOR_MAGENTA,
    "red": curses.COLOR_RED,
    "white": curses.COLOR_WHITE,
}

# Orange in the xterm 256-colour palette
ORANGE_256 = 208

PANEL_GAP = 3
PANEL_TITLE = "Next"


def curses_color(name: str, available: int) -> int:
    """Return the curses colour number for ``name``.

    ``available`` is the number of colours the terminal reports
    (``curses.COLORS``).
    """

    if name == "orange" and available >= 256:
        return ORANGE_256
    return CURSES_COLORS.get(name, curses.COLOR_WHITE)


def key_to_command(key: int) -> Optional[Command]:
    """Map a ``getch`` code to a command; unknown keys and ``-1`` give ``None``."""

    return KEY_COMMANDS.get(key)


class CursesFrontend:
    """Draw the game on a curses window and read keys from it."""

    def __init__(self, stdscr) -> None:
        self.stdscr = stdscr
        self._pairs: Dict[str, int] = {}
        try:
            curses.curs_set(0)
        except curses.error:
            LOGGER.debug("Terminal cannot hide the cursor")
        self.stdscr.keypad(True)
        if curses.has_colors():
            self._init_colors()

    def _init_colors(self) -> None:
        curses.start_color()
        curses.use_default_colors()
        for pair, name in enumerate(CURSES_COLORS, start=1):
            curses.init_pair(pair, curses_color(name, curses.COLORS), -1)
            self._pairs[name] = pair

    def _attr(self, color: str) -> int:
        pair = self._pairs.get(color)
        return curses.color_pair(pair) if pair else 0

    @staticmethod
    def required_size(board: Board, upcoming: Piece) -> tuple[int, int]:
        """Return the ``(rows, cols)`` the layout needs."""

        well_w = board.width * len(BLOCK) + 2
        panel_w = max(upcoming.size * len(BLOCK), len(PANEL_TITLE)) + 2
        # One spare column: curses refuses to write the bottom-right cell.
        return board.height + 2, well_w + PANEL_GAP + panel_w + 1

    def poll(self, timeout_ms: int) -> Optional[Command]:
        self.stdscr.timeout(timeout_ms)
        return key_to_command(self.stdscr.getch())

    def draw(self, board: Board, piece: Piece, upcoming: Piece) -> None:
        self.stdscr.erase()
        rows, cols = self.stdscr.getmaxyx()
        need_rows, need_cols = self.required_size(board, upcoming)
        if rows < need_rows or cols < need_cols:
            message = f"Terminal too small: need {need_cols}x{need_rows}"
            self.stdscr.addnstr(0, 0, message, max(cols - 1, 0))
            self.stdscr.refresh()
            return

        self._draw_box(0, 0, board.height, board.width * len(BLOCK))
        for y in range(board.height):
            line = "".join(BLOCK if cell else EMPTY for cell in board.cells[y])
            self.stdscr.addstr(1 + y, 1, line)
        self._draw_piece(1, 1, piece)

        panel_x = board.width * len(BLOCK) + 2 + PANEL_GAP
        panel_inner = max(upcoming.size * len(BLOCK), len(PANEL_TITLE))
        self._draw_box(0, panel_x, upcoming.size, panel_inner)
        self.stdscr.addstr(0, panel_x + 1, PANEL_TITLE)
        preview = upcoming.clone()
        preview.x, preview.y = 0, 0
        self._draw_piece(1, panel_x + 1, preview)

        self.stdscr.refresh()

    def _draw_box(self, top: int, left: int, inner_h: int, inner_w: int) -> None:
        self.stdscr.addstr(top, left, "┌" + "─" * inner_w + "┐")
        for r in range(1, inner_h + 1):
            self.stdscr.addstr(top + r, left, "│")
            self.stdscr.addstr(top + r, left + inner_w + 1, "│")
        self.stdscr.addstr(top + inner_h + 1, left, "└" + "─" * inner_w + "┘")

    def _draw_piece(self, top: int, left: int, piece: Piece) -> None:
        attr = self._attr(piece.color)
        for x, y in piece.blocks():
            self.stdscr.addstr(top + y, left + x * len(BLOCK), BLOCK, attr)


def run_terminal(game: Game, **runner_kwargs) -> Game:
    """Play ``game`` in the terminal until it ends and return it."""

    def _session(stdscr) -> Game:
        return GameRunner(game, CursesFrontend(stdscr), **runner_kwargs).run()

    return curses.wrapper(_session)
