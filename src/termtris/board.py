"""Board representation for the playfield."""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .config import BOARD_HEIGHT, BOARD_WIDTH
from .tetromino import Piece

Grid = NDArray[np.bool_]


def create_empty_grid(width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> Grid:
    """Return a new empty board grid, ``height`` rows by ``width`` columns."""

    return np.zeros((height, width), dtype=bool)


class Board:
    """Fixed-size grid of occupied cells.

    ``cells[y, x]`` is ``True`` when the cell in column ``x`` of row ``y`` is
    occupied.  Row ``0`` is the top of the well.  The board never keeps a
    reference to a piece; every check below is a function of the board and the
    piece passed in.
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.cells: Grid = create_empty_grid(width, height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_empty(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` is empty.

        Any coordinates outside the board are treated as occupied.  This makes
        collision detection simpler as off-board positions are automatically
        rejected.
        """

        if self.in_bounds(x, y):
            return not bool(self.cells[y, x])
        return False

    def can_move(self, piece: Piece, dx: int, dy: int) -> bool:
        """Return ``True`` if ``piece`` can move by ``dx`` and ``dy``.

        Every occupied cell of the piece, translated by the offsets, has to
        stay inside the board and land on an empty cell.  Called with
        ``(0, 0)`` it tells whether the piece is legal where it stands, which
        is how rotation and game over are validated.
        """

        for x, y in piece.blocks():
            if not self.is_empty(x + dx, y + dy):
                return False
        return True

    def move_tetromino(self, piece: Piece, dx: int, dy: int) -> bool:
        """Translate ``piece`` if the move is legal.

        An illegal move leaves the piece where it was.  Returns whether the
        piece moved.
        """

        if not self.can_move(piece, dx, dy):
            return False
        piece.x += dx
        piece.y += dy
        return True

    def rotate_tetromino(self, piece: Piece) -> bool:
        """Rotate ``piece`` clockwise if the new orientation fits in place.

        The rotated shape is tried on a copy first and only committed when it
        is legal at the current position.  No offsets are searched.
        """

        candidate = piece.rotated()
        if not self.can_move(candidate, 0, 0):
            return False
        piece.shape = candidate.shape
        return True

    def merge_tetromino(self, piece: Piece) -> None:
        """Lock the piece's cells into the board grid.

        The caller is expected to have validated the position already.

        Raises:
            IndexError: If any cell of the piece lies outside the board.
        """

        blocks = piece.blocks()
        if not blocks:
            return
        coordinates = np.asarray(blocks, dtype=np.int32)
        cols, rows = coordinates.T
        if (
            np.any(rows < 0)
            or np.any(rows >= self.height)
            or np.any(cols < 0)
            or np.any(cols >= self.width)
        ):
            raise IndexError("Block out of bounds")
        self.cells[rows, cols] = True

    def clear_lines(self) -> int:
        """Clear completed rows and return how many were removed.

        All full rows go in a single pass.  The same number of empty rows is
        added on top so the height never changes, and the rows that stay keep
        their relative order.
        """

        full_rows = self.cells.all(axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.cells[~full_rows]
            new_rows = create_empty_grid(self.width, cleared)
            self.cells = np.vstack((new_rows, remaining))
        return cleared

    def check_game_over(self, piece: Piece) -> bool:
        """Return ``True`` if ``piece`` cannot occupy its current position."""

        return not self.can_move(piece, 0, 0)


def render_grid(board: Board, piece: Optional[Piece] = None) -> Grid:
    """Return a copy of the board grid with ``piece`` overlaid.

    This is a convenience for front-ends that want a single 2D array to draw
    without mutating the underlying board (i.e. without locking the piece).
    Piece cells outside the board are skipped.
    """

    grid = board.cells.copy()
    if piece is not None:
        for x, y in piece.blocks():
            if board.in_bounds(x, y):
                grid[y, x] = True
    return grid
