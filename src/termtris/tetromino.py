"""Tetromino definitions and basic behaviour.

A piece is a square boolean grid with a board position and a colour.  The
colour is purely decorative; none of the game logic looks at it.  Shapes live
in their own square bounding box so that a quarter turn is a plain index remap
with no resizing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import SPAWN_X, SPAWN_Y

Shape = NDArray[np.bool_]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


def _shape(rows: Sequence[str]) -> Shape:
    """Build a read-only shape grid from rows of ``#`` and ``.`` characters."""

    grid = np.array([[ch == "#" for ch in row] for row in rows], dtype=bool)
    grid.setflags(write=False)
    return grid


@dataclass(frozen=True, eq=False)
class PieceTemplate:
    """Entry of the piece palette: a spawn-orientation shape and its colour."""

    kind: TetrominoType
    shape: Shape
    color: str


# One entry per tetromino, each in its spawn orientation.  ``random_piece``
# draws uniformly over this table.
PALETTE: Tuple[PieceTemplate, ...] = (
    PieceTemplate(
        TetrominoType.I,
        _shape(["....", "####", "....", "...."]),
        "cyan",
    ),
    PieceTemplate(TetrominoType.J, _shape(["#..", "###", "..."]), "blue"),
    PieceTemplate(TetrominoType.L, _shape(["..#", "###", "..."]), "orange"),
    PieceTemplate(TetrominoType.O, _shape(["##", "##"]), "yellow"),
    PieceTemplate(TetrominoType.S, _shape([".##", "##.", "..."]), "green"),
    PieceTemplate(TetrominoType.T, _shape([".#.", "###", "..."]), "magenta"),
    PieceTemplate(TetrominoType.Z, _shape(["##.", ".##", "..."]), "red"),
)


@dataclass(eq=False)
class Piece:
    """Active falling piece in the game.

    ``x`` and ``y`` locate the top-left corner of ``shape`` on the board.  They
    may hold out-of-range values while a move is being tested; the board only
    accepts positions where every occupied cell is in bounds.
    """

    shape: Shape
    x: int = SPAWN_X
    y: int = SPAWN_Y
    color: str = "white"
    kind: Optional[TetrominoType] = None

    @classmethod
    def create(
        cls, shape, color: str, kind: Optional[TetrominoType] = None
    ) -> "Piece":
        """Return a new piece at the spawn offset.

        The shape is copied so the caller's grid (for instance a palette entry)
        is never shared.  No board check happens here; whether the spawn
        position is legal is decided by :meth:`Board.check_game_over`.

        Raises:
            ValueError: If ``shape`` is not a square 2-D grid.
        """

        grid = np.array(shape, dtype=bool)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Piece shape must be square, got {grid.shape}")
        return cls(shape=grid, x=SPAWN_X, y=SPAWN_Y, color=color, kind=kind)

    @property
    def size(self) -> int:
        return int(self.shape.shape[0])

    def rotate(self) -> None:
        """Rotate the shape a quarter turn clockwise in place.

        Uses ``new[x][size - 1 - y] = old[y][x]``, which is what
        ``np.rot90`` computes for ``k=-1``.  The position is left alone.
        """

        self.shape = np.rot90(self.shape, k=-1).copy()

    def rotated(self) -> "Piece":
        """Return a rotated copy, leaving this piece untouched."""

        piece = self.clone()
        piece.rotate()
        return piece

    def clone(self) -> "Piece":
        return Piece(
            shape=self.shape.copy(),
            x=self.x,
            y=self.y,
            color=self.color,
            kind=self.kind,
        )

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the ``(x, y)`` board coordinates of every occupied cell."""

        rows, cols = np.nonzero(self.shape)
        return [(self.x + int(c), self.y + int(r)) for r, c in zip(rows, cols)]

    def __repr__(self) -> str:
        label = self.kind.value if self.kind is not None else "?"
        return f"Piece({label}, x={self.x}, y={self.y}, color={self.color!r})"


def random_piece(rng) -> Piece:
    """Return a new piece drawn uniformly from :data:`PALETTE`.

    ``rng`` only needs a ``choice`` method, so :class:`random.Random` or the
    :mod:`random` module itself both work.
    """

    template = rng.choice(PALETTE)
    return Piece.create(template.shape, template.color, kind=template.kind)
