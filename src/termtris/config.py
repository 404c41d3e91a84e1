"""Tunable constants for the game.

Values here are read at import time by the other modules.  Only the seed and
the front-end are chosen at runtime (see :mod:`termtris.__main__`).
"""

from __future__ import annotations

# Dimensions of the standard playfield.
BOARD_WIDTH = 10
BOARD_HEIGHT = 20

# Where a freshly created piece is placed, relative to the board's top-left
# corner.
SPAWN_X = 3
SPAWN_Y = 0

# Milliseconds between automatic downward moves
GRAVITY_MS = 500
# Upper bound on how long the loop blocks waiting for a key press
INPUT_TIMEOUT_MS = 100

# Glyph used for an occupied cell in the terminal.  Two characters wide so the
# cells look roughly square.
BLOCK = "██"
EMPTY = "  "

# Size of a single board cell in pixels for the pygame window
CELL_SIZE = 30
