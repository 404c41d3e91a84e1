from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")

from termtris.board import Board  # noqa: E402
from termtris.game import Command  # noqa: E402
from termtris.tetromino import PALETTE, Piece, TetrominoType  # noqa: E402
from termtris.window import (  # noqa: E402
    CELL_SIZE,
    LOCKED_COLOR,
    RGB_COLORS,
    PygameFrontend,
    event_to_command,
)


@pytest.mark.parametrize(
    "key, command",
    [
        (pygame.K_LEFT, Command.LEFT),
        (pygame.K_RIGHT, Command.RIGHT),
        (pygame.K_DOWN, Command.SOFT_DROP),
        (pygame.K_UP, Command.ROTATE),
        (pygame.K_ESCAPE, Command.QUIT),
    ],
)
def test_keydown_maps_to_command(key: int, command: Command):
    event = pygame.event.Event(pygame.KEYDOWN, key=key)
    assert event_to_command(event) is command


def test_window_close_quits():
    assert event_to_command(pygame.event.Event(pygame.QUIT)) is Command.QUIT


def test_other_events_are_ignored():
    assert event_to_command(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)) is None
    assert event_to_command(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT)) is None
    assert event_to_command(pygame.event.Event(pygame.NOEVENT)) is None


def make_piece(kind: TetrominoType, x: int = 3, y: int = 0) -> Piece:
    template = next(t for t in PALETTE if t.kind is kind)
    piece = Piece.create(template.shape, template.color, kind=kind)
    piece.x, piece.y = x, y
    return piece


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    try:
        yield
    finally:
        pygame.quit()


def pixel(frontend: PygameFrontend, col: int, row: int):
    centre = (col * CELL_SIZE + CELL_SIZE // 2, row * CELL_SIZE + CELL_SIZE // 2)
    return tuple(frontend.screen.get_at(centre))[:3]


def test_draw_places_board_piece_and_lookahead(display):
    board = Board()
    board.cells[19, 0] = True
    frontend = PygameFrontend(board)
    piece = make_piece(TetrominoType.O, x=4, y=0)
    upcoming = make_piece(TetrominoType.T, x=3, y=0)

    frontend.draw(board, piece, upcoming)

    assert frontend.screen.get_size() == ((board.width + 6) * CELL_SIZE, board.height * CELL_SIZE)
    assert pixel(frontend, 0, 19) == LOCKED_COLOR
    assert pixel(frontend, 4, 0) == RGB_COLORS["yellow"]
    assert pixel(frontend, 5, 1) == RGB_COLORS["yellow"]
    # Lookahead panel starts one column right of the well, one row down.
    for col, row in [(12, 1), (11, 2), (12, 2), (13, 2)]:
        assert pixel(frontend, col, row) == RGB_COLORS["magenta"]
    assert pixel(frontend, 11, 1) != RGB_COLORS["magenta"]


def test_lookahead_position_ignores_piece_coordinates(display):
    board = Board()
    frontend = PygameFrontend(board)
    piece = make_piece(TetrominoType.O, x=0, y=10)

    frontend.draw(board, piece, make_piece(TetrominoType.T, x=6, y=7))

    for col, row in [(12, 1), (11, 2), (12, 2), (13, 2)]:
        assert pixel(frontend, col, row) == RGB_COLORS["magenta"]


def test_poll_reads_keys_from_event_queue(display):
    frontend = PygameFrontend(Board())
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))

    assert frontend.poll(100) is Command.LEFT
    assert frontend.poll(0) is None
    assert frontend.poll(10) is None
