"""Falling-block puzzle game with a terminal front-end."""

from .board import Board, render_grid
from .game import Command, Game, GameStatus
from .runner import Frontend, GameRunner
from .tetromino import PALETTE, Piece, PieceTemplate, TetrominoType, random_piece

__all__ = [
    "Board",
    "Command",
    "Frontend",
    "Game",
    "GameRunner",
    "GameStatus",
    "PALETTE",
    "Piece",
    "PieceTemplate",
    "TetrominoType",
    "random_piece",
    "render_grid",
]
