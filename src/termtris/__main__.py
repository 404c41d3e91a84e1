"""Command line entry point.

Run with: ``python -m termtris`` (or the ``termtris`` script once installed).

Arrow keys move, soft drop and rotate the falling piece; Esc or ``q`` quits.
Pass ``--frontend window`` to play in a pygame window instead of the terminal.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from .game import Game

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termtris", description="Falling-block puzzle game for the terminal."
    )
    parser.add_argument(
        "--frontend",
        choices=("terminal", "window"),
        default="terminal",
        help="where to draw the game (default: %(default)s)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for a reproducible piece sequence"
    )
    parser.add_argument(
        "--log-file", default=None, help="write log records to this file"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="level used with --log-file (default: %(default)s)",
    )
    return parser


def configure_logging(log_file: Optional[str], level: str) -> None:
    """Send logs to ``log_file`` when given.

    Without a file only warnings reach stderr, so routine records do not land
    on top of the curses screen.
    """

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if log_file:
        logging.basicConfig(filename=log_file, level=getattr(logging, level), format=fmt)
    else:
        logging.basicConfig(level=logging.WARNING, format=fmt)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    game = Game(rng=random.Random(args.seed))
    LOGGER.info("Starting %s front-end (seed=%s)", args.frontend, args.seed)
    if args.frontend == "window":
        from .window import run_window

        run_window(game)
    else:
        from .terminal import run_terminal

        run_terminal(game)

    if game.over:
        print(f"Game over. Rows cleared: {game.lines_cleared}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
