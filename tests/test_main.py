from __future__ import annotations

import logging

from termtris import __main__ as cli
from termtris import terminal
from termtris.game import GameStatus


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.frontend == "terminal"
    assert args.seed is None
    assert args.log_file is None
    assert args.log_level == "INFO"


def test_main_runs_terminal_session(monkeypatch, capsys):
    played = []

    def fake_run(game, **_kwargs):
        played.append(game)
        game.status = GameStatus.GAME_OVER
        return game

    monkeypatch.setattr(terminal, "run_terminal", fake_run)
    monkeypatch.setattr(cli, "configure_logging", lambda *_args: None)

    assert cli.main(["--seed", "7"]) == 0

    assert len(played) == 1
    assert "Game over" in capsys.readouterr().out


def test_seed_makes_sessions_repeatable(monkeypatch):
    played = []
    monkeypatch.setattr(terminal, "run_terminal", lambda game, **_k: played.append(game))
    monkeypatch.setattr(cli, "configure_logging", lambda *_args: None)

    cli.main(["--seed", "3"])
    cli.main(["--seed", "3"])

    first, second = played
    assert first.current.kind is second.current.kind
    assert first.upcoming.kind is second.upcoming.kind


def test_configure_logging_writes_to_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    log_file = tmp_path / "termtris.log"

    cli.configure_logging(str(log_file), "DEBUG")
    logging.getLogger("termtris.game").debug("hello from the test")
    for handler in root.handlers:
        handler.flush()

    assert "hello from the test" in log_file.read_text()
    for handler in root.handlers:
        handler.close()
