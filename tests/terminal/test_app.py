"""Unit tests for src/terminal/app.py"""

from typing import Iterator
from unittest.mock import patch

import pytest

from src.chess.board import Board
from src.chess.position import Position
from src.core.shared_types import GlyphStyle
from src.services.sandbox_service import HELP_TEXT, SandboxSession
from src.terminal.app import build_parser, main, run
from src.terminal.console import CLEAR_SCREEN

UP, DOWN, RIGHT, LEFT = "\x1b[A", "\x1b[B", "\x1b[C", "\x1b[D"


def keyboard(keys: str):
    characters: Iterator[str] = iter(keys)
    return lambda: next(characters, "")


def play(session: SandboxSession, keys: str) -> list[str]:
    frames: list[str] = []
    run(session, keyboard(keys), frames.append)
    return frames


def test_loop_draws_initial_board_and_every_key() -> None:
    session = SandboxSession(board=Board.starting_position())
    frames = play(session, RIGHT + DOWN + "x" + "q")
    # initial frame + one per processed key, nothing after quitting
    assert len(frames) == 4
    assert all(frame.count(CLEAR_SCREEN) == 1 for frame in frames)
    assert all(HELP_TEXT in frame for frame in frames)
    assert session.cursor == Position(1, 1)


def test_loop_plays_a_move() -> None:
    """Walk the cursor to e2, pick up the pawn, walk up two squares, put it down"""
    session = SandboxSession(board=Board.starting_position())
    keys = RIGHT * 4 + DOWN * 6 + " " + UP * 2 + " " + "q"
    frames = play(session, keys)
    assert frames[-1].endswith("Moved White Pawn")
    assert session.board.piece_at(Position.from_algebraic("e4")) is not None
    assert session.board.piece_at(Position.from_algebraic("e2")) is None


def test_loop_stops_on_ctrl_c_and_closed_input() -> None:
    session = SandboxSession(board=Board.starting_position())
    assert len(play(session, "\x03 ")) == 1
    assert len(play(session, "")) == 1


def test_parser_defaults_leave_everything_to_settings() -> None:
    args = build_parser().parse_args([])
    assert vars(args) == {
        "glyph_style": None,
        "starting_layout": None,
        "log_file": None,
        "log_level": None,
    }


def test_parser_rejects_unknown_glyph_style() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--glyphs", "emoji"])


def test_main_rejects_invalid_layout() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--layout", "not/a/board"])
    assert exc_info.value.code == 2


def test_main_runs_session_in_terminal(capsys: pytest.CaptureFixture[str]) -> None:
    with (
        patch("src.terminal.app.terminal_session") as mock_terminal,
        patch("src.terminal.app.run") as mock_run,
        patch("src.terminal.app.setup_logger") as mock_setup_logger,
    ):
        exit_code = main(["--glyphs", "ascii"])

    assert exit_code == 0
    mock_terminal.assert_called_once()
    mock_setup_logger.assert_called_once()
    session = mock_run.call_args.args[0]
    assert session.glyph_style == GlyphStyle.ASCII
    assert session.board == Board.starting_position()
    assert capsys.readouterr().out.endswith("Exiting...\n")
