"""Unit tests for /src/chess/layout.py"""

import pytest

from src.chess.layout import EMPTY_LAYOUT, STARTING_LAYOUT, is_valid_layout


@pytest.mark.parametrize(
    "layout",
    [
        STARTING_LAYOUT,
        EMPTY_LAYOUT,
        "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR",
        "2kr1b1r/p1p1pppp/2p2n2/3q2B1/6Q1/2NP4/PPP2PPP/R4RK1",
        # no rules about how many kings there should be
        "kkkkkkkk/8/8/8/8/8/8/KKKKKKKK",
    ],
)
def test_valid_layouts(layout: str) -> None:
    assert is_valid_layout(layout)


@pytest.mark.parametrize(
    "layout",
    [
        "",
        "8/8/8/8/8/8/8",  # 7 rows
        "8/8/8/8/8/8/8/8/8",  # 9 rows
        "7/8/8/8/8/8/8/8",  # short row
        "9/8/8/8/8/8/8/8",  # long row
        "rnbqkbnrp/8/8/8/8/8/8/8",  # long row with pieces
        "x7/8/8/8/8/8/8/8",  # unknown piece
        "8/8/8/8/8/8/8/8 w KQkq - 0 1",  # full FEN is not a layout
    ],
)
def test_invalid_layouts(layout: str) -> None:
    assert not is_valid_layout(layout)
