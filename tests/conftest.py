"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.pieces import Piece
from src.chess.position import Position
from src.core.shared_types import Color, PieceType

PlaceFn = Callable[[PieceType, Color, str], Piece]


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def place(empty_board: Board) -> PlaceFn:
    """Call the inner function with the desired piece type, color and square (algebraic) to put a piece on the empty board"""

    def _place(piece_type: PieceType, color: Color, square_name: str = "d4") -> Piece:
        piece = Piece(piece_type, color)
        empty_board.place_piece(piece, Position.from_algebraic(square_name))
        return piece

    return _place
