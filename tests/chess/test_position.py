"""Unit tests for /src/chess/position.py"""

from string import ascii_lowercase

import pytest

from src.chess.position import BOARD_DIMENSIONS, Position, all_positions


@pytest.mark.parametrize(
    "x, y, notation",
    [
        (x, y, f"{ascii_lowercase[x]}{8 - y}")
        for x in range(8)
        for y in range(8)
    ],
)
def test_creating_from_algebraic(x: int, y: int, notation: str) -> None:
    """'a8' is the top-left corner (0, 0), 'h1' the bottom-right corner (7, 7)"""
    position = Position.from_algebraic(notation)
    assert position == Position(x, y)
    assert position.to_algebraic() == notation


def test_corners() -> None:
    assert Position.from_algebraic("a8") == Position(0, 0)
    assert Position.from_algebraic("h8") == Position(7, 0)
    assert Position.from_algebraic("a1") == Position(0, 7)
    assert Position.from_algebraic("h1") == Position(7, 7)


def test_position_within_bounds() -> None:
    """happy case: every cell of the board"""
    for x in range(BOARD_DIMENSIONS[0]):
        for y in range(BOARD_DIMENSIONS[1]):
            assert Position(x, y).is_within_bounds()


@pytest.mark.parametrize(
    "x, y", [(-1, 0), (0, -1), (8, 0), (0, 8), (8, 8), (-1, -1), (100, 3)]
)
def test_position_out_of_bounds(x: int, y: int) -> None:
    """Off-board positions can be created, they just are not within bounds"""
    position = Position(x, y)
    assert not position.is_within_bounds()


def test_offset_returns_new_position() -> None:
    position = Position(3, 3)
    assert position.offset(2, -1) == Position(5, 2)
    assert position == Position(3, 3)


def test_offset_may_leave_the_board() -> None:
    assert Position(0, 0).offset(-1, 0) == Position(-1, 0)


def test_position_is_immutable_and_hashable() -> None:
    position = Position(1, 2)
    with pytest.raises(AttributeError):
        position.x = 5  # type: ignore[misc]
    assert {position: "here"}[Position(1, 2)] == "here"


def test_all_positions_covers_the_board_once() -> None:
    positions = all_positions()
    assert len(positions) == 64
    assert len(set(positions)) == 64
    # row-major, starting top-left
    assert positions[0] == Position(0, 0)
    assert positions[1] == Position(1, 0)
    assert positions[-1] == Position(7, 7)
