"""
A coordinate on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Position:
    """
    x is the column (0 = left, the a-file), y is the row (0 = top, the 8th rank).

    NOTE: No bounds are enforced here. Off-board positions are perfectly representable, consumers filter them.
    """

    x: int
    y: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Position:
        """Algebraic notation: 'a8' - 'h1' get converted to (0,0) - (7,7)"""
        x = ord(sq[0]) - ord("a")
        y = BOARD_DIMENSIONS[1] - int(sq[1])
        return cls(x, y)

    def to_algebraic(self) -> str:
        return f"{chr(self.x + ord('a'))}{BOARD_DIMENSIONS[1] - self.y}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (
            0 <= self.y < BOARD_DIMENSIONS[1]
        )

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)


def all_positions() -> list[Position]:
    """Every cell of the board, row by row starting at the top-left."""
    return [
        Position(x, y)
        for y in range(BOARD_DIMENSIONS[1])
        for x in range(BOARD_DIMENSIONS[0])
    ]
