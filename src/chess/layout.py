"""
Piece placement notation: the first field of a FEN string.

Used to set up a board in any configuration (tests, `--layout` option).
The first group describes the top row of the board (y = 0, the 8th rank), the last group the bottom row.

ex. standard starting position:
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
"""

from src.chess.pieces import FEN_TO_PIECE
from src.chess.position import BOARD_DIMENSIONS

STARTING_LAYOUT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_LAYOUT = "/".join(["8"] * BOARD_DIMENSIONS[1])


def is_valid_layout(layout: str) -> bool:
    """Check the notation describes exactly 8 rows of 8 cells, using only piece letters and digits."""
    num_columns, num_rows = BOARD_DIMENSIONS
    row_fens = layout.split("/")
    if len(row_fens) != num_rows:
        return False

    for row_fen in row_fens:
        column_count = 0
        for character in row_fen:
            # make sure every character is valid
            if character.isdigit():
                column_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                column_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if column_count != num_columns:
            return False
    return True
