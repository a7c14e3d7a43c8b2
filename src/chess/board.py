"""The Game board: owns the placement of the pieces, lookups, and applying moves."""

import logging
from dataclasses import dataclass
from typing import Optional, Self, Sequence

from src.chess.layout import is_valid_layout
from src.chess.moves import potential_moves
from src.chess.pieces import Color, Piece, PieceType
from src.chess.position import BOARD_DIMENSIONS, Position, all_positions
from src.core.exceptions import (
    IllegalMoveError,
    InvalidLayoutError,
    OffBoardError,
    PieceNotOnBoardError,
)
from src.core.shared_types import GlyphStyle
from src.terminal.rendering import render_grid

logger = logging.getLogger(__name__)

BACK_RANK: list[PieceType] = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
]

# Rows (y) each color starts on: (back rank, pawns). Black sits at the top of the screen.
HOME_ROWS: dict[Color, tuple[int, int]] = {
    Color.BLACK: (0, 1),
    Color.WHITE: (BOARD_DIMENSIONS[1] - 1, BOARD_DIMENSIONS[1] - 2),
}


@dataclass
class Board:
    cells: dict[Position, Optional[Piece]]

    @classmethod
    def empty(cls) -> Self:
        return cls({position: None for position in all_positions()})

    @classmethod
    def starting_position(cls) -> Self:
        board = cls.empty()
        board.place_initial_setup()
        return board

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the top row, starting with the rook in the top-left corner
        * black pawns cover the 2nd row entirely
        * rows 3 through 6 have 8 consecutive empty squares
        * 7th row are the white pawns (capital letters)
        * bottom row are the white pieces.

        Pawns found away from their starting row are marked as having moved already.
        """
        if not is_valid_layout(layout):
            raise InvalidLayoutError(f"Cannot interpret {layout!r} as a board layout.")

        board = cls.empty()
        for y, row_fen in enumerate(layout.split("/")):
            x = 0
            for character in row_fen:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece that should be created
                    piece = Piece.from_fen(character)
                    if piece.type == PieceType.PAWN:
                        piece.has_moved = y != HOME_ROWS[piece.color][1]
                    board.place_piece(piece, Position(x, y))
                    x += 1
                else:
                    # A number denotes the amount of empty cells after each other
                    x += int(character)
        return board

    def to_layout(self) -> str:
        """Rows are separated by slashes, top row first."""
        return "/".join(self._row_to_layout(y) for y in range(BOARD_DIMENSIONS[1]))

    def _row_to_layout(self, y: int) -> str:
        """Placement notation of a single row"""
        characters: list[str] = []
        empty_count = 0
        for x in range(BOARD_DIMENSIONS[0]):
            piece = self.piece_at(Position(x, y))

            if piece is not None:
                if empty_count > 0:
                    characters.append(str(empty_count))
                    empty_count = 0
                characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def place_initial_setup(self) -> None:
        """Wipe the board and put the 32 pieces on their starting squares."""
        self.clear()
        for color, (back_row, pawn_row) in HOME_ROWS.items():
            for x, piece_type in enumerate(BACK_RANK):
                self.place_piece(Piece(piece_type, color), Position(x, back_row))
                self.place_piece(Piece(PieceType.PAWN, color), Position(x, pawn_row))
        logger.debug("Board set up in starting position: %s", self.to_layout())

    def clear(self) -> None:
        for position in self.cells:
            self.cells[position] = None

    # -- LOOKUPS --
    def piece_at(self, position: Position) -> Optional[Piece]:
        self._assert_on_board(position)
        return self.cells[position]

    def locate(self, piece: Piece) -> Position:
        """Find the cell holding this very piece. Identity, not equality: two white pawns are equal but not the same piece."""
        for position, occupant in self.cells.items():
            if occupant is piece:
                return position
        raise PieceNotOnBoardError(f"{piece.display_name} is not on the board.")

    def pieces(self) -> list[tuple[Position, Piece]]:
        return [
            (position, piece)
            for position, piece in self.cells.items()
            if piece is not None
        ]

    def potential_moves(self, piece: Piece) -> list[Position]:
        return potential_moves(piece, self)

    # -- UPDATES --
    def place_piece(self, piece: Optional[Piece], position: Position) -> None:
        """Put a piece (or None to empty the cell) on the board. Whatever stood there is gone."""
        self._assert_on_board(position)
        self.cells[position] = piece

    def apply_move(self, piece: Piece, target: Position) -> Optional[Piece]:
        """
        Move the piece if the target is one of its candidate moves (recomputed on every call).
        Returns the captured piece, if any.
        """
        origin = self.locate(piece)
        if target not in potential_moves(piece, self):
            raise IllegalMoveError(
                f"{piece.display_name} cannot move from {origin.to_algebraic()} to {target!r}"
            )

        captured = self.cells[target]
        self.cells[target] = piece
        self.cells[origin] = None
        piece.has_moved = True

        if captured is not None:
            logger.info(
                "%s takes %s on %s",
                piece.display_name,
                captured.display_name,
                target.to_algebraic(),
            )
        else:
            logger.info(
                "%s moves %s-%s",
                piece.display_name,
                origin.to_algebraic(),
                target.to_algebraic(),
            )
        return captured

    def move_piece(self, piece: Piece, target: Position) -> bool:
        """Same as `apply_move`, but an illegal move is simply reported back as False (board untouched)."""
        try:
            self.apply_move(piece, target)
        except IllegalMoveError as e:
            logger.debug("Rejected move: %s", e)
            return False
        return True

    def render(
        self,
        cursor: Position,
        selected_piece: Optional[Piece] = None,
        candidate_moves: Sequence[Position] = (),
        style: GlyphStyle = GlyphStyle.UNICODE,
    ) -> str:
        return render_grid(self, cursor, selected_piece, candidate_moves, style)

    def _assert_on_board(self, position: Position) -> None:
        if not position.is_within_bounds():
            raise OffBoardError(f"{position!r} is not on the board.")

