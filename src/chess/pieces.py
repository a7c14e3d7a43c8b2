"""Defines the types of chess pieces"""

from dataclasses import dataclass
from typing import Self

from src.core.shared_types import Color, GlyphStyle, PieceType

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# Every glyph takes up two terminal columns: the symbol plus a trailing space.
# The extra space is there because some terminals render the chess symbols 1.5 characters wide.
EMPTY_GLYPH = ". "

# The board is drawn on a dark background, so White gets the filled symbols and Black the outlined ones
UNICODE_GLYPHS: dict[Color, dict[PieceType, str]] = {
    Color.WHITE: {
        PieceType.ROOK: "♜ ",
        PieceType.KNIGHT: "♞ ",
        PieceType.BISHOP: "♝ ",
        PieceType.QUEEN: "♛ ",
        PieceType.KING: "♚ ",
        PieceType.PAWN: "♟ ",
    },
    Color.BLACK: {
        PieceType.ROOK: "♖ ",
        PieceType.KNIGHT: "♘ ",
        PieceType.BISHOP: "♗ ",
        PieceType.QUEEN: "♕ ",
        PieceType.KING: "♔ ",
        PieceType.PAWN: "♙ ",
    },
}

# lower case: White pieces, upper case: Black pieces (NOTE: the opposite of FEN!)
ASCII_GLYPHS: dict[Color, dict[PieceType, str]] = {
    Color.WHITE: {
        piece_type: f"{char} " for char, piece_type in FEN_TO_PIECE.items()
    },
    Color.BLACK: {
        piece_type: f"{char.upper()} " for char, piece_type in FEN_TO_PIECE.items()
    },
}

GLYPHS: dict[GlyphStyle, dict[Color, dict[PieceType, str]]] = {
    GlyphStyle.UNICODE: UNICODE_GLYPHS,
    GlyphStyle.ASCII: ASCII_GLYPHS,
}


@dataclass
class Piece:
    """
    A piece does not know where it is standing. The Board is the only authority on location.

    `has_moved` is only relevant for pawns (two-square opening move), but the board keeps it up to date for every piece.
    """

    type: PieceType
    color: Color
    has_moved: bool = False

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    @property
    def display_name(self) -> str:
        """ex. 'White Knight'"""
        return f"{self.color.value.capitalize()} {self.type.value.capitalize()}"

    def render(self, style: GlyphStyle = GlyphStyle.UNICODE) -> str:
        return GLYPHS[style][self.color][self.type]

    def is_opponent_of(self, other: "Piece") -> bool:
        return self.color != other.color
