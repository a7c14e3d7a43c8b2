"""
Type definitions used across layers
"""

from enum import Enum, StrEnum, auto


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class GlyphStyle(StrEnum):
    """How pieces are drawn in the terminal"""

    UNICODE = "unicode"
    ASCII = "ascii"


class Action(Enum):
    """What a keystroke asks the session to do"""

    NONE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SELECT = auto()
    QUIT = auto()


class SessionState(Enum):
    IDLE = auto()
    SELECTED = auto()
