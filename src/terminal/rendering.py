"""
Text rendering of the board for an ANSI terminal.

Highlights are drawn as background colours. When several apply to the same cell only one is drawn:
selection > candidate move > cursor.
"""

from typing import Optional, Protocol, Sequence

from src.chess.pieces import EMPTY_GLYPH, Piece
from src.chess.position import BOARD_DIMENSIONS, Position
from src.core.shared_types import GlyphStyle

# color code constants https://en.wikipedia.org/wiki/ANSI_escape_code#3-bit_and_4-bit
BG_BLACK = "\033[40m"
BG_GREY = "\033[100m"
BG_RED = "\033[41m"
BG_GREEN = "\033[42m"
CLEAR = "\033[0m\033[49m"

CURSOR_HIGHLIGHT = BG_GREY
SELECTION_HIGHLIGHT = BG_GREEN
CANDIDATE_HIGHLIGHT = BG_RED

# raw mode: a newline does not return the carriage by itself
LINE_END = "\r\n"


class BoardView(Protocol):
    """Just the parts of the Board the renderer reads"""

    def piece_at(self, position: Position) -> Optional[Piece]: ...
    def locate(self, piece: Piece) -> Position: ...


def cell_highlight(
    position: Position,
    cursor: Position,
    selected_at: Optional[Position],
    candidate_moves: Sequence[Position],
) -> str:
    """Background escape for a single cell, or an empty string if it is not highlighted."""
    if position == selected_at:
        return SELECTION_HIGHLIGHT
    if position in candidate_moves:
        return CANDIDATE_HIGHLIGHT
    if position == cursor:
        return CURSOR_HIGHLIGHT
    return ""


def render_cell(piece: Optional[Piece], highlight: str, style: GlyphStyle) -> str:
    glyph = EMPTY_GLYPH if piece is None else piece.render(style)
    # always go back to the dark background, whether highlighted or not
    return f"{highlight}{glyph}{CLEAR}{BG_BLACK}"


def render_grid(
    board: BoardView,
    cursor: Position,
    selected_piece: Optional[Piece] = None,
    candidate_moves: Sequence[Position] = (),
    style: GlyphStyle = GlyphStyle.UNICODE,
) -> str:
    """Row-major rendering: one line per row (top row first), two characters per cell."""
    selected_at = board.locate(selected_piece) if selected_piece is not None else None

    lines: list[str] = []
    for y in range(BOARD_DIMENSIONS[1]):
        cells = []
        for x in range(BOARD_DIMENSIONS[0]):
            position = Position(x, y)
            highlight = cell_highlight(position, cursor, selected_at, candidate_moves)
            cells.append(render_cell(board.piece_at(position), highlight, style))
        lines.append("".join(cells))
    return LINE_END.join(lines) + LINE_END
