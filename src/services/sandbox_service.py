"""
Orchestration between the terminal (keystrokes in, frames out) and the board.

The session owns the UI state: cursor, the selected piece and its candidate moves, and the status message.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.board import Board
from src.chess.pieces import Piece
from src.chess.position import BOARD_DIMENSIONS, Position
from src.core.config import Settings
from src.core.shared_types import Action, GlyphStyle, SessionState

logger = logging.getLogger(__name__)

HELP_TEXT = "Controls: Arrow Keys, Space or Enter to Select ('q' to quit)"

EMPTY_SPACE_SELECTED = "Empty space selected"
DESELECTED = "Deselected"

CURSOR_STEPS: dict[Action, tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
}


def clamp(value: int, lowest: int, highest: int) -> int:
    return max(lowest, min(value, highest))


@dataclass
class SandboxSession:
    board: Board
    glyph_style: GlyphStyle = GlyphStyle.UNICODE
    cursor: Position = Position(0, 0)
    selected_piece: Optional[Piece] = None
    candidate_moves: list[Position] = field(default_factory=list)
    status: str = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Start a session on the standard starting position, unless another layout was configured."""
        board = (
            Board.from_layout(settings.starting_layout)
            if settings.starting_layout
            else Board.starting_position()
        )
        return cls(board=board, glyph_style=settings.glyph_style)

    @property
    def state(self) -> SessionState:
        return SessionState.IDLE if self.selected_piece is None else SessionState.SELECTED

    def handle(self, action: Action) -> bool:
        """Process a single key action. Returns False when the user asked to quit."""
        if action == Action.QUIT:
            return False
        if action in CURSOR_STEPS:
            self.move_cursor(action)
        elif action == Action.SELECT:
            self.select()
        else:
            # unknown keys only reset the status message
            self.status = ""
        return True

    def move_cursor(self, action: Action) -> None:
        """Cursor stays on the board. Moving the cursor never changes the selection."""
        dx, dy = CURSOR_STEPS[action]
        self.cursor = Position(
            clamp(self.cursor.x + dx, 0, BOARD_DIMENSIONS[0] - 1),
            clamp(self.cursor.y + dy, 0, BOARD_DIMENSIONS[1] - 1),
        )
        self.status = (
            f"{self.selected_piece.display_name} selected"
            if self.selected_piece is not None
            else ""
        )

    def select(self) -> None:
        """
        The "act" key
        ----

        ----
        Idle: pick up the piece under the cursor (or complain about the empty square)

        Selected: try to move the selected piece to the cursor. Whatever happens, the selection is dropped afterwards.
        """
        if self.selected_piece is None:
            self._select_piece_under_cursor()
        else:
            self._move_selected_piece()

    def render(self) -> str:
        """Full frame: help text, board, status line"""
        grid = self.board.render(
            self.cursor, self.selected_piece, self.candidate_moves, self.glyph_style
        )
        return f"{HELP_TEXT}\r\n{grid}{self.status}"

    # -- Internal helpers --
    def _select_piece_under_cursor(self) -> None:
        piece = self.board.piece_at(self.cursor)
        if piece is None:
            self.status = EMPTY_SPACE_SELECTED
            return

        self.selected_piece = piece
        self.candidate_moves = self.board.potential_moves(piece)
        self.status = f"{piece.display_name} selected"
        logger.debug(
            "Selected %s on %s, candidate moves: %s",
            piece.display_name,
            self.cursor.to_algebraic(),
            [move.to_algebraic() for move in self.candidate_moves],
        )

    def _move_selected_piece(self) -> None:
        piece = self.selected_piece
        if self.cursor in self.candidate_moves and self.board.move_piece(
            piece, self.cursor
        ):
            self.status = f"Moved {piece.display_name}"
        else:
            self.status = DESELECTED
            logger.debug("Deselected %s", piece.display_name)

        self.selected_piece = None
        self.candidate_moves = []
