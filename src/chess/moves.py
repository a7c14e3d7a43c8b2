"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the candidate move sets for each piece type.

There is no notion of check (or turns) in the sandbox: a candidate move is any square the piece could reach
given the occupancy of the board.
"""

from typing import Callable, Optional, Protocol

from src.chess.pieces import Color, Piece, PieceType
from src.chess.position import Position
from src.core.exceptions import OffBoardError


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece_at(self, position: Position) -> Optional[Piece]: ...
    def locate(self, piece: Piece) -> Position: ...


Vector = tuple[int, int]

ORTHOGONALS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (-1, 1), (1, -1), (-1, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = ORTHOGONALS + DIAGONALS

# White starts at the bottom of the board (high row index) and moves UP, black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


# --- MOVEMENT RULES ---
def raycasting_move(
    position: Position, board: Board, directions: list[Vector]
) -> list[Position]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board.
    """
    player = board.piece_at(position)

    moves: list[Position] = []
    for dx, dy in directions:
        target = position
        while True:
            target = target.offset(dx, dy)
            if not target.is_within_bounds():
                break

            blocker = board.piece_at(target)
            if blocker is not None:
                # only need to add the first occupied square found if it is the opponent's: then it can be captured.
                if blocker.is_opponent_of(player):
                    moves.append(target)
                break

            moves.append(target)
    return moves


def single_step_move(
    position: Position, board: Board, deltas: list[Vector]
) -> list[Position]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump a single step along a direction"""
    player = board.piece_at(position)

    moves: list[Position] = []
    for dx, dy in deltas:
        target = position.offset(dx, dy)
        if not target.is_within_bounds():
            continue

        occupant = board.piece_at(target)
        if occupant is None or occupant.is_opponent_of(player):
            moves.append(target)
    return moves


def candidate_pawn_moves(position: Position, board: Board) -> list[Position]:
    """
    A pawn:
    - moves by a single square forward, only onto an empty square.
    - It can move by two in its first move, as long as both squares in front are empty
    - takes diagonally (and only diagonally)
    """
    pawn = board.piece_at(position)
    forward = PAWN_DIRECTION[pawn.color]

    moves: list[Position] = []
    one_step = position.offset(0, forward)
    if one_step.is_within_bounds() and board.piece_at(one_step) is None:
        moves.append(one_step)

        two_steps = one_step.offset(0, forward)
        if (
            not pawn.has_moved
            and two_steps.is_within_bounds()
            and board.piece_at(two_steps) is None
        ):
            moves.append(two_steps)

    # pawns take diagonally:
    for dx in [-1, 1]:
        target = position.offset(dx, forward)
        if not target.is_within_bounds():
            continue
        occupant = board.piece_at(target)
        if occupant is not None and occupant.is_opponent_of(pawn):
            moves.append(target)
    return moves


def candidate_knight_moves(position: Position, board: Board) -> list[Position]:
    """Knights always move such that |delta_row| + |delta_column| = 3"""
    return single_step_move(position, board, KNIGHT_DELTAS)


def candidate_bishop_moves(position: Position, board: Board) -> list[Position]:
    """Bishops move diagonally: |delta_row| = |delta_column|"""
    return raycasting_move(position, board, DIAGONALS)


def candidate_rook_moves(position: Position, board: Board) -> list[Position]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(position, board, ORTHOGONALS)


def candidate_queen_moves(position: Position, board: Board) -> list[Position]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_move(position, board, ORTHOGONALS + DIAGONALS)


def candidate_king_moves(position: Position, board: Board) -> list[Position]:
    """
    The king can move by a single square at the time.

    No castling, and nothing stops the king from walking into check.
    """
    return single_step_move(position, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Position, Board], list[Position]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def potential_moves(piece: Piece, board: Board) -> list[Position]:
    """
    Single entrypoint: find where the piece stands and dispatch on its type.

    Whatever rule is registered, it may never hand out a square off the board.
    """
    position = board.locate(piece)
    movement_rule = MOVEMENT_RULES[piece.type]
    moves = movement_rule(position, board)
    off_board = [move for move in moves if not move.is_within_bounds()]
    if off_board:
        raise OffBoardError(
            f"Movement rule for {piece.type} produced off-board moves: {off_board}"
        )
    return moves
