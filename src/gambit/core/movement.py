"""Pseudo-legal move rules: piece movement patterns and path clearance.

A move is pseudo-legal when it matches the moving piece's movement pattern
and nothing blocks its path.  Whether it exposes the mover's own king is
decided one level up, in :mod:`gambit.core.legality`.
"""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.errors import Rejection
from gambit.core.piece import Piece
from gambit.core.types import E1, E8, Square, in_bounds

KNIGHT_SHAPES: frozenset[tuple[int, int]] = frozenset({(1, 2), (2, 1)})

KING_HOME: dict[Color, Square] = {Color.WHITE: E1, Color.BLACK: E8}


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between the endpoints is empty.

    The endpoints must share a rank, a file or a diagonal.
    """
    dr = _sign(to_sq[0] - from_sq[0])
    df = _sign(to_sq[1] - from_sq[1])
    rank, file = from_sq[0] + dr, from_sq[1] + df
    while (rank, file) != to_sq:
        if board.piece_at((rank, file)) is not None:
            return False
        rank += dr
        file += df
    return True


def is_castling_shape(piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """King moving two files along the back rank from its home square."""
    return (
        piece.piece_type == PieceType.KING
        and from_sq == KING_HOME[piece.color]
        and to_sq[0] == from_sq[0]
        and abs(to_sq[1] - from_sq[1]) == 2
    )


def check_pseudo_legal(
    board: Board, from_sq: Square, to_sq: Square
) -> Rejection | None:
    """Return why the move is not pseudo-legal, or ``None`` if it is."""
    if not (in_bounds(from_sq) and in_bounds(to_sq)):
        return Rejection.OUT_OF_BOUNDS
    if from_sq == to_sq:
        return Rejection.ILLEGAL_SHAPE
    piece = board.piece_at(from_sq)
    if piece is None:
        return Rejection.NO_PIECE
    target = board.piece_at(to_sq)
    if target is not None and target.color == piece.color:
        return Rejection.OWN_PIECE
    return piece_rule(board, piece, from_sq, to_sq)


def is_pseudo_legal(board: Board, from_sq: Square, to_sq: Square) -> bool:
    return check_pseudo_legal(board, from_sq, to_sq) is None


def piece_rule(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square
) -> Rejection | None:
    """Apply the movement pattern of *piece*.

    The caller has already checked bounds and the occupant of *to_sq*.
    """
    dr = to_sq[0] - from_sq[0]
    df = to_sq[1] - from_sq[1]
    pt = piece.piece_type

    if pt == PieceType.PAWN:
        return _pawn_rule(board, piece.color, from_sq, to_sq)
    if pt == PieceType.KNIGHT:
        return None if (abs(dr), abs(df)) in KNIGHT_SHAPES else Rejection.ILLEGAL_SHAPE
    if pt == PieceType.KING:
        if max(abs(dr), abs(df)) == 1 or is_castling_shape(piece, from_sq, to_sq):
            return None
        return Rejection.ILLEGAL_SHAPE

    straight = dr == 0 or df == 0
    diagonal = abs(dr) == abs(df)
    if pt == PieceType.ROOK:
        allowed = straight
    elif pt == PieceType.BISHOP:
        allowed = diagonal
    else:  # queen
        allowed = straight or diagonal
    if not allowed:
        return Rejection.ILLEGAL_SHAPE
    return None if is_path_clear(board, from_sq, to_sq) else Rejection.PATH_BLOCKED


def _pawn_rule(
    board: Board, color: Color, from_sq: Square, to_sq: Square
) -> Rejection | None:
    dr = to_sq[0] - from_sq[0]
    df = to_sq[1] - from_sq[1]
    step = color.forward
    target = board.piece_at(to_sq)

    if df == 0:
        if dr == step:
            return None if target is None else Rejection.PATH_BLOCKED
        if dr == 2 * step and from_sq[0] == color.pawn_rank:
            middle = (from_sq[0] + step, from_sq[1])
            if target is None and board.piece_at(middle) is None:
                return None
            return Rejection.PATH_BLOCKED
        return Rejection.ILLEGAL_SHAPE

    # Diagonal steps only capture; en passant is not supported.
    if abs(df) == 1 and dr == step and target is not None:
        return None
    return Rejection.ILLEGAL_SHAPE


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)
