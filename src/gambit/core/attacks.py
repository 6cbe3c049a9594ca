"""Attack detection: which squares a side controls, and check."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.movement import piece_rule
from gambit.core.piece import Piece
from gambit.core.types import Square


def attacks(board: Board, piece: Piece, from_sq: Square, target: Square) -> bool:
    """Whether *piece* standing on *from_sq* has a pseudo-legal move onto *target*.

    A pawn attacks only through its diagonal capture, so an empty diagonal is
    not attacked and neither is the square in front of it.  The king's
    two-file castling step is never an attack.  The colour of whatever stands on
    *target* is ignored, so a defended piece counts as attacked by its
    defenders.
    """
    if from_sq == target:
        return False
    dr = target[0] - from_sq[0]
    df = target[1] - from_sq[1]
    if piece.piece_type == PieceType.PAWN and df == 0:
        return False
    if piece.piece_type == PieceType.KING:
        return max(abs(dr), abs(df)) == 1
    return piece_rule(board, piece, from_sq, target) is None


def attackers_of(board: Board, square: Square, by_opponent_of: Color) -> list[Square]:
    """Squares of every piece of the opponent of *by_opponent_of* hitting *square*."""
    enemy = by_opponent_of.opposite
    return [
        sq
        for sq, piece in board.occupied()
        if piece.color == enemy and attacks(board, piece, sq, square)
    ]


def is_square_attacked(board: Board, square: Square, by_opponent_of: Color) -> bool:
    """Is *square* attacked by any piece of the opponent of *by_opponent_of*?"""
    enemy = by_opponent_of.opposite
    return any(
        piece.color == enemy and attacks(board, piece, sq, square)
        for sq, piece in board.occupied()
    )


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked?  ``False`` when *color* has no king."""
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, color)
