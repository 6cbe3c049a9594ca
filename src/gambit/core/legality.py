"""Full legality: pseudo-legal moves that keep the mover's king safe."""

from __future__ import annotations

from gambit.core.attacks import is_in_check
from gambit.core.board import Board
from gambit.core.castling import CastlingRights, castle_side_for, check_castle
from gambit.core.enums import Color
from gambit.core.errors import Rejection
from gambit.core.movement import check_pseudo_legal, is_castling_shape
from gambit.core.types import ALL_SQUARES, Square


def check_legal(
    board: Board, rights: CastlingRights, from_sq: Square, to_sq: Square
) -> Rejection | None:
    """Return why the move is illegal, or ``None`` if it is legal.

    Castling is judged by :func:`~gambit.core.castling.check_castle` alone.
    Any other move is played on a scratch copy of *board* and rejected if
    the mover's king is then attacked; *board* itself is never touched.
    """
    reason = check_pseudo_legal(board, from_sq, to_sq)
    if reason is not None:
        return reason

    piece = board.piece_at(from_sq)
    assert piece is not None
    if is_castling_shape(piece, from_sq, to_sq):
        return check_castle(board, rights, piece.color, castle_side_for(to_sq))

    scratch = board.copy()
    scratch.set_piece(from_sq, None)
    scratch.set_piece(to_sq, piece)
    if is_in_check(scratch, piece.color):
        return Rejection.SELF_CHECK
    return None


def is_legal(
    board: Board, rights: CastlingRights, from_sq: Square, to_sq: Square
) -> bool:
    return check_legal(board, rights, from_sq, to_sq) is None


def legal_destinations(
    board: Board, rights: CastlingRights, from_sq: Square
) -> list[Square]:
    """Every square the piece on *from_sq* may legally move to."""
    return [to_sq for to_sq in ALL_SQUARES if is_legal(board, rights, from_sq, to_sq)]


def legal_moves(
    board: Board, rights: CastlingRights, color: Color
) -> list[tuple[Square, Square]]:
    """All legal ``(from, to)`` pairs for *color*."""
    return [
        (from_sq, to_sq)
        for from_sq in board.squares_of(color)
        for to_sq in ALL_SQUARES
        if is_legal(board, rights, from_sq, to_sq)
    ]


def has_any_legal_move(board: Board, rights: CastlingRights, color: Color) -> bool:
    """Whether *color* has at least one legal move; stops at the first found."""
    return any(
        is_legal(board, rights, from_sq, to_sq)
        for from_sq in board.squares_of(color)
        for to_sq in ALL_SQUARES
    )
