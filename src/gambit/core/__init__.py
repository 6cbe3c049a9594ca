"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from gambit.core import Board, CastlingRights, is_legal
    from gambit.core.types import E2, E4

    board = Board.initial()
    assert is_legal(board, CastlingRights(), E2, E4)
"""

from gambit.core.attacks import attackers_of, is_in_check, is_square_attacked
from gambit.core.board import Board
from gambit.core.castling import CastlingRights, SideRights, can_castle, check_castle
from gambit.core.enums import PROMOTION_TYPES, CastleSide, Color, PieceType
from gambit.core.errors import Rejection
from gambit.core.fen import STARTING_FEN, parse_fen, to_fen
from gambit.core.legality import (
    check_legal,
    has_any_legal_move,
    is_legal,
    legal_destinations,
    legal_moves,
)
from gambit.core.movement import check_pseudo_legal, is_path_clear, is_pseudo_legal
from gambit.core.piece import Piece
from gambit.core.types import (
    Square,
    in_bounds,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "PieceType",
    "PROMOTION_TYPES",
    "Rejection",
    # Types / helpers
    "Square",
    "in_bounds",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CastlingRights",
    "Piece",
    "SideRights",
    # Rules
    "attackers_of",
    "can_castle",
    "check_castle",
    "check_legal",
    "check_pseudo_legal",
    "has_any_legal_move",
    "is_in_check",
    "is_legal",
    "is_path_clear",
    "is_pseudo_legal",
    "is_square_attacked",
    "legal_destinations",
    "legal_moves",
    # Notation
    "STARTING_FEN",
    "parse_fen",
    "to_fen",
]
