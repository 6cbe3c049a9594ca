"""Castling rights bookkeeping and castling precondition checks."""

from __future__ import annotations

from dataclasses import dataclass, field

from gambit.core.attacks import is_in_check, is_square_attacked
from gambit.core.board import Board
from gambit.core.enums import CastleSide, Color, PieceType
from gambit.core.errors import Rejection
from gambit.core.movement import KING_HOME, is_path_clear
from gambit.core.piece import Piece
from gambit.core.types import Square


@dataclass(slots=True)
class SideRights:
    """Has-moved flags for one color.  Flags only ever go from False to True."""

    king_moved: bool = False
    kingside_rook_moved: bool = False
    queenside_rook_moved: bool = False

    def rook_moved(self, side: CastleSide) -> bool:
        if side == CastleSide.KINGSIDE:
            return self.kingside_rook_moved
        return self.queenside_rook_moved


@dataclass(slots=True)
class CastlingRights:
    """Has-moved flags for both colors."""

    white: SideRights = field(default_factory=SideRights)
    black: SideRights = field(default_factory=SideRights)

    def of(self, color: Color) -> SideRights:
        return self.white if color == Color.WHITE else self.black

    def copy(self) -> CastlingRights:
        return CastlingRights(
            SideRights(
                self.white.king_moved,
                self.white.kingside_rook_moved,
                self.white.queenside_rook_moved,
            ),
            SideRights(
                self.black.king_moved,
                self.black.kingside_rook_moved,
                self.black.queenside_rook_moved,
            ),
        )

    def record_move(self, piece: Piece, from_sq: Square) -> None:
        """Set the flags touched by *piece* leaving *from_sq*.

        Only the king or a rook leaving its own starting square sets a flag.
        """
        if piece.piece_type == PieceType.KING and from_sq == KING_HOME[piece.color]:
            self.of(piece.color).king_moved = True
        if piece.piece_type == PieceType.ROOK:
            for side in CastleSide:
                if from_sq == rook_home(piece.color, side):
                    self._retire_rook(piece.color, side)

    def _retire_rook(self, color: Color, side: CastleSide) -> None:
        rights = self.of(color)
        if side == CastleSide.KINGSIDE:
            rights.kingside_rook_moved = True
        else:
            rights.queenside_rook_moved = True


def rook_home(color: Color, side: CastleSide) -> Square:
    return (color.back_rank, side.rook_file)


def castle_side_for(to_sq: Square) -> CastleSide:
    """Castle side implied by a king's two-file destination."""
    return CastleSide.KINGSIDE if to_sq[1] == 6 else CastleSide.QUEENSIDE


def check_castle(
    board: Board, rights: CastlingRights, color: Color, side: CastleSide
) -> Rejection | None:
    """Return ``None`` if *color* may castle on *side*, else the rejection."""
    king_sq = KING_HOME[color]
    king = board.piece_at(king_sq)
    own = rights.of(color)
    if king is None or not king.matches(color, PieceType.KING) or own.king_moved:
        return Rejection.CASTLING_PRECONDITION

    rook_sq = rook_home(color, side)
    rook = board.piece_at(rook_sq)
    if rook is None or not rook.matches(color, PieceType.ROOK) or own.rook_moved(side):
        return Rejection.CASTLING_PRECONDITION

    if not is_path_clear(board, king_sq, rook_sq):
        return Rejection.CASTLING_PRECONDITION

    if is_in_check(board, color):
        return Rejection.CASTLING_PRECONDITION

    rank = color.back_rank
    for file in side.transit_files:
        if is_square_attacked(board, (rank, file), color):
            return Rejection.CASTLING_PRECONDITION
    return None


def can_castle(
    board: Board, rights: CastlingRights, color: Color, side: CastleSide
) -> bool:
    return check_castle(board, rights, color, side) is None
