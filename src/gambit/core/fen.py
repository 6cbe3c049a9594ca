"""FEN parsing and serialization.

Only the fields this engine models are honoured: placement, side to move
and castling availability.  The en-passant and clock fields are validated
for shape and otherwise ignored.
"""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.board import Board
from gambit.core.castling import CastlingRights, SideRights
from gambit.core.enums import Color

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


@dataclass(slots=True)
class FenRecord:
    board: Board
    side_to_move: Color
    castling: CastlingRights


def parse_fen(fen: str) -> FenRecord:
    """Parse a FEN string.  Fields after the placement are optional."""
    parts = fen.split()
    if not (1 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 1-6 fields): {fen!r}")

    board = Board.from_fen(parts[0])

    side_part = parts[1] if len(parts) > 1 else "w"
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    castling_part = parts[2] if len(parts) > 2 else "KQkq"
    castling = _parse_castling(castling_part)

    for extra in parts[4:]:
        if not extra.isdigit():
            raise ValueError(f"Invalid FEN clock field: {extra!r}")

    return FenRecord(board, side, castling)


def to_fen(board: Board, side_to_move: Color, castling: CastlingRights) -> str:
    """Serialise to a six-field FEN string."""
    side_str = "w" if side_to_move == Color.WHITE else "b"
    return f"{board.to_fen()} {side_str} {_castling_field(castling)} - 0 1"


def _parse_castling(field: str) -> CastlingRights:
    if field == "-":
        field = ""
    if len(set(field)) != len(field) or not set(field) <= set("KQkq"):
        raise ValueError(f"Invalid FEN castling field: {field!r}")

    def side_rights(kingside: str, queenside: str) -> SideRights:
        has_k = kingside in field
        has_q = queenside in field
        return SideRights(
            king_moved=not (has_k or has_q),
            kingside_rook_moved=not has_k,
            queenside_rook_moved=not has_q,
        )

    return CastlingRights(side_rights("K", "Q"), side_rights("k", "q"))


def _castling_field(castling: CastlingRights) -> str:
    out = ""
    for color, (k, q) in ((Color.WHITE, "KQ"), (Color.BLACK, "kq")):
        rights = castling.of(color)
        if rights.king_moved:
            continue
        if not rights.kingside_rook_moved:
            out += k
        if not rights.queenside_rook_moved:
            out += q
    return out or "-"
