"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def back_rank(self) -> int:
        """Rank holding this side's king and rooks at the start."""
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_rank(self) -> int:
        """Rank holding this side's pawns at the start."""
        return 1 if self == Color.WHITE else 6

    @property
    def promotion_rank(self) -> int:
        return 7 if self == Color.WHITE else 0

    @property
    def forward(self) -> int:
        """Rank delta of a single pawn step."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class CastleSide(IntEnum):
    """Which rook the king castles with."""

    KINGSIDE = 0
    QUEENSIDE = 1

    @property
    def rook_file(self) -> int:
        return 7 if self == CastleSide.KINGSIDE else 0

    @property
    def rook_target_file(self) -> int:
        return 5 if self == CastleSide.KINGSIDE else 3

    @property
    def king_target_file(self) -> int:
        return 6 if self == CastleSide.KINGSIDE else 2

    @property
    def transit_files(self) -> tuple[int, int]:
        """Files the king crosses, ending on its destination."""
        return (5, 6) if self == CastleSide.KINGSIDE else (3, 2)
