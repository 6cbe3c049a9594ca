"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, PieceType

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

# White glyphs; black ones sit six code points further on.
_WHITE_GLYPHS: dict[PieceType, int] = {
    PieceType.KING: 0x2654,
    PieceType.QUEEN: 0x2655,
    PieceType.ROOK: 0x2656,
    PieceType.BISHOP: 0x2657,
    PieceType.KNIGHT: 0x2658,
    PieceType.PAWN: 0x2659,
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    Two pieces with the same color and type are interchangeable.
    """

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        offset = 0 if self.color == Color.WHITE else 6
        return chr(_WHITE_GLYPHS[self.piece_type] + offset)

    def matches(self, color: Color, piece_type: PieceType) -> bool:
        return self.color == color and self.piece_type == piece_type
