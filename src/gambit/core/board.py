"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import ALL_SQUARES, Square, in_bounds

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces.

    Pure storage: no method here checks whether a placement is legal chess.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    @staticmethod
    def _check(sq: Square) -> None:
        if not in_bounds(sq):
            raise IndexError(f"Square off the board: {sq!r}")

    def piece_at(self, sq: Square) -> Piece | None:
        self._check(sq)
        return self._grid[sq[0]][sq[1]]

    def set_piece(self, sq: Square, piece: Piece | None) -> None:
        self._check(sq)
        self._grid[sq[0]][sq[1]] = piece

    __getitem__ = piece_at
    __setitem__ = set_piece

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, a1 first."""
        for sq in ALL_SQUARES:
            piece = self._grid[sq[0]][sq[1]]
            if piece is not None:
                yield sq, piece

    def squares_of(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` when it is missing."""
        for sq, piece in self.occupied():
            if piece.matches(color, PieceType.KING):
                return sq
        return None

    def count(self, color: Color, piece_type: PieceType) -> int:
        return sum(1 for _, p in self.occupied() if p.matches(color, piece_type))

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]

    def reset(self) -> None:
        """Place the standard starting arrangement."""
        self.clear()
        for f in range(8):
            self._grid[1][f] = Piece(Color.WHITE, PieceType.PAWN)
            self._grid[6][f] = Piece(Color.BLACK, PieceType.PAWN)
        for f, pt in enumerate(_BACK_RANK):
            self._grid[0][f] = Piece(Color.WHITE, pt)
            self._grid[7][f] = Piece(Color.BLACK, pt)

    # -- Factory / serialisation ----------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    @classmethod
    def from_fen(cls, placement: str) -> Board:
        """Build a board from the piece-placement field of a FEN string.

        Only the first whitespace-separated field is read, so a full FEN
        record is accepted too.
        """
        fields = placement.split()
        if not fields:
            raise ValueError("Empty FEN placement")
        rows = fields[0].split("/")
        if len(rows) != 8:
            raise ValueError(f"FEN placement needs 8 ranks, got {len(rows)}")

        b = cls()
        for i, row in enumerate(rows):
            rank = 7 - i
            file = 0
            for ch in row:
                if ch.isdigit():
                    file += int(ch)
                    continue
                if file > 7:
                    raise ValueError(f"Too many squares on rank {rank + 1}")
                b._grid[rank][file] = Piece.from_char(ch)
                file += 1
            if file != 8:
                raise ValueError(f"Rank {rank + 1} describes {file} squares")
        return b

    def to_fen(self) -> str:
        """Piece-placement field of FEN."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = ""
            empty = 0
            for piece in self._grid[rank]:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
            if empty:
                row += str(empty)
            rows.append(row)
        return "/".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [str(p) if p else "." for p in self._grid[rank]]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
