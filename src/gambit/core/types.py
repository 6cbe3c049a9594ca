"""Square type alias and coordinate helpers.

A square is a ``(rank, file)`` pair, both in ``0..7``:

    a1 = (0, 0), b1 = (0, 1), ..., h1 = (0, 7)
    ...
    a8 = (7, 0), ..., h8 = (7, 7)

Ranks increase toward Black's side of the board.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]

FILES = "abcdefgh"


def in_bounds(sq: Square) -> bool:
    """Whether both coordinates of *sq* lie on the board."""
    rank, file = sq
    return 0 <= rank < 8 and 0 <= file < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (3, 4) → 'e4'."""
    return FILES[sq[1]] + str(sq[0] + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (3, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (int(name[1]) - 1, FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple((r, f) for r in range(8) for f in range(8))

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ((0, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((1, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((2, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((3, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((4, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((5, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((6, f) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = ((7, f) for f in range(8))
