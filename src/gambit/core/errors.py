"""Reasons an engine action can be rejected.

The engine never raises for bad caller input; it reports one of these
instead so callers and tests can tell rejections apart.
"""

from __future__ import annotations

from enum import Enum


class Rejection(Enum):
    """Why a move or promotion request did not take effect."""

    OUT_OF_BOUNDS = "square is off the board"
    NO_PIECE = "no piece on the source square"
    OWN_PIECE = "destination holds a piece of the mover's color"
    WRONG_TURN = "piece does not belong to the side to move"
    ILLEGAL_SHAPE = "piece cannot move that way"
    PATH_BLOCKED = "a piece stands between source and destination"
    SELF_CHECK = "move would leave the mover's king in check"
    CASTLING_PRECONDITION = "castling is not allowed here"
    NOT_ACTIVE = "game is not in progress"
    PROMOTION_PENDING = "a promotion choice is outstanding"
    NO_PROMOTION_PENDING = "no promotion is waiting to be resolved"
    INVALID_PROMOTION_KIND = "pawns promote to queen, rook, bishop or knight"

    def __str__(self) -> str:
        return self.value
