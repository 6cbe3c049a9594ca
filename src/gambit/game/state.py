"""Game state: everything ``reset`` creates, bundled in one owned object."""

from __future__ import annotations

from dataclasses import dataclass, field

from gambit.core.board import Board
from gambit.core.castling import CastlingRights
from gambit.core.enums import Color
from gambit.core.types import Square
from gambit.game.interfaces import GamePhase, NotStarted


@dataclass(frozen=True, slots=True)
class PendingPromotion:
    """A pawn on its last rank waiting for the mover's choice."""

    square: Square
    color: Color


@dataclass
class GameState:
    """Board, castling rights, turn, phase and move markers for one game.

    Pure data: :class:`~gambit.game.controller.RulesEngine` is the only
    writer.
    """

    board: Board = field(default_factory=Board.initial)
    castling: CastlingRights = field(default_factory=CastlingRights)
    side_to_move: Color = Color.WHITE
    phase: GamePhase = field(default_factory=NotStarted)
    pending_promotion: PendingPromotion | None = None
    last_move: tuple[Square, Square] | None = None

    def reset(self) -> None:
        """Back to the standard start position, not yet started."""
        self.board.reset()
        self.castling = CastlingRights()
        self.side_to_move = Color.WHITE
        self.phase = NotStarted()
        self.pending_promotion = None
        self.last_move = None
