"""RulesEngine — turn and state controller for a single game.

Owns one :class:`GameState` and is its only writer.  Every request that
does not take effect leaves the state untouched and is reported through the
return value, never through an exception.
Emits events via simple callbacks so a UI or a clock can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gambit.core import legality
from gambit.core.attacks import is_in_check
from gambit.core.board import Board
from gambit.core.castling import CastlingRights, castle_side_for, rook_home
from gambit.core.enums import PROMOTION_TYPES, Color, PieceType
from gambit.core.errors import Rejection
from gambit.core.fen import parse_fen, to_fen
from gambit.core.movement import is_castling_shape
from gambit.core.piece import Piece
from gambit.core.types import Square, in_bounds, square_name
from gambit.game.interfaces import (
    Active,
    Checkmate,
    EndReason,
    GamePhase,
    NotStarted,
    Stalemate,
)
from gambit.game.state import GameState, PendingPromotion

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Square, Piece], None]  # from, to, moved piece
TurnCallback = Callable[[Color], None]  # side now to move
PromotionCallback = Callable[[Square, Color], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_switched: list[TurnCallback] = field(default_factory=list)
    on_promotion_pending: list[PromotionCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of a move or promotion request."""

    applied: bool
    rejection: Rejection | None = None

    def __bool__(self) -> bool:
        return self.applied


_APPLIED = MoveOutcome(True)


def _rejected(reason: Rejection) -> MoveOutcome:
    _LOGGER.debug("Rejected: %s", reason)
    return MoveOutcome(False, reason)


# ── Engine ───────────────────────────────────────────────────────────────────


class RulesEngine:
    """Validates and applies moves, promotions and end-of-game detection.

    Not thread-safe: calls must be serialised by the caller.
    """

    __slots__ = ("_state", "events")

    def __init__(self, events: GameEvents | None = None) -> None:
        self._state = GameState()
        self.events = events if events is not None else GameEvents()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Standard start position, phase NotStarted, markers cleared."""
        self._state.reset()
        self._emit_phase()

    def setup(self, fen: str) -> None:
        """Load a custom position.  The game is left NotStarted."""
        record = parse_fen(fen)
        self._state.reset()
        self._state.board = record.board
        self._state.side_to_move = record.side_to_move
        self._state.castling = record.castling
        self._emit_phase()

    def start(self) -> None:
        """NotStarted → Active.  No-op in any other phase."""
        if not isinstance(self._state.phase, NotStarted):
            return
        self._set_phase(Active())

    def force_timeout(self, color: Color) -> bool:
        """*color* ran out of time: the opponent wins."""
        if not isinstance(self._state.phase, Active):
            return False
        self._state.pending_promotion = None
        self._set_phase(Checkmate(color.opposite, EndReason.TIMEOUT))
        return True

    # ── Moves ────────────────────────────────────────────────────────────

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Apply the move if it is legal.  Returns whether it was applied."""
        return self.attempt_move(from_sq, to_sq).applied

    def attempt_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Like :meth:`submit_move`, but reports why a move was rejected."""
        state = self._state
        if not isinstance(state.phase, Active):
            return _rejected(Rejection.NOT_ACTIVE)
        if state.pending_promotion is not None:
            return _rejected(Rejection.PROMOTION_PENDING)
        if not (in_bounds(from_sq) and in_bounds(to_sq)):
            return _rejected(Rejection.OUT_OF_BOUNDS)

        piece = state.board.piece_at(from_sq)
        if piece is None:
            return _rejected(Rejection.NO_PIECE)
        if piece.color != state.side_to_move:
            return _rejected(Rejection.WRONG_TURN)

        reason = legality.check_legal(state.board, state.castling, from_sq, to_sq)
        if reason is not None:
            return _rejected(reason)

        self._execute(piece, from_sq, to_sq)

        if piece.piece_type == PieceType.PAWN and to_sq[0] == piece.color.promotion_rank:
            state.pending_promotion = PendingPromotion(to_sq, piece.color)
            _LOGGER.info(
                "Promotion pending on %s for %s", square_name(to_sq), piece.color
            )
            for cb in self.events.on_promotion_pending:
                cb(to_sq, piece.color)
            return _APPLIED

        self._finish_turn()
        return _APPLIED

    def resolve_promotion(self, kind: PieceType) -> bool:
        """Replace the pending pawn with *kind*.  Returns whether applied."""
        return self.attempt_promotion(kind).applied

    def attempt_promotion(self, kind: PieceType) -> MoveOutcome:
        state = self._state
        pending = state.pending_promotion
        if pending is None:
            return _rejected(Rejection.NO_PROMOTION_PENDING)
        if not isinstance(state.phase, Active):
            return _rejected(Rejection.NOT_ACTIVE)
        if kind not in PROMOTION_TYPES:
            return _rejected(Rejection.INVALID_PROMOTION_KIND)

        state.board.set_piece(pending.square, Piece(pending.color, kind))
        state.pending_promotion = None
        _LOGGER.info(
            "Pawn on %s promoted to %s", square_name(pending.square), kind.name.lower()
        )
        self._finish_turn()
        return _APPLIED

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self._state.board.piece_at(sq) if in_bounds(sq) else None

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def board(self) -> Board:
        """A copy of the current board."""
        return self._state.board.copy()

    @property
    def castling_rights(self) -> CastlingRights:
        return self._state.castling.copy()

    @property
    def last_move(self) -> tuple[Square, Square] | None:
        return self._state.last_move

    @property
    def is_promotion_pending(self) -> bool:
        return self._state.pending_promotion is not None

    @property
    def pending_promotion_square(self) -> Square | None:
        pending = self._state.pending_promotion
        return pending.square if pending is not None else None

    def is_in_check(self, color: Color) -> bool:
        return is_in_check(self._state.board, color)

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Full legality of a move on the current board, ignoring turn."""
        if not (in_bounds(from_sq) and in_bounds(to_sq)):
            return False
        return legality.is_legal(self._state.board, self._state.castling, from_sq, to_sq)

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        """Where the piece on *from_sq* may go, if it is its side's turn."""
        state = self._state
        piece = self.piece_at(from_sq)
        if piece is None or piece.color != state.side_to_move:
            return []
        return legality.legal_destinations(state.board, state.castling, from_sq)

    def fen(self) -> str:
        state = self._state
        return to_fen(state.board, state.side_to_move, state.castling)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _execute(self, piece: Piece, from_sq: Square, to_sq: Square) -> None:
        state = self._state
        board = state.board
        castling = is_castling_shape(piece, from_sq, to_sq)

        state.castling.record_move(piece, from_sq)
        board.set_piece(from_sq, None)
        board.set_piece(to_sq, piece)

        if castling:
            side = castle_side_for(to_sq)
            rook_from = rook_home(piece.color, side)
            rook_to = (rook_from[0], side.rook_target_file)
            board.set_piece(rook_to, board.piece_at(rook_from))
            board.set_piece(rook_from, None)

        state.last_move = (from_sq, to_sq)
        for cb in self.events.on_move:
            cb(from_sq, to_sq, piece)

    def _finish_turn(self) -> None:
        state = self._state
        mover = state.side_to_move
        state.side_to_move = mover.opposite
        for cb in self.events.on_turn_switched:
            cb(state.side_to_move)
        # A turn-switch listener may already have ended the game.
        if isinstance(state.phase, Active):
            self._detect_terminal(mover)

    def _detect_terminal(self, mover: Color) -> None:
        state = self._state
        to_move = state.side_to_move
        if legality.has_any_legal_move(state.board, state.castling, to_move):
            return
        if is_in_check(state.board, to_move):
            self._set_phase(Checkmate(mover))
        else:
            self._set_phase(Stalemate())

    def _set_phase(self, phase: GamePhase) -> None:
        self._state.phase = phase
        _LOGGER.info("Game phase: %s", phase)
        self._emit_phase()

    def _emit_phase(self) -> None:
        for cb in self.events.on_phase_changed:
            cb(self._state.phase)
