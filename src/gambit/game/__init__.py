"""Game management layer: rules engine, phases and game state.

Quick start::

    from gambit.core.types import E2, E4
    from gambit.game import RulesEngine

    engine = RulesEngine()
    engine.start()
    engine.submit_move(E2, E4)
"""

from gambit.game.controller import GameEvents, MoveOutcome, RulesEngine
from gambit.game.interfaces import (
    Active,
    Checkmate,
    EndReason,
    GamePhase,
    NotStarted,
    Stalemate,
    is_terminal,
)
from gambit.game.state import GameState, PendingPromotion

__all__ = [
    # Phases
    "Active",
    "Checkmate",
    "EndReason",
    "GamePhase",
    "NotStarted",
    "Stalemate",
    "is_terminal",
    # Concrete
    "GameEvents",
    "GameState",
    "MoveOutcome",
    "PendingPromotion",
    "RulesEngine",
]
