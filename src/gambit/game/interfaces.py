"""Game phase states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TypeAlias

from gambit.core.enums import Color

# ── Game phase FSM states ────────────────────────────────────────────────────


class EndReason(IntEnum):
    """How a decisive game ended."""

    CHECKMATE = auto()
    TIMEOUT = auto()


@dataclass(frozen=True, slots=True)
class NotStarted:
    """Board is set up; moves are not accepted until ``start()``."""

    def __str__(self) -> str:
        return "not started"


@dataclass(frozen=True, slots=True)
class Active:
    """Game in progress."""

    def __str__(self) -> str:
        return "active"


@dataclass(frozen=True, slots=True)
class Checkmate:
    """Decisive result.  ``reason`` tells a mate from a lost clock."""

    winner: Color
    reason: EndReason = EndReason.CHECKMATE

    def __str__(self) -> str:
        if self.reason == EndReason.TIMEOUT:
            return f"{self.winner!s} wins on time"
        return f"checkmate, {self.winner!s} wins"


@dataclass(frozen=True, slots=True)
class Stalemate:
    """Drawn: side to move has no legal move and is not in check."""

    def __str__(self) -> str:
        return "stalemate"


GamePhase: TypeAlias = NotStarted | Active | Checkmate | Stalemate


def is_terminal(phase: GamePhase) -> bool:
    return isinstance(phase, (Checkmate, Stalemate))
