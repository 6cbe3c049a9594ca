"""Tests for game phases."""

from gambit.core.enums import Color
from gambit.game.interfaces import (
    Active,
    Checkmate,
    EndReason,
    NotStarted,
    Stalemate,
    is_terminal,
)


class TestGamePhase:
    def test_terminal_phases(self) -> None:
        assert is_terminal(Checkmate(Color.WHITE))
        assert is_terminal(Stalemate())
        assert not is_terminal(NotStarted())
        assert not is_terminal(Active())

    def test_checkmate_carries_winner(self) -> None:
        phase = Checkmate(Color.BLACK)
        assert phase.winner == Color.BLACK
        assert phase.reason == EndReason.CHECKMATE
        assert phase != Checkmate(Color.WHITE)
        assert phase != Checkmate(Color.BLACK, EndReason.TIMEOUT)

    def test_str(self) -> None:
        assert str(Checkmate(Color.WHITE)) == "checkmate, white wins"
        assert str(Checkmate(Color.BLACK, EndReason.TIMEOUT)) == "black wins on time"
        assert str(Stalemate()) == "stalemate"
