"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from gambit.game.controller import RulesEngine


@pytest.fixture
def engine() -> RulesEngine:
    """Started engine on the standard start position."""
    eng = RulesEngine()
    eng.start()
    return eng


@pytest.fixture
def engine_from_fen() -> Callable[[str], RulesEngine]:
    """Factory for a started engine on a custom position."""

    def make(fen: str) -> RulesEngine:
        eng = RulesEngine()
        eng.setup(fen)
        eng.start()
        return eng

    return make
