"""Tests for attack detection and check."""

from gambit.core.attacks import attackers_of, is_in_check, is_square_attacked
from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.types import parse_square


def sq(name: str) -> tuple[int, int]:
    return parse_square(name)


class TestSquareAttacked:
    def test_initial_third_rank_covered_by_knights_only(self) -> None:
        board = Board.initial()
        for name in ("a3", "c3", "f3", "h3"):
            assert is_square_attacked(board, sq(name), Color.BLACK)
        for name in ("a6", "c6", "f6", "h6"):
            assert is_square_attacked(board, sq(name), Color.WHITE)
        assert not is_square_attacked(board, sq("e3"), Color.BLACK)
        assert not is_square_attacked(board, sq("d6"), Color.WHITE)

    def test_initial_center_not_covered(self) -> None:
        board = Board.initial()
        assert not is_square_attacked(board, sq("e4"), Color.BLACK)
        assert not is_square_attacked(board, sq("e5"), Color.WHITE)

    def test_pawn_leaves_empty_diagonal_uncovered(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/6p1/4K2R")
        assert not is_square_attacked(board, sq("f1"), Color.WHITE)
        assert not is_square_attacked(board, sq("g1"), Color.WHITE)
        assert is_square_attacked(board, sq("h1"), Color.WHITE)

    def test_pawn_covers_occupied_diagonal(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/6p1/4KB2")
        assert is_square_attacked(board, sq("f1"), Color.WHITE)

    def test_defended_piece_counts_as_attacked(self) -> None:
        board = Board.from_fen("k7/8/8/8/8/3q4/4r3/4K3")
        assert is_square_attacked(board, sq("e2"), Color.WHITE)

    def test_slider_blocked(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/4P3/r3K3")
        assert is_square_attacked(board, sq("d1"), Color.WHITE)
        assert not is_square_attacked(board, sq("f1"), Color.WHITE)

    def test_castling_step_is_not_an_attack(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/8/4K3")
        assert not is_square_attacked(board, sq("g8"), Color.WHITE)
        assert not is_square_attacked(board, sq("c8"), Color.WHITE)

    def test_attackers_of(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/3n4/8/r3K3")
        assert sorted(attackers_of(board, sq("e1"), Color.WHITE)) == [
            sq("a1"),
            sq("d3"),
        ]


class TestInCheck:
    def test_initial_not_in_check(self) -> None:
        board = Board.initial()
        assert not is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_fools_mate_in_check(self) -> None:
        # After 1.f3 e5 2.g4 Qh4
        board = Board.from_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR")
        assert is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_knight_check(self) -> None:
        board = Board.from_fen("4k3/8/3N4/8/8/8/8/4K3")
        assert is_in_check(board, Color.BLACK)

    def test_missing_king_is_not_in_check(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/8/R7")
        assert not is_in_check(board, Color.WHITE)
