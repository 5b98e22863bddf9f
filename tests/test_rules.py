"""Tests for the rule engine."""

import random

import pytest

from factors_multiples.errors import IllegalMove
from factors_multiples.game.rules import (
    apply_move,
    is_legal,
    is_terminal,
    legal_moves,
    new_game,
    outcome,
    player_to_move,
)
from factors_multiples.models import Board, MoveHistory, Player


def play(size: int, moves: list[int]) -> tuple[Board, MoveHistory]:
    """Play a sequence of moves from a fresh game."""
    board, history = new_game(size)
    for move in moves:
        board, history = apply_move(board, history, move)
    return board, history


class TestIsLegal:
    """Tests for is_legal."""

    def test_opening_even_and_half(self):
        """Test the opening rule on the default board."""
        assert is_legal(2, None)
        assert is_legal(50, None)
        assert not is_legal(52, None)
        assert not is_legal(7, None)

    def test_opening_scales_with_size(self):
        """Test the opening bound follows the board size."""
        assert is_legal(10, None, size=20)
        assert not is_legal(12, None, size=20)
        assert not is_legal(6, None, size=11)

    def test_factor_or_multiple(self):
        """Test the adjacency rule."""
        assert is_legal(2, 4)
        assert is_legal(8, 4)
        assert is_legal(1, 97)
        assert not is_legal(6, 4)
        assert not is_legal(3, 10)

    def test_non_positive_candidate(self):
        """Test candidates below 1 are never legal."""
        assert not is_legal(0, 4)
        assert not is_legal(-2, None)

    def test_symmetric(self):
        """Test the divisor/multiple relation is symmetric."""
        for x in range(1, 31):
            for y in range(1, 31):
                if x != y:
                    assert is_legal(x, y) == is_legal(y, x)


class TestLegalMoves:
    """Tests for legal_moves."""

    @pytest.mark.parametrize("size", [2, 5, 10, 11, 37, 100])
    def test_opening_moves(self, size):
        """Test opening moves are the even numbers up to size / 2."""
        board, history = new_game(size)
        expected = [v for v in range(2, size // 2 + 1) if v % 2 == 0]
        assert legal_moves(board, history.last_move) == expected

    def test_scenario_small_board(self):
        """Test N=10: open with 4, then its factors and multiples."""
        board, history = new_game(10)
        assert legal_moves(board, None) == [2, 4]

        board, history = apply_move(board, history, 4)
        replies = legal_moves(board, history.last_move)
        assert replies == [1, 2, 8]
        assert {m for m in replies if m in {2, 6, 8, 10}} == {2, 8}

    def test_crossed_excluded(self):
        """Test crossed numbers are never legal."""
        board, history = play(10, [4, 8])
        assert legal_moves(board, 8) == [1, 2]

    def test_played_number_not_replayable(self):
        """Test a move never appears in its own reply set."""
        board, history = new_game(100)
        for move in legal_moves(board, None):
            after, _ = apply_move(board, history, move)
            assert move not in legal_moves(after, move)

    def test_reproducible(self):
        """Test repeated calls return the same order."""
        board, _ = play(30, [6])
        assert legal_moves(board, 6) == legal_moves(board, 6)


class TestApplyMove:
    """Tests for apply_move."""

    def test_apply(self):
        """Test applying a legal move."""
        board, history = new_game(10)
        new_board, new_history = apply_move(board, history, 4)

        assert new_board.crossed == {4}
        assert new_history.moves == (4,)
        assert board.crossed == frozenset()
        assert history.moves == ()

    def test_factor_after_last(self):
        """Test playing a factor of the last move."""
        board, history = play(10, [4])
        board, history = apply_move(board, history, 2)
        assert history.moves == (4, 2)

    def test_illegal_move(self):
        """Test 6 cannot follow 4."""
        board, history = play(10, [4])
        with pytest.raises(IllegalMove) as exc_info:
            apply_move(board, history, 6)

        assert exc_info.value.candidate == 6
        assert exc_info.value.last_move == 4
        assert board.crossed == {4}
        assert history.moves == (4,)

    def test_illegal_opening(self):
        """Test odd opening moves are rejected."""
        board, history = new_game(10)
        with pytest.raises(IllegalMove):
            apply_move(board, history, 3)

    def test_crossed_move_rejected(self):
        """Test replaying a crossed number is rejected."""
        board, history = play(10, [4, 2, 1])
        with pytest.raises(IllegalMove, match="already been crossed off"):
            apply_move(board, history, 4)

    def test_illegal_move_is_value_error(self):
        """Test IllegalMove can be caught as ValueError."""
        board, history = new_game(10)
        with pytest.raises(ValueError):
            apply_move(board, history, 7)

    def test_snapshot_idempotence(self):
        """Test applying the same move twice from one snapshot gives equal results."""
        board, history = play(20, [6])
        first = apply_move(board, history, 3)
        second = apply_move(board, history, 3)

        assert first == second
        assert board.crossed == {6}


class TestTerminal:
    """Tests for turn and outcome derivation."""

    def test_player_to_move(self):
        """Test turn follows history length."""
        assert player_to_move(MoveHistory()) == Player.ONE
        assert player_to_move(MoveHistory(moves=(4,))) == Player.TWO
        assert player_to_move(MoveHistory(moves=(4, 8))) == Player.ONE

    def test_opening_not_terminal(self):
        """Test an empty game is in progress."""
        board, history = new_game(10)
        assert not is_terminal(board, history)
        assert not outcome(board, history).is_over

    def test_won_by_player_two(self):
        """Test Player 1 loses with no reply to 7."""
        board, history = play(10, [4, 8, 1, 7])
        assert is_terminal(board, history)
        assert outcome(board, history).winner == Player.TWO

    def test_won_by_player_one(self):
        """Test Player 2 loses with no reply to 9."""
        board, history = play(10, [2, 1, 9, 3, 6])
        assert legal_moves(board, 6) == []
        assert outcome(board, history).winner == Player.ONE

    @pytest.mark.parametrize("seed", range(5))
    def test_random_playthrough_terminates(self, seed):
        """Test random games end within size moves."""
        rng = random.Random(seed)
        board, history = new_game(100)
        while True:
            moves = legal_moves(board, history.last_move)
            if not moves:
                break
            board, history = apply_move(board, history, rng.choice(moves))
            assert len(history) <= 100

        assert len(history) > 0
        assert outcome(board, history).is_over
        assert len(set(history.moves)) == len(history)
