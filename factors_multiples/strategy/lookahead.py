"""Two-ply mobility lookahead.

Strategy:
- Phase 1: keep the moves that leave the opponent the fewest replies.
- Phase 2 (only on a tie): for each remaining move, assume the opponent
  replies so as to leave us the fewest options, and keep the moves where
  that worst case is largest. A move with no opponent reply scores infinity.
- Remaining ties are broken uniformly at random.
"""

import logging
import math
import random

from factors_multiples.errors import EmptySelectionDomain
from factors_multiples.game.rules import legal_moves
from factors_multiples.models.board import Board
from factors_multiples.models.game_state import MoveHistory
from factors_multiples.strategy.base import Strategy

logger = logging.getLogger(__name__)


def opponent_mobility(board: Board, move: int) -> int:
    """Count the replies available after move is played."""
    return len(legal_moves(board.cross(move), move))


def self_mobility(board: Board, move: int) -> float:
    """Worst-case count of our options after move and any opponent reply.

    Returns math.inf when the opponent has no reply at all.
    """
    after = board.cross(move)
    replies = legal_moves(after, move)
    if not replies:
        return math.inf
    return min(len(legal_moves(after.cross(reply), reply)) for reply in replies)


class LookaheadStrategy(Strategy):
    """Mobility heuristic searching two plies ahead.

    Args:
        rng: Random source for the final tie-break. Pass a seeded
            random.Random for reproducible games.
    """

    name = "lookahead"

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def select_move(self, board: Board, history: MoveHistory) -> int:
        last = history.last_move
        moves = legal_moves(board, last)
        if not moves:
            raise EmptySelectionDomain(
                f"No legal move after {last} with {len(history)} moves played"
            )

        scores = {m: opponent_mobility(board, m) for m in moves}
        fewest = min(scores.values())
        best_moves = [m for m in moves if scores[m] == fewest]
        logger.debug(f"Opponent mobility: {scores} -> {best_moves}")

        if len(best_moves) == 1:
            return best_moves[0]

        self_scores = {m: self_mobility(board, m) for m in best_moves}
        most = max(self_scores.values())
        final_best = [m for m in best_moves if self_scores[m] == most]
        logger.debug(f"Self mobility: {self_scores} -> {final_best}")

        return self.rng.choice(final_best)


def select_automated_move(
    board: Board,
    history: MoveHistory,
    rng: random.Random | None = None,
) -> int:
    """Select the automated player's move with LookaheadStrategy.

    Raises:
        EmptySelectionDomain: If no legal move exists.
    """
    return LookaheadStrategy(rng).select_move(board, history)
