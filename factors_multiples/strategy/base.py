"""Base strategy class for the automated opponent.

Defines the interface that all move selectors must implement.
"""

from abc import ABC, abstractmethod

from factors_multiples.models.board import Board
from factors_multiples.models.game_state import MoveHistory


class Strategy(ABC):
    """Abstract base class for move selection strategies."""

    name: str = "strategy"

    @abstractmethod
    def select_move(self, board: Board, history: MoveHistory) -> int:
        """Select a legal move for the player to move.

        Args:
            board: Current board
            history: Current move history

        Returns:
            Value to cross off. The caller applies it.

        Raises:
            EmptySelectionDomain: If no legal move exists.
        """
        pass
