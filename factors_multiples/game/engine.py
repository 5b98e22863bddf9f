"""Game session controller.

Owns the current (board, history) snapshot and the stack of earlier
snapshots, validates human moves, and asks the strategy for automated moves.
"""

from __future__ import annotations

import logging
import random
from typing import Callable

from factors_multiples.config import Config, GameMode
from factors_multiples.errors import GameOverError
from factors_multiples.models.board import Board
from factors_multiples.models.game_state import GameOutcome, MoveHistory, Player
from factors_multiples.strategy.base import Strategy
from factors_multiples.strategy.lookahead import LookaheadStrategy

from .rules import apply_move, legal_moves, new_game, outcome, player_to_move
from .validator import MoveValidator, ValidationResult

logger = logging.getLogger(__name__)

__all__ = ["GameMode", "GameSession"]


class GameSession:
    """A single game between two players, one of which may be automated."""

    def __init__(
        self,
        config: Config | None = None,
        strategy: Strategy | None = None,
    ):
        """Initialize session.

        Args:
            config: Configuration (uses defaults if not provided)
            strategy: Move selector for the automated player (a
                LookaheadStrategy seeded from config if not provided)
        """
        self.config = config or Config()
        self.size = self.config.game.size
        self.mode = self.config.game.mode
        self.automated_player = Player(self.config.game.automated_player)
        self.strategy = strategy or LookaheadStrategy(random.Random(self.config.game.seed))
        self.validator = MoveValidator()

        self.board, self.history = new_game(self.size)
        self._snapshots: list[tuple[Board, MoveHistory]] = []

        self._on_move: Callable[[Player, int], None] | None = None
        self._on_game_end: Callable[[Player], None] | None = None

    def set_callbacks(
        self,
        on_move: Callable[[Player, int], None] | None = None,
        on_game_end: Callable[[Player], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_move: Called after each move (player, value)
            on_game_end: Called once when the game ends (winner)
        """
        self._on_move = on_move
        self._on_game_end = on_game_end

    @property
    def current_player(self) -> Player:
        """Get the player to move."""
        return player_to_move(self.history)

    @property
    def last_move(self) -> int | None:
        """Get the most recent move."""
        return self.history.last_move

    @property
    def legal_moves(self) -> list[int]:
        """Get the legal moves for the player to move."""
        return legal_moves(self.board, self.history.last_move)

    @property
    def outcome(self) -> GameOutcome:
        """Get the game outcome, derived from the current snapshot."""
        return outcome(self.board, self.history)

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self.outcome.is_over

    @property
    def is_automated_turn(self) -> bool:
        """Check if the automated player should move now."""
        return (
            self.mode == GameMode.AI
            and self.current_player == self.automated_player
            and not self.is_over
        )

    def submit_move(self, value: int) -> ValidationResult:
        """Play a move for the human player to move.

        Rejected moves leave the session unchanged.

        Args:
            value: Value to cross off

        Returns:
            ValidationResult (is_valid False with a message on rejection)
        """
        if self.is_over:
            result = ValidationResult(is_valid=False, error_message="The game is over.")
        elif self.is_automated_turn:
            result = ValidationResult(
                is_valid=False,
                error_message="Wait for the AI to move.",
            )
        else:
            result = self.validator.validate(self.board, self.history, value)

        if not result.is_valid:
            logger.warning(f"Rejected move {value}: {result.error_message}")
            return result

        self._play(value)
        return result

    def play_automated_move(self) -> int:
        """Let the strategy choose and play a move for the automated player.

        Returns:
            The value played

        Raises:
            GameOverError: If the game has already ended
            RuntimeError: If it is not the automated player's turn
        """
        if self.is_over:
            raise GameOverError("The game is over")
        if not self.is_automated_turn:
            raise RuntimeError(f"It is not the automated player's turn ({self.current_player.name})")

        value = self.strategy.select_move(self.board, self.history)
        logger.debug(f"{self.strategy.name} chose {value}")
        self._play(value)
        return value

    def undo(self, plies: int = 1) -> None:
        """Restore the snapshot from plies moves ago.

        Raises:
            ValueError: If fewer than plies moves have been played
        """
        if plies < 1 or plies > len(self._snapshots):
            raise ValueError(f"Cannot undo {plies} move(s); {len(self._snapshots)} played")

        self.board, self.history = self._snapshots[-plies]
        del self._snapshots[-plies:]
        logger.info(f"Undid {plies} move(s); history is now {self.history}")

    def reset(self, mode: GameMode | None = None) -> None:
        """Start a fresh game, optionally switching mode."""
        if mode is not None:
            self.mode = mode
        self.board, self.history = new_game(self.size)
        self._snapshots.clear()
        logger.info(f"New {self.size}-number game ({self.mode.value})")

    def _play(self, value: int) -> None:
        """Apply a validated move and fire callbacks."""
        player = self.current_player
        self._snapshots.append((self.board, self.history))
        self.board, self.history = apply_move(self.board, self.history, value)
        logger.info(f"Player {int(player)} crossed off {value}")

        if self._on_move:
            self._on_move(player, value)

        result = self.outcome
        if result.is_over:
            logger.info(f"Game over after {len(self.history)} moves: {result}")
            if self._on_game_end:
                self._on_game_end(result.winner)
