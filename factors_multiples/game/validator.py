"""Validation of moves submitted by a human player."""

from dataclasses import dataclass

from factors_multiples.models.board import Board
from factors_multiples.models.game_state import MoveHistory

from .rules import is_legal, player_to_move


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error_message: str = ""


class MoveValidator:
    """Validates submitted moves and explains rejections."""

    def validate(
        self,
        board: Board,
        history: MoveHistory,
        candidate: int,
    ) -> ValidationResult:
        """Validate a submitted move.

        Args:
            board: Current board
            history: Current move history
            candidate: Value the player wants to cross off

        Returns:
            ValidationResult
        """
        if not board.contains(candidate):
            return ValidationResult(
                is_valid=False,
                error_message=f"{candidate} is not on the board (1-{board.size})",
            )

        if board.is_crossed(candidate):
            return ValidationResult(
                is_valid=False,
                error_message=f"{candidate} has already been crossed off",
            )

        last = history.last_move
        if is_legal(candidate, last, board.size):
            return ValidationResult(is_valid=True)

        if last is None:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    "Player 1 must choose an even number less than or equal to "
                    f"{board.size // 2}."
                ),
            )

        player = player_to_move(history)
        return ValidationResult(
            is_valid=False,
            error_message=f"Player {int(player)} must choose a factor or multiple of {last}.",
        )
