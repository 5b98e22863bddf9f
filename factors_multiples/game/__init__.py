"""Game logic.

The session controller lives in factors_multiples.game.engine and is not
re-exported here, since it depends on the strategy package, which in turn
depends on the rules.
"""

from .rules import (
    apply_move,
    is_legal,
    is_terminal,
    legal_moves,
    new_game,
    outcome,
    player_to_move,
)
from .validator import MoveValidator, ValidationResult

__all__ = [
    "MoveValidator",
    "ValidationResult",
    "apply_move",
    "is_legal",
    "is_terminal",
    "legal_moves",
    "new_game",
    "outcome",
    "player_to_move",
]
