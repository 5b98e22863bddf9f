"""Game models."""

from .board import DEFAULT_SIZE, Board, Number
from .game_state import GameOutcome, MoveHistory, Player

__all__ = [
    "DEFAULT_SIZE",
    "Board",
    "Number",
    "GameOutcome",
    "MoveHistory",
    "Player",
]
