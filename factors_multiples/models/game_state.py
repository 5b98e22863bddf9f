"""Move history, player and outcome models."""

from enum import IntEnum

from pydantic import BaseModel


class Player(IntEnum):
    """Player number (Player 1 always opens)."""

    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        """Get the other player."""
        return Player.TWO if self is Player.ONE else Player.ONE


class MoveHistory(BaseModel, frozen=True):
    """Played values in play order (append-only)."""

    moves: tuple[int, ...] = ()

    @property
    def last_move(self) -> int | None:
        """Get the most recent move, or None before the opening move."""
        return self.moves[-1] if self.moves else None

    def append(self, value: int) -> "MoveHistory":
        """Return a new history with value appended."""
        return MoveHistory(moves=self.moves + (value,))

    def player_of(self, index: int) -> Player:
        """Get the player who made the move at index."""
        return Player.ONE if index % 2 == 0 else Player.TWO

    def __len__(self) -> int:
        return len(self.moves)

    def __str__(self) -> str:
        if not self.moves:
            return "[]"
        return "[" + ", ".join(str(m) for m in self.moves) + "]"


class GameOutcome(BaseModel, frozen=True):
    """Either in progress (no winner) or won by a player."""

    winner: Player | None = None

    @property
    def is_over(self) -> bool:
        """Check if the game has been won."""
        return self.winner is not None

    def __str__(self) -> str:
        if self.winner is None:
            return "In progress"
        return f"Player {int(self.winner)} wins"
