"""Exceptions raised by the rule engine, move selector and session."""


class GameError(Exception):
    """Base class for game errors."""


class IllegalMove(GameError, ValueError):
    """A move was applied that is not in the current legal-move set."""

    def __init__(self, candidate: int, last_move: int | None, reason: str = ""):
        self.candidate = candidate
        self.last_move = last_move
        message = reason or (
            f"Illegal opening move: {candidate}"
            if last_move is None
            else f"Illegal move: {candidate} after {last_move}"
        )
        super().__init__(message)


class EmptySelectionDomain(GameError, RuntimeError):
    """The move selector was asked for a move in a terminal position."""


class GameOverError(GameError):
    """A session operation was attempted after the game ended."""
