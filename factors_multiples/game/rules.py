"""Rule engine: move legality, legal-move sets and terminal detection.

Every function here is pure. Boards and histories are frozen models and are
never modified; applying a move returns a new snapshot.
"""

from factors_multiples.errors import IllegalMove
from factors_multiples.models.board import DEFAULT_SIZE, Board
from factors_multiples.models.game_state import GameOutcome, MoveHistory, Player


def is_legal(candidate: int, last_move: int | None, size: int = DEFAULT_SIZE) -> bool:
    """Check the factor/multiple rule for a candidate.

    Crossed-off state is not checked here; use legal_moves for that.

    Args:
        candidate: Value to play.
        last_move: Previous move, or None for the opening move.
        size: Board size (the opening bound is size / 2).

    Returns:
        True if candidate may follow last_move.
    """
    if candidate < 1:
        return False
    if last_move is None:
        return candidate % 2 == 0 and candidate * 2 <= size
    return last_move % candidate == 0 or candidate % last_move == 0


def legal_moves(board: Board, last_move: int | None) -> list[int]:
    """Get all uncrossed values that may follow last_move, ascending."""
    return [v for v in board.uncrossed() if is_legal(v, last_move, board.size)]


def apply_move(
    board: Board, history: MoveHistory, candidate: int
) -> tuple[Board, MoveHistory]:
    """Play candidate and return the new snapshot.

    Args:
        board: Current board.
        history: Current move history.
        candidate: Value to play.

    Returns:
        (board, history) with candidate crossed off and appended.

    Raises:
        IllegalMove: If candidate is not a legal move.
    """
    last = history.last_move
    if candidate not in legal_moves(board, last):
        reason = ""
        if board.contains(candidate) and board.is_crossed(candidate):
            reason = f"{candidate} has already been crossed off"
        raise IllegalMove(candidate, last, reason)
    return board.cross(candidate), history.append(candidate)


def new_game(size: int = DEFAULT_SIZE) -> tuple[Board, MoveHistory]:
    """Create the starting snapshot: all numbers open, no moves."""
    return Board(size=size), MoveHistory()


def player_to_move(history: MoveHistory) -> Player:
    """Get the player whose turn it is (Player 1 on even history length)."""
    return Player.ONE if len(history) % 2 == 0 else Player.TWO


def is_terminal(board: Board, history: MoveHistory) -> bool:
    """Check if the player to move has no legal move left."""
    return len(history) > 0 and not legal_moves(board, history.last_move)


def outcome(board: Board, history: MoveHistory) -> GameOutcome:
    """Derive the game outcome; the player unable to move loses."""
    if is_terminal(board, history):
        return GameOutcome(winner=player_to_move(history).opponent)
    return GameOutcome()
