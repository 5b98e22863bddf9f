"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from factors_multiples.models.board import Board
    from factors_multiples.models.game_state import MoveHistory, Player

GRID_COLUMNS = 10


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def format_board(board: "Board", last_move: int | None = None) -> str:
    """Format the board as a grid.

    Crossed numbers are shown as "--" and the last move in brackets.

    Args:
        board: Board to format.
        last_move: Value to highlight.

    Returns:
        Multi-line string with GRID_COLUMNS numbers per row.
    """
    width = len(str(board.size))
    cells = []
    for number in board.numbers:
        if number.value == last_move:
            cell = f"[{number.value:>{width}}]"
        elif number.crossed:
            cell = f" {'-' * width} "
        else:
            cell = f" {number.value:>{width}} "
        cells.append(cell)

    rows = [cells[i:i + GRID_COLUMNS] for i in range(0, len(cells), GRID_COLUMNS)]
    return "\n".join("".join(row).rstrip() for row in rows)


def format_history(history: "MoveHistory") -> str:
    """Format the move history as "P1:4 P2:8 ...".

    Returns:
        Formatted history, or "(no moves)" before the opening move.
    """
    if not history.moves:
        return "(no moves)"
    return " ".join(
        f"P{int(history.player_of(i))}:{move}" for i, move in enumerate(history.moves)
    )


class GameDisplay:
    """Display game state to stdout."""

    def __init__(self, show_history: bool = True, ai_name: str = "AI"):
        """Initialize display.

        Args:
            show_history: Whether to show the move history each turn
            ai_name: Name shown for the automated player
        """
        self.show_history = show_history
        self.ai_name = ai_name

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 50)

    def print_game_start(self, size: int, mode: str) -> None:
        """Print game start message."""
        self.print_separator()
        print(f"FACTORS AND MULTIPLES (1-{size}, {mode})")
        self.print_separator()

    def print_board(self, board: "Board", history: "MoveHistory") -> None:
        """Print the number grid."""
        print()
        print(format_board(board, history.last_move))

    def print_history(self, history: "MoveHistory") -> None:
        """Print the move history (if show_history is enabled)."""
        if not self.show_history:
            return
        print(f"Move history: {format_history(history)}")

    def print_turn(self, player: "Player", automated: bool = False) -> None:
        """Print whose turn it is."""
        thinking = f" ({self.ai_name} is thinking...)" if automated else ""
        print(f"Current Player: {int(player)}{thinking}")

    def print_move(self, player: "Player", value: int, automated: bool = False) -> None:
        """Print a move."""
        name = self.ai_name if automated else f"Player {int(player)}"
        print(f"  -> {name} crossed off {value}")

    def print_legal_moves(self, moves: list[int]) -> None:
        """Print the legal moves."""
        print(f"Legal moves: {', '.join(str(m) for m in moves) or '(none)'}")

    def print_invalid_move(self, message: str) -> None:
        """Print an invalid move alert."""
        print(f"Invalid Move: {message}")

    def print_game_over(self, winner: "Player", automated: bool = False) -> None:
        """Print game end results."""
        self.print_separator()
        name = self.ai_name if automated else f"Player {int(winner)}"
        print(f"Game Over! {name} wins!")
        self.print_separator()

    def print_help(self) -> None:
        """Print prompt commands."""
        print("Enter a number to cross it off, or: h=legal moves, u=undo, r=reset, q=quit")
