"""Main entry point for the Factors and Multiples terminal game."""

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from factors_multiples.config import Config, GameMode, load_config
from factors_multiples.game.engine import GameSession
from factors_multiples.strategy.lookahead import LookaheadStrategy
from factors_multiples.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Factors and Multiples: cross off a factor or multiple of the last number"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--size",
        type=int,
        help="Play on the numbers 1..SIZE (overrides config)",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=[m.value for m in GameMode],
        help="pvp = Player vs Player, ai = Player vs AI (overrides config)",
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play as Player 1",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the AI's tie-breaking",
    )
    parser.add_argument(
        "--ai-delay",
        type=float,
        help="Seconds the AI pauses before moving (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line overrides to a loaded config."""
    if args.size is not None:
        config.game.size = args.size
    if args.mode:
        config.game.mode = GameMode(args.mode)
    if args.ai_first:
        config.game.mode = GameMode.AI
        config.game.automated_player = 1
    if args.seed is not None:
        config.game.seed = args.seed
    if args.ai_delay is not None:
        config.game.ai_delay = args.ai_delay
    if args.verbose:
        config.logging.level = "DEBUG"
    return config


def run_game_loop(
    session: GameSession,
    display: GameDisplay,
    read_line: Callable[[str], str] = input,
    ai_delay: float = 0.0,
) -> None:
    """Run games until the user quits.

    Args:
        session: Session to drive
        display: Output display
        read_line: Prompt function (input() by default)
        ai_delay: Seconds to pause before each AI move
    """
    display.print_game_start(session.size, session.mode.value)
    display.print_help()

    while True:
        display.print_board(session.board, session.history)
        display.print_history(session.history)

        if session.is_over:
            winner = session.outcome.winner
            display.print_game_over(
                winner,
                automated=session.mode == GameMode.AI and winner == session.automated_player,
            )
            command = read_line("r=play again, q=quit> ").strip().lower()
            if command == "r":
                session.reset()
                continue
            return

        if session.is_automated_turn:
            display.print_turn(session.current_player, automated=True)
            if ai_delay > 0:
                time.sleep(ai_delay)
            player = session.current_player
            value = session.play_automated_move()
            display.print_move(player, value, automated=True)
            continue

        display.print_turn(session.current_player)
        command = read_line("move> ").strip().lower()

        if command == "q":
            return
        if command == "r":
            session.reset()
            continue
        if command == "h":
            display.print_legal_moves(session.legal_moves)
            continue
        if command == "u":
            _undo(session, display)
            continue

        try:
            value = int(command)
        except ValueError:
            display.print_help()
            continue

        player = session.current_player
        result = session.submit_move(value)
        if result.is_valid:
            display.print_move(player, value)
        else:
            display.print_invalid_move(result.error_message)


def _undo(session: GameSession, display: GameDisplay) -> None:
    """Undo back to the human player's previous turn."""
    plies = 1
    if session.mode == GameMode.AI and len(session.history) >= 2:
        # Also take back the AI's reply so the human is on move again
        plies = 2
    try:
        session.undo(plies)
    except ValueError as e:
        display.print_invalid_move(str(e))


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)
    try:
        config = apply_overrides(load_config(args.config), args)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(config.logging.level)

    session = GameSession(
        config,
        strategy=LookaheadStrategy(random.Random(config.game.seed)),
    )
    display = GameDisplay(show_history=config.logging.show_history)

    try:
        run_game_loop(session, display, ai_delay=config.game.ai_delay)
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted by user")
        return 0
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
