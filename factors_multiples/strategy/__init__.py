"""Strategy module for the automated opponent."""

from factors_multiples.strategy.base import Strategy
from factors_multiples.strategy.lookahead import LookaheadStrategy, select_automated_move

__all__ = ["Strategy", "LookaheadStrategy", "select_automated_move"]
