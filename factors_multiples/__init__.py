"""Factors and Multiples number game."""

__version__ = "0.1.0"
