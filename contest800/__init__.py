"""Solvers for three short contest problems and number-theory helpers."""

__version__ = "0.1.0"
__all__ = ["numtheory", "coins", "cover_in_water", "game_with_integers"]