"""
Errors raised by the TicTacToe engine.
"""


class TicTacToeError(Exception):
    """Base class for all engine errors."""


class InvalidSizeError(TicTacToeError, ValueError):
    """Board size is not a positive integer."""


class OutOfRangeIndexError(TicTacToeError, IndexError):
    """Linear index is outside [0, n*n)."""


class IllegalMoveError(TicTacToeError):
    """Move targets an occupied cell or uses a bad mark."""


class GameOverError(TicTacToeError):
    """Move attempted after the game already ended."""
