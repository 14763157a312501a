"""
Engine for n x n TicTacToe.
Handles the board, rules, and the random computer opponent.
"""

from .config import GameConfig
from .errors import (
    TicTacToeError,
    InvalidSizeError,
    OutOfRangeIndexError,
    IllegalMoveError,
    GameOverError,
)
from .game_state import Board, Cell, GameState, GameStatus, Outcome, Player
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import RandomPlayer

__version__ = "1.0.0"
